"""Logging setup for ASCII Webcam.

Usage:
    from ascii_webcam.logging_config import setup_logging

    # Warnings to stderr only (keeps the fullscreen display clean):
    setup_logging()

    # Everything at INFO or above to a rotating file:
    setup_logging(log_file="ascii-webcam.log")
"""

import logging
import sys
from contextlib import contextmanager
from logging.handlers import RotatingFileHandler
from typing import Iterator, List, Optional

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Log rotation defaults
MAX_BYTES = 5 * 1024 * 1024  # 5 MB
BACKUP_COUNT = 3


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    fmt: str = DEFAULT_FORMAT,
    max_bytes: int = MAX_BYTES,
    backup_count: int = BACKUP_COUNT,
    *,
    debug: bool = False,
) -> None:
    """Configure the root logger once per process.

    Without a log file only warnings reach stderr, and only while the
    screen is not active (see suspend_console_logging).
    """
    if debug:
        level = logging.DEBUG

    handlers: List[logging.Handler] = []
    if log_file:
        handlers.append(
            RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
        )
    else:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(max(level, logging.WARNING))
        handlers.append(stderr_handler)

    logging.basicConfig(level=level, format=fmt, handlers=handlers, force=True)

    if log_file:
        logging.getLogger(__name__).info("Logging to %s", log_file)


def _is_console_handler(handler: logging.Handler) -> bool:
    return (
        isinstance(handler, logging.StreamHandler)
        and not isinstance(handler, logging.FileHandler)
        and getattr(handler, "stream", None) in (sys.stderr, sys.stdout)
    )


@contextmanager
def suspend_console_logging() -> Iterator[None]:
    """Detach stderr/stdout handlers from the root logger for the duration.

    Used while the fullscreen display owns the terminal. File handlers keep
    receiving records; console handlers are restored on exit.
    """
    root = logging.getLogger()
    console = [h for h in root.handlers if _is_console_handler(h)]
    for handler in console:
        root.removeHandler(handler)
    null_handler = logging.NullHandler()
    root.addHandler(null_handler)
    try:
        yield
    finally:
        root.removeHandler(null_handler)
        for handler in console:
            root.addHandler(handler)
