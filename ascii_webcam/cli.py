#!/usr/bin/env python3
"""
Interactive CLI for ASCII Webcam.

Starts the live camera feed in fullscreen with:
- A frame producer thread (capture and resize)
- An input listener thread (keyboard and resize events)
- The render loop on the main thread
"""

import argparse
import logging
import sys
from typing import Optional

from .camera import Camera, MockCamera
from .channels import open_channels
from .config import AppConfig
from .controls import HELP_TEXT, InputListener
from .converter import CharacterSets
from .display import Screen
from .errors import CameraError, ScreenError
from .logging_config import setup_logging, suspend_console_logging
from .producer import FrameProducer
from .render import DisplayState, RenderLoop

logger = logging.getLogger(__name__)


class ASCIIWebcamApp:
    """
    Main application class for ASCII Webcam.

    Handles startup, the render loop and cleanup.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        """
        Initialize the application.

        Args:
            config: Runtime settings (defaults if omitted)
        """
        self.config = (config or AppConfig()).validate()

    def make_camera(self) -> Camera:
        if self.config.mock:
            return MockCamera(pattern=self.config.mock_pattern)
        return Camera(source=self.config.camera_index)

    def make_screen(self) -> Screen:
        return Screen(resize_poll_interval=self.config.resize_poll_interval)

    def run(self) -> int:
        """
        Run live camera mode until the user quits.

        Returns:
            Exit code (0 for success, 1 on startup failure)
        """
        config = self.config
        camera = self.make_camera()

        try:
            camera.open()
        except CameraError as e:
            logger.error("Error opening capture device: %s", e)
            return 1

        screen = self.make_screen()
        try:
            screen.init()
        except ScreenError as e:
            logger.error("%s", e)
            camera.close()
            return 1

        frames, commands = open_channels("frames", "commands")
        producer = FrameProducer(camera, frames, screen.size, config.status_rows)
        listener = InputListener(screen, commands)
        loop = RenderLoop(
            screen,
            frames,
            commands,
            state=DisplayState(color_enabled=config.color, ramp=config.make_ramp()),
            snapshot_dir=config.snapshot_dir,
            status_rows=config.status_rows,
        )

        producer.start()
        listener.start()

        try:
            with suspend_console_logging():
                code = loop.run()
        except KeyboardInterrupt:
            logger.info("Interrupted")
            code = 0
        finally:
            screen.fini()
            if producer.shutdown():
                camera.close()
            else:
                logger.warning("Frame producer did not stop, leaving camera to process exit")

        return code


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ascii-webcam",
        description="ASCII Webcam - Render your camera feed as ASCII art in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  ascii-webcam                  Start with camera 0
  ascii-webcam -c               Start with color enabled
  ascii-webcam --camera 1       Use the second camera
  ascii-webcam --mock           Test with mock camera (no webcam needed)
{HELP_TEXT}"""
    )

    # Camera options
    parser.add_argument(
        "--camera",
        type=int,
        default=0,
        help="Camera device ID (default: 0)"
    )
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use mock camera for testing"
    )
    parser.add_argument(
        "--pattern",
        choices=list(MockCamera.PATTERNS),
        default="gradient",
        help="Mock camera test pattern"
    )

    # Display options
    parser.add_argument(
        "-c", "--color",
        action="store_true",
        help="Start with colored output"
    )
    parser.add_argument(
        "--ramp",
        default="webcam",
        help="Glyph ramp, dark to bright: a preset name (webcam, standard, "
             "blocks, minimal) or literal characters"
    )
    parser.add_argument(
        "--max-ramp",
        type=int,
        default=None,
        help="Longest the ramp may grow when decreasing brightness (default: unbounded)"
    )

    # Output options
    parser.add_argument(
        "--snapshot-dir",
        default=".",
        help="Directory for screenshots (default: current directory)"
    )
    parser.add_argument(
        "--log-file",
        help="Write logs to this file"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def main(argv=None):
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = AppConfig(
        camera_index=args.camera,
        mock=args.mock,
        mock_pattern=args.pattern,
        color=args.color,
        ramp=CharacterSets.get(args.ramp),
        max_ramp_length=args.max_ramp,
        snapshot_dir=args.snapshot_dir,
        log_file=args.log_file,
        debug=args.debug,
    )
    try:
        config.validate()
    except ValueError as e:
        parser.error(str(e))

    setup_logging(log_file=config.log_file, debug=config.debug)

    app = ASCIIWebcamApp(config)
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
