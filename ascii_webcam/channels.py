"""
Unbuffered message channels and a fair selector.

A sender blocks until the receiver has taken its message, so producers
are paced by the consumer. The selector waits on several channels at once
and serves whichever is ready, rotating its starting point so that no
channel is favoured.
"""

import queue
import threading
from typing import Any, Generic, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


class Channel(Generic[T]):
    """
    Single-consumer rendezvous channel.

    Built on a one-slot queue: ``send`` puts the item and then waits on
    ``join`` until the receiver has marked it done.
    """

    def __init__(self, name: str, notifier: Optional[threading.Condition] = None):
        """
        Initialize the channel.

        Args:
            name: Channel name used in logs and reprs
            notifier: Condition shared with a Selector (created if omitted)
        """
        self.name = name
        self.notifier = notifier or threading.Condition()
        self._queue: "queue.Queue[T]" = queue.Queue(maxsize=1)

    def __repr__(self) -> str:
        return f"Channel({self.name!r})"

    def send(self, item: T):
        """Send an item, blocking until it has been received."""
        self._queue.put(item)
        with self.notifier:
            self.notifier.notify_all()
        self._queue.join()

    def try_receive(self) -> Tuple[bool, Optional[T]]:
        """
        Take a pending item without blocking.

        Returns:
            (True, item) if an item was pending, (False, None) otherwise
        """
        try:
            item = self._queue.get_nowait()
        except queue.Empty:
            return False, None
        self._queue.task_done()
        return True, item

    def receive(self) -> T:
        """Block until an item arrives and return it."""
        with self.notifier:
            while True:
                ready, item = self.try_receive()
                if ready:
                    return item
                self.notifier.wait()


class Selector:
    """
    Waits on several channels sharing one condition.

    Each call to ``select`` starts polling at the channel after the one
    served last, so a busy channel cannot starve the others.
    """

    def __init__(self, channels: Sequence[Channel]):
        if not channels:
            raise ValueError("Selector needs at least one channel")
        notifier = channels[0].notifier
        if any(channel.notifier is not notifier for channel in channels):
            raise ValueError("All channels must share the selector's condition")
        self.channels: List[Channel] = list(channels)
        self._notifier = notifier
        self._next = 0

    def select(self) -> Tuple[Channel, Any]:
        """
        Block until any channel has an item.

        Returns:
            (channel, item) for the channel that was served
        """
        count = len(self.channels)
        with self._notifier:
            while True:
                for offset in range(count):
                    index = (self._next + offset) % count
                    channel = self.channels[index]
                    ready, item = channel.try_receive()
                    if ready:
                        self._next = (index + 1) % count
                        return channel, item
                self._notifier.wait()


def open_channels(*names: str) -> List[Channel]:
    """Create channels sharing one condition, ready for a Selector."""
    notifier = threading.Condition()
    return [Channel(name, notifier) for name in names]
