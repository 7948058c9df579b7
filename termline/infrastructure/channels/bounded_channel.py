"""Bounded byte channel between the line discipline and the application."""

import threading
from collections import deque

from termline.domain import LF

PIPE_SIZE = 1024


class BoundedChannel:
    """Thread-safe bounded byte pipe.

    One producer writes bytes and publishes them with ``flush``; readers
    only see published bytes. A full channel publishes what it holds and
    blocks the writer until a reader frees space, so bytes are never
    dropped.
    """

    def __init__(self, capacity: int = PIPE_SIZE) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._buffer: deque[int] = deque()
        self._published = 0
        self._closed = False
        self._cond = threading.Condition()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def available(self) -> int:
        """Number of published bytes a reader can take without blocking."""
        with self._cond:
            return self._published

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, byte: int) -> None:
        """Append one byte, blocking while the channel is full.

        Raises:
            BrokenPipeError: The channel is closed.
        """
        with self._cond:
            while len(self._buffer) >= self._capacity and not self._closed:
                self._publish()
                self._cond.wait()
            if self._closed:
                raise BrokenPipeError("slave channel is closed")
            self._buffer.append(byte)

    def flush(self) -> None:
        """Publish every written byte and wake readers."""
        with self._cond:
            self._publish()

    def read(self, size: int = 1) -> bytes:
        """Read up to ``size`` published bytes.

        Blocks until at least one byte is available.

        Returns:
            The bytes read, or b"" once the channel is closed and drained.
        """
        with self._cond:
            while self._published == 0:
                if self._closed:
                    return b""
                self._cond.wait()
            count = min(size, self._published)
            data = bytes(self._buffer.popleft() for _ in range(count))
            self._published -= count
            self._cond.notify_all()
            return data

    def readline(self) -> bytes:
        """Read through the next LF, or whatever remains at EOF."""
        line = bytearray()
        while True:
            chunk = self.read(1)
            if not chunk:
                break
            line += chunk
            if chunk[0] == LF:
                break
        return bytes(line)

    def close(self) -> None:
        """Close the channel; pending bytes stay readable."""
        with self._cond:
            self._closed = True
            self._publish()

    def _publish(self) -> None:
        self._published = len(self._buffer)
        self._cond.notify_all()
