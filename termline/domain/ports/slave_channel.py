"""Slave channel port - bounded byte pipe toward the application."""

from typing import Protocol


class SlaveChannel(Protocol):
    """Bounded channel the line discipline feeds accepted bytes into.

    Infrastructure layer implements this with a blocking pipe.
    """

    def write(self, byte: int) -> None:
        """Append one byte, blocking while the channel is full."""
        ...

    def flush(self) -> None:
        """Make every written byte visible to readers."""
        ...

    def close(self) -> None:
        """Close the write side; readers drain then see EOF."""
        ...
