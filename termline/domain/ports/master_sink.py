"""Master sink port - the controlling side of the terminal."""

from typing import Protocol


class MasterSink(Protocol):
    """Byte destination for echo and post-processed output.

    Any binary file object (``sys.stdout.buffer``, ``io.BytesIO``) fits.
    """

    def write(self, data: bytes) -> int | None:
        """Write bytes to the master side."""
        ...

    def flush(self) -> None:
        """Push buffered bytes to the master side."""
        ...
