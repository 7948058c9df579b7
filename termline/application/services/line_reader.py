"""Line reader service - submitted lines from the slave side into history."""

import logging

from termline.domain import History

from .line_terminal import LineDisciplineTerminal

logger = logging.getLogger(__name__)


class LineReader:
    """Reads complete lines from a terminal and records them in history."""

    def __init__(
        self,
        terminal: LineDisciplineTerminal,
        history: History,
        encoding: str = "utf-8",
    ) -> None:
        self._terminal = terminal
        self._history = history
        self._encoding = encoding

    @property
    def history(self) -> History:
        return self._history

    def read_line(self) -> str | None:
        """Block until a line is submitted.

        Returns:
            The line without its terminator, or None at end of input.
        """
        raw = self._terminal.input().readline()
        if not raw:
            return None

        line = raw.rstrip(b"\r\n").decode(self._encoding, errors="replace")
        if line.strip():
            self._history.push(line)
        logger.debug("Line submitted length=%d", len(line))
        return line
