"""Dependency container - holds all wired dependencies."""

from dataclasses import dataclass

from termline.application.services import LineDisciplineTerminal, LineReader
from termline.config import Config
from termline.domain import History, HistoryStore, MasterSink


@dataclass(frozen=True)
class Container:
    """Immutable dependency container.

    All dependencies are wired at startup and cannot be replaced.
    """

    config: Config

    # Session objects
    terminal: LineDisciplineTerminal
    history: History
    line_reader: LineReader

    # Adapters
    master: MasterSink
    history_store: HistoryStore | None = None

    def shutdown(self) -> None:
        """Close the terminal and persist history."""
        self.terminal.close()
        self.history.stop()
