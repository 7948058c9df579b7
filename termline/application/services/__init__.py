"""Application services - use case orchestration."""

from .line_reader import LineReader
from .line_terminal import LineDisciplineTerminal, SlaveOutput

__all__ = [
    "LineDisciplineTerminal",
    "LineReader",
    "SlaveOutput",
]
