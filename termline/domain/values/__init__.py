"""Domain value objects - immutable data structures."""

from .attributes import (
    CR,
    DEFAULT_CONTROL_CHARS,
    DEL,
    LF,
    Attributes,
    ControlChar,
    InputFlag,
    LocalFlag,
    OutputFlag,
)
from .file_permission import FilePermission
from .search import SearchDirection, SearchMatch
from .signal import Signal
from .terminal_dimensions import TerminalDimensions

__all__ = [
    "Attributes",
    "InputFlag",
    "OutputFlag",
    "LocalFlag",
    "ControlChar",
    "DEFAULT_CONTROL_CHARS",
    "CR",
    "DEL",
    "LF",
    "Signal",
    "SearchDirection",
    "SearchMatch",
    "FilePermission",
    "TerminalDimensions",
]
