"""Pure domain layer - no infrastructure dependencies."""

# Entities
from .entities import DEFAULT_MAX_SIZE, History

# Ports
from .ports import HistoryStore, MasterSink, SignalListener, SlaveChannel

# Services
from .services import LineDiscipline, SignalDispatcher, compose_listeners

# Value Objects
from .values import (
    CR,
    DEFAULT_CONTROL_CHARS,
    DEL,
    LF,
    Attributes,
    ControlChar,
    FilePermission,
    InputFlag,
    LocalFlag,
    OutputFlag,
    SearchDirection,
    SearchMatch,
    Signal,
    TerminalDimensions,
)

__all__ = [
    # Values
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
    # Entities
    "History",
    "DEFAULT_MAX_SIZE",
    # Services
    "LineDiscipline",
    "SignalDispatcher",
    "compose_listeners",
    # Ports
    "HistoryStore",
    "MasterSink",
    "SignalListener",
    "SlaveChannel",
]
