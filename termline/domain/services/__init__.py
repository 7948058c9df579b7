"""Domain services - line discipline and signal dispatch."""

from .line_discipline import LineDiscipline
from .signal_dispatcher import SignalDispatcher, compose_listeners

__all__ = [
    "LineDiscipline",
    "SignalDispatcher",
    "compose_listeners",
]
