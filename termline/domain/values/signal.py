"""Terminal signals raised by the line discipline."""

from enum import Enum


class Signal(Enum):
    """Signals a control character can raise."""

    INT = "INT"
    QUIT = "QUIT"
    SUSP = "SUSP"
    INFO = "INFO"
