"""Terminal attributes value object (termios-style flag groups)."""

from dataclasses import dataclass, field
from enum import Enum

from .signal import Signal

CR = 0x0D
LF = 0x0A
DEL = 0x7F

# Cooked-mode control characters
DEFAULT_CONTROL_CHARS = {
    "INTR": 0x03,  # ^C
    "QUIT": 0x1C,  # ^\
    "SUSP": 0x1A,  # ^Z
    "STATUS": 0x14,  # ^T
}


class InputFlag(Enum):
    """Input processing flags."""

    IGNCR = "IGNCR"
    ICRNL = "ICRNL"
    INLCR = "INLCR"


class OutputFlag(Enum):
    """Output post-processing flags."""

    OPOST = "OPOST"
    ONLCR = "ONLCR"


class LocalFlag(Enum):
    """Local mode flags."""

    ECHO = "ECHO"
    ISIG = "ISIG"


class ControlChar(Enum):
    """Control characters that raise signals."""

    INTR = "INTR"
    QUIT = "QUIT"
    SUSP = "SUSP"
    STATUS = "STATUS"

    @property
    def signal(self) -> Signal:
        return _CONTROL_SIGNALS[self]


_CONTROL_SIGNALS = {
    ControlChar.INTR: Signal.INT,
    ControlChar.QUIT: Signal.QUIT,
    ControlChar.SUSP: Signal.SUSP,
    ControlChar.STATUS: Signal.INFO,
}


@dataclass
class Attributes:
    """Line discipline configuration.

    Plain data: three flag groups and a control character table.
    Owners copy it on every get/set so callers never alias live state.
    """

    input_flags: set[InputFlag] = field(default_factory=set)
    output_flags: set[OutputFlag] = field(default_factory=set)
    local_flags: set[LocalFlag] = field(default_factory=set)
    control_chars: dict[ControlChar, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for cc, value in self.control_chars.items():
            _check_control_char(cc, value)

    @classmethod
    def default(cls) -> "Attributes":
        """Cooked-mode attributes: CR->LF on input, LF->CRLF on output, echo and signals on."""
        return cls(
            input_flags={InputFlag.ICRNL},
            output_flags={OutputFlag.OPOST, OutputFlag.ONLCR},
            local_flags={LocalFlag.ECHO, LocalFlag.ISIG},
            control_chars={ControlChar[name]: value for name, value in DEFAULT_CONTROL_CHARS.items()},
        )

    def get_input_flag(self, flag: InputFlag) -> bool:
        return flag in self.input_flags

    def set_input_flag(self, flag: InputFlag, value: bool = True) -> None:
        _toggle(self.input_flags, flag, value)

    def get_output_flag(self, flag: OutputFlag) -> bool:
        return flag in self.output_flags

    def set_output_flag(self, flag: OutputFlag, value: bool = True) -> None:
        _toggle(self.output_flags, flag, value)

    def get_local_flag(self, flag: LocalFlag) -> bool:
        return flag in self.local_flags

    def set_local_flag(self, flag: LocalFlag, value: bool = True) -> None:
        _toggle(self.local_flags, flag, value)

    def get_control_char(self, cc: ControlChar) -> int | None:
        """Byte value bound to a control character, None if unset."""
        return self.control_chars.get(cc)

    def set_control_char(self, cc: ControlChar, value: int | None) -> None:
        """Bind a control character; None unbinds it."""
        if value is None:
            self.control_chars.pop(cc, None)
            return
        _check_control_char(cc, value)
        self.control_chars[cc] = value

    def copy(self) -> "Attributes":
        """Deep copy, so mutating the result never touches this instance."""
        return Attributes(
            input_flags=set(self.input_flags),
            output_flags=set(self.output_flags),
            local_flags=set(self.local_flags),
            control_chars=dict(self.control_chars),
        )


def _toggle(flags: set, flag: Enum, value: bool) -> None:
    if value:
        flags.add(flag)
    else:
        flags.discard(flag)


def _check_control_char(cc: ControlChar, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"control char {cc.value} must be a byte value, got {value}")
