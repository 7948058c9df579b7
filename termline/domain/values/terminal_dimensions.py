"""Terminal dimensions value object."""

from dataclasses import dataclass

DEFAULT_COLS = 160
DEFAULT_ROWS = 50


@dataclass(frozen=True, slots=True)
class TerminalDimensions:
    """Terminal size in character cells (value object).

    Not interpreted by the line discipline; exposed for renderers.
    Any positive size is valid, down to a single cell.
    """

    cols: int
    rows: int

    def __post_init__(self) -> None:
        if self.cols < 1:
            raise ValueError(f"cols must be positive, got {self.cols}")
        if self.rows < 1:
            raise ValueError(f"rows must be positive, got {self.rows}")

    @classmethod
    def default(cls) -> "TerminalDimensions":
        return cls(cols=DEFAULT_COLS, rows=DEFAULT_ROWS)

    def resize(self, cols: int, rows: int) -> "TerminalDimensions":
        """Return new dimensions; this instance is unchanged."""
        return TerminalDimensions(cols=cols, rows=rows)
