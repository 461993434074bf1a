"""Terminal dimensions value object."""

from dataclasses import dataclass

# Business rules
MIN_COLS = 1
MAX_COLS = 1000
MIN_ROWS = 1
MAX_ROWS = 1000
DEFAULT_COLS = 80
DEFAULT_ROWS = 24


@dataclass(frozen=True, slots=True)
class TerminalDimensions:
    """Terminal geometry (value object)."""

    cols: int
    rows: int

    def __post_init__(self) -> None:
        if not MIN_COLS <= self.cols <= MAX_COLS:
            raise ValueError(f"cols must be {MIN_COLS}-{MAX_COLS}, got {self.cols}")
        if not MIN_ROWS <= self.rows <= MAX_ROWS:
            raise ValueError(f"rows must be {MIN_ROWS}-{MAX_ROWS}, got {self.rows}")

    @classmethod
    def default(cls) -> "TerminalDimensions":
        """Geometry used when the local terminal cannot report one."""
        return cls(cols=DEFAULT_COLS, rows=DEFAULT_ROWS)

    @classmethod
    def clamped(cls, cols: int, rows: int) -> "TerminalDimensions":
        """Create dimensions clamped to valid range."""
        return cls(
            cols=max(MIN_COLS, min(cols, MAX_COLS)),
            rows=max(MIN_ROWS, min(rows, MAX_ROWS)),
        )
