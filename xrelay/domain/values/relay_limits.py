"""Relay buffer limits value object."""

from dataclasses import dataclass

# Default business rules
DEFAULT_PAIR_BUFFER_SIZE = 8192
DEFAULT_SHELL_BUFFER_SIZE = 8192
# Interactive input is forwarded one keystroke at a time
INPUT_CHUNK_SIZE = 1


@dataclass(frozen=True, slots=True)
class RelayLimits:
    """Per-tick transfer bounds (value object)."""

    pair_buffer_size: int = DEFAULT_PAIR_BUFFER_SIZE
    shell_buffer_size: int = DEFAULT_SHELL_BUFFER_SIZE
    input_wait: float = 0.0

    def __post_init__(self) -> None:
        if self.pair_buffer_size <= 0:
            raise ValueError("pair_buffer_size must be positive")
        if self.shell_buffer_size <= 0:
            raise ValueError("shell_buffer_size must be positive")
        if self.input_wait < 0:
            raise ValueError("input_wait must not be negative")
