"""Domain services - pure business logic operations."""

from .display_resolver import resolve_display
from .pair_relay import PairRelay, flush_pending

__all__ = [
    "PairRelay",
    "flush_pending",
    "resolve_display",
]
