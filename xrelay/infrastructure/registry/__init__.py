"""Infrastructure registries - in-memory state for the event loop."""

from .endpoint_registry import EndpointPairRegistry, PairStep

__all__ = [
    "EndpointPairRegistry",
    "PairStep",
]
