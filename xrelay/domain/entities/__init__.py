"""Domain entities."""

from .endpoint_pair import EndpointPair
from .primary_session import PrimarySession

__all__ = [
    "EndpointPair",
    "PrimarySession",
]
