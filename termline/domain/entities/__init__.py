"""Domain entities - objects with identity and state."""

from .history import DEFAULT_MAX_SIZE, History

__all__ = [
    "History",
    "DEFAULT_MAX_SIZE",
]
