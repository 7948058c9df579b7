"""Channel implementations - bounded pipes between threads."""

from .bounded_channel import PIPE_SIZE, BoundedChannel

__all__ = [
    "BoundedChannel",
    "PIPE_SIZE",
]
