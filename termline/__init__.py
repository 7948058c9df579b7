"""termline - line discipline and history core for readline-style editors."""

from termline._version import __version__

__all__ = ["__version__"]
