"""Signal listener port."""

from collections.abc import Callable

from ..values import Signal

# Invoked synchronously from the input path; must return quickly.
SignalListener = Callable[[Signal], None]
