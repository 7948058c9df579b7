"""Signal dispatch - control byte to signal translation and notification."""

import logging

from ..ports import SignalListener
from ..values import Attributes, ControlChar, Signal

logger = logging.getLogger(__name__)

# STATUS is checked last so a byte bound to several controls keeps the
# discarding signal.
_CHECK_ORDER = (ControlChar.INTR, ControlChar.QUIT, ControlChar.SUSP, ControlChar.STATUS)


def compose_listeners(*listeners: SignalListener) -> SignalListener:
    """Combine listeners into one that calls each in order."""

    def listener(signal: Signal) -> None:
        for each in listeners:
            each(signal)

    return listener


class SignalDispatcher:
    """Maps control bytes to signals and notifies the registered listener."""

    def __init__(self, listener: SignalListener | None = None) -> None:
        self._listener = listener

    @property
    def listener(self) -> SignalListener | None:
        return self._listener

    def set_listener(self, listener: SignalListener | None) -> SignalListener | None:
        """Register a listener.

        Returns:
            The previously registered listener, if any.
        """
        previous = self._listener
        self._listener = listener
        return previous

    def control_char_for(self, byte: int, attributes: Attributes) -> ControlChar | None:
        """Control character bound to ``byte``, None if the byte is ordinary."""
        for cc in _CHECK_ORDER:
            if attributes.get_control_char(cc) == byte:
                return cc
        return None

    def signal_for(self, byte: int, attributes: Attributes) -> Signal | None:
        """Signal ``byte`` raises under ``attributes``, None if none."""
        cc = self.control_char_for(byte, attributes)
        return cc.signal if cc is not None else None

    def dispatch(self, signal: Signal) -> None:
        """Notify the listener synchronously."""
        logger.debug("Dispatching signal=%s", signal.value)
        if self._listener is not None:
            self._listener(signal)
