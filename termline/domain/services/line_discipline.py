"""Line discipline - tty-style translation between master and slave.

The discipline reads master input ahead of the application so signals
and echo happen as soon as the user types, not when the application
gets around to reading. Accepted bytes go into a bounded slave channel;
a full channel blocks the feeder instead of dropping input.
"""

import logging

from ..ports import MasterSink, SlaveChannel
from ..values import (
    CR,
    DEL,
    LF,
    Attributes,
    ControlChar,
    InputFlag,
    LocalFlag,
    OutputFlag,
    Signal,
)
from .signal_dispatcher import SignalDispatcher

logger = logging.getLogger(__name__)

# Control characters echoed in caret notation (^C, ^?) when their signal is raised
_ECHOED_CONTROLS = {
    Signal.INT: ControlChar.INTR,
    Signal.QUIT: ControlChar.QUIT,
    Signal.SUSP: ControlChar.SUSP,
}


class LineDiscipline:
    """Emulates the part of a POSIX line discipline a line editor needs.

    Stateless per byte apart from the attributes, which are replaced
    wholesale (copy-on-write) so every byte sees one consistent snapshot.
    """

    def __init__(
        self,
        master: MasterSink,
        channel: SlaveChannel,
        dispatcher: SignalDispatcher | None = None,
        attributes: Attributes | None = None,
    ) -> None:
        self._master = master
        self._channel = channel
        self._dispatcher = dispatcher or SignalDispatcher()
        self._attributes = (attributes or Attributes()).copy()

    @property
    def dispatcher(self) -> SignalDispatcher:
        return self._dispatcher

    def get_attributes(self) -> Attributes:
        """Copy of the current attributes."""
        return self._attributes.copy()

    def set_attributes(self, attributes: Attributes) -> None:
        """Replace the attributes; takes effect on the next processed byte."""
        self._attributes = attributes.copy()

    def process_input(self, data: bytes) -> None:
        """Process bytes coming from the master side.

        The slave channel is flushed once per call, after the last byte,
        even when a byte fails; bytes accepted before the failure stay
        readable.

        Raises:
            OSError: Writing to the master sink or the channel failed.
        """
        try:
            for byte in data:
                self._process_input_byte(byte)
        finally:
            self._channel.flush()

    def process_output(self, data: bytes) -> None:
        """Post-process application output toward the master side."""
        attributes = self._attributes
        for byte in data:
            self._write_output_byte(byte, attributes)

    def raise_signal(self, signal: Signal) -> None:
        """Echo the signal indicator, then notify the listener."""
        self._echo_signal(signal, self._attributes)
        self._dispatcher.dispatch(signal)

    def close(self) -> None:
        """Close the slave channel; the reader sees EOF once drained."""
        self._channel.close()

    def _process_input_byte(self, byte: int) -> None:
        attributes = self._attributes

        if attributes.get_local_flag(LocalFlag.ISIG):
            cc = self._dispatcher.control_char_for(byte, attributes)
            if cc is not None:
                self._echo_signal(cc.signal, attributes)
                self._dispatcher.dispatch(cc.signal)
                # STATUS only queries terminal state; the byte still flows
                if cc is not ControlChar.STATUS:
                    return

        if byte == CR:
            if attributes.get_input_flag(InputFlag.IGNCR):
                return
            if attributes.get_input_flag(InputFlag.ICRNL):
                byte = LF
        elif byte == LF and attributes.get_input_flag(InputFlag.INLCR):
            byte = CR

        if attributes.get_local_flag(LocalFlag.ECHO):
            self._write_output_byte(byte, attributes)
            self._master.flush()

        self._channel.write(byte)

    def _write_output_byte(self, byte: int, attributes: Attributes) -> None:
        if (
            byte == LF
            and attributes.get_output_flag(OutputFlag.OPOST)
            and attributes.get_output_flag(OutputFlag.ONLCR)
        ):
            self._master.write(b"\r\n")
            return
        self._master.write(bytes((byte,)))

    def _echo_signal(self, signal: Signal, attributes: Attributes) -> None:
        cc = _ECHOED_CONTROLS.get(signal)
        if cc is None:
            return
        value = attributes.get_control_char(cc)
        if value is None:
            return
        if 0 < value < 32:
            indicator = value + ord("@")
        elif value == DEL:
            indicator = ord("?")
        else:
            return
        self._master.write(bytes((ord("^"), indicator)))
        self._master.flush()
