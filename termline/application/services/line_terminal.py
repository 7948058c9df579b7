"""Line discipline terminal - master and slave sides of one session."""

from termline.domain import (
    Attributes,
    LineDiscipline,
    MasterSink,
    Signal,
    SignalDispatcher,
    SignalListener,
    TerminalDimensions,
)
from termline.infrastructure.channels import PIPE_SIZE, BoundedChannel


class SlaveOutput:
    """Application-facing writer; bytes are post-processed to the master."""

    def __init__(self, discipline: LineDiscipline, master: MasterSink) -> None:
        self._discipline = discipline
        self._master = master

    def write(self, data: bytes) -> int:
        self._discipline.process_output(data)
        return len(data)

    def flush(self) -> None:
        self._master.flush()


class LineDisciplineTerminal:
    """Terminal session with line discipline.

    The master side feeds raw bytes through ``process_input``; the
    application reads accepted bytes from ``input()`` and writes through
    ``output()``. Feeding and reading are meant to run on separate threads.
    """

    def __init__(
        self,
        master: MasterSink,
        attributes: Attributes | None = None,
        size: TerminalDimensions | None = None,
        capacity: int = PIPE_SIZE,
        dispatcher: SignalDispatcher | None = None,
    ) -> None:
        self._master = master
        self._channel = BoundedChannel(capacity)
        self._discipline = LineDiscipline(master, self._channel, dispatcher, attributes)
        self._output = SlaveOutput(self._discipline, master)
        self.size = size or TerminalDimensions.default()

    @property
    def discipline(self) -> LineDiscipline:
        return self._discipline

    def input(self) -> BoundedChannel:
        """Slave-side reader."""
        return self._channel

    def output(self) -> SlaveOutput:
        """Slave-side writer."""
        return self._output

    def get_attributes(self) -> Attributes:
        return self._discipline.get_attributes()

    def set_attributes(self, attributes: Attributes) -> None:
        self._discipline.set_attributes(attributes)

    def handle(self, listener: SignalListener | None) -> SignalListener | None:
        """Register the signal listener, returning the previous one."""
        return self._discipline.dispatcher.set_listener(listener)

    def process_input(self, data: bytes) -> None:
        self._discipline.process_input(data)

    def raise_signal(self, signal: Signal) -> None:
        self._discipline.raise_signal(signal)

    def close(self) -> None:
        self._discipline.close()
