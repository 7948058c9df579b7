"""Domain ports - interfaces for infrastructure to implement."""

from .history_store import HistoryStore
from .master_sink import MasterSink
from .signal_listener import SignalListener
from .slave_channel import SlaveChannel

__all__ = [
    "HistoryStore",
    "MasterSink",
    "SignalListener",
    "SlaveChannel",
]
