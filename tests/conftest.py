"""Shared test fixtures and configuration."""

import pytest

from termline.domain import (
    Attributes,
    FilePermission,
    History,
    LineDiscipline,
    SignalDispatcher,
    TerminalDimensions,
)

# ============= Domain Fixtures =============


@pytest.fixture
def default_attributes():
    """Cooked-mode attributes."""
    return Attributes.default()


@pytest.fixture
def raw_attributes():
    """Attributes with every flag cleared."""
    return Attributes()


@pytest.fixture
def default_dimensions():
    """Default terminal dimensions."""
    return TerminalDimensions.default()


@pytest.fixture
def history():
    """Empty in-memory history with capacity 20."""
    return History(20)


# ============= Mock Fixtures =============


class FakeSink:
    """Fake master sink recording writes and flushes."""

    def __init__(self):
        self.events: list[tuple[str, bytes]] = []

    def write(self, data: bytes) -> int:
        self.events.append(("write", bytes(data)))
        return len(data)

    def flush(self) -> None:
        self.events.append(("flush", b""))

    # Test helpers
    @property
    def data(self) -> bytes:
        return b"".join(payload for kind, payload in self.events if kind == "write")

    @property
    def flush_count(self) -> int:
        return sum(1 for kind, _ in self.events if kind == "flush")


class FailingSink(FakeSink):
    """Fake master sink whose writes fail after ``fail_after`` successful ones."""

    def __init__(self, fail_after: int = 0):
        super().__init__()
        self.fail_after = fail_after

    def write(self, data: bytes) -> int:
        writes = sum(1 for kind, _ in self.events if kind == "write")
        if writes >= self.fail_after:
            raise OSError("master sink closed")
        return super().write(data)


class FakeChannel:
    """Fake slave channel recording bytes and flushes."""

    def __init__(self):
        self.written = bytearray()
        self.flush_count = 0
        self.closed = False

    def write(self, byte: int) -> None:
        self.written.append(byte)

    def flush(self) -> None:
        self.flush_count += 1

    def close(self) -> None:
        self.closed = True


class FakeHistoryStore:
    """In-memory history store."""

    def __init__(self, entries: list[str] | None = None):
        self.entries = list(entries or [])
        self.saved: list[str] | None = None
        self.permission: FilePermission | None = None
        self.load_calls = 0

    def load(self) -> list[str]:
        self.load_calls += 1
        return list(self.entries)

    def save(self, entries: list[str], permission: FilePermission) -> None:
        self.saved = list(entries)
        self.permission = permission


class FailingHistoryStore(FakeHistoryStore):
    """History store whose saves fail."""

    def save(self, entries: list[str], permission: FilePermission) -> None:
        raise PermissionError("history file is read-only")


@pytest.fixture
def fake_sink():
    """Recording master sink."""
    return FakeSink()


@pytest.fixture
def fake_channel():
    """Recording slave channel."""
    return FakeChannel()


@pytest.fixture
def signals():
    """List collecting raised signals; its append is a listener."""
    return []


@pytest.fixture
def discipline(fake_sink, fake_channel, signals, default_attributes):
    """Cooked-mode line discipline over fakes."""
    return LineDiscipline(
        fake_sink,
        fake_channel,
        SignalDispatcher(signals.append),
        default_attributes,
    )


@pytest.fixture
def fake_store():
    """Empty in-memory history store."""
    return FakeHistoryStore()


@pytest.fixture
def failing_sink():
    """Master sink whose writes fail."""
    return FailingSink()


@pytest.fixture
def failing_store():
    """History store whose saves fail."""
    return FailingHistoryStore()
