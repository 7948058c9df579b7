"""Tests for LineReader."""

import threading

import pytest

from termline.application.services import LineDisciplineTerminal, LineReader
from termline.domain import History


@pytest.fixture
def terminal(fake_sink, default_attributes):
    return LineDisciplineTerminal(fake_sink, default_attributes)


@pytest.fixture
def reader(terminal, history):
    return LineReader(terminal, history)


class TestLineReader:
    """Tests for reading submitted lines."""

    def test_reads_line_without_terminator(self, terminal, reader):
        """Test the returned line has its terminator stripped."""
        terminal.process_input(b"make test\r")
        assert reader.read_line() == "make test"

    def test_submitted_line_pushed_to_history(self, terminal, reader, history):
        """Test every non-blank line lands in history."""
        terminal.process_input(b"ls\rpwd\r")

        reader.read_line()
        reader.read_line()

        assert history.get_all() == ["ls", "pwd"]
        assert history.get_previous_fetch() == "pwd"

    def test_blank_line_not_recorded(self, terminal, reader, history):
        """Test empty and whitespace-only lines are returned but not stored."""
        terminal.process_input(b"\r   \r")

        assert reader.read_line() == ""
        assert reader.read_line() == "   "
        assert history.size == 0

    def test_repeated_line_collapses(self, terminal, reader, history):
        """Test resubmitting the same command keeps one entry."""
        terminal.process_input(b"ls\rls\r")
        reader.read_line()
        reader.read_line()
        assert history.get_all() == ["ls"]

    def test_eof_returns_none(self, terminal, reader):
        """Test a closed terminal yields None."""
        terminal.close()
        assert reader.read_line() is None

    def test_partial_line_at_eof(self, terminal, reader, history):
        """Test an unterminated final line is still returned."""
        terminal.process_input(b"exit")
        terminal.close()

        assert reader.read_line() == "exit"
        assert reader.read_line() is None
        assert history.get_all() == ["exit"]

    def test_invalid_utf8_replaced(self, terminal, reader):
        """Test undecodable bytes are replaced rather than raising."""
        terminal.process_input(b"caf\xe9\r")
        assert reader.read_line() == "caf\ufffd"

    def test_history_property(self, reader, history):
        """Test the reader exposes its history."""
        assert reader.history is history

    def test_disabled_history_still_reads(self, terminal):
        """Test lines are returned while history ignores them."""
        history = History(5)
        history.disable()
        reader = LineReader(terminal, history)

        terminal.process_input(b"secret\r")

        assert reader.read_line() == "secret"
        assert history.get_all() == []

    def test_reader_thread_with_feeder_thread(self, terminal, reader, history):
        """Test a blocked reader receives lines fed from another thread."""
        lines = []

        def consume():
            while (line := reader.read_line()) is not None:
                lines.append(line)

        consumer = threading.Thread(target=consume)
        consumer.start()

        for command in (b"one\r", b"two\r", b"three\r"):
            terminal.process_input(command)
        terminal.close()
        consumer.join(timeout=2)

        assert not consumer.is_alive()
        assert lines == ["one", "two", "three"]
        assert history.get_all() == ["one", "two", "three"]
