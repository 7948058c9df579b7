"""CLI command handlers."""

import argparse
import logging
import sys
import threading
from pathlib import Path

from termline.composition import create_container, create_history
from termline.config import Config
from termline.domain import History, SearchDirection, SearchMatch, Signal

from . import display

logger = logging.getLogger(__name__)


def _open_history(config: Config, match: SearchMatch | None = None) -> History:
    history_config = config.history
    if match is not None:
        history_config = history_config.model_copy(update={"search_match": match})
    history, store = create_history(history_config)
    if store is None:
        raise ValueError("history file is not configured")
    return history


def run_history_list(config: Config, args: argparse.Namespace) -> int:
    history = _open_history(config)
    entries = history.get_all()
    start = 0
    if args.limit is not None and args.limit < len(entries):
        start = len(entries) - max(args.limit, 0)
        entries = entries[start:]
    display.display_entries(entries, start=start)
    return 0


def run_history_search(config: Config, args: argparse.Namespace) -> int:
    match = SearchMatch.PREFIX if args.prefix else None
    history = _open_history(config, match)
    direction = SearchDirection.FORWARD if args.forward else SearchDirection.REVERSE
    history.set_search_direction(direction)

    # One full cycle visits every matching entry exactly once
    count = sum(1 for entry in history.get_all() if history.match.matches(entry, args.term))
    matches = [history.search(args.term) for _ in range(count)]
    display.display_matches(args.term, matches, direction.value)
    return 0


def run_history_clear(config: Config, args: argparse.Namespace) -> int:
    history = _open_history(config)
    removed = len(history)
    history.clear()
    history.stop()
    display.console.print(f"Removed {removed} history entries")
    return 0


def _read_input(file: str) -> bytes:
    if file == "-":
        return sys.stdin.buffer.read()
    return Path(file).read_bytes()


def run_replay(config: Config, args: argparse.Namespace) -> int:
    """Feed raw bytes through a terminal while a reader thread drains it."""
    data = _read_input(args.file)
    signals: list[Signal] = []
    container = create_container(config=config, listener=signals.append)

    lines: list[str] = []

    def drain() -> None:
        while (line := container.line_reader.read_line()) is not None:
            lines.append(line)

    reader = threading.Thread(target=drain, name="termline-reader", daemon=True)
    reader.start()
    try:
        container.terminal.process_input(data)
    finally:
        container.terminal.close()
        reader.join()

    if args.save:
        container.history.stop()

    display.display_replay(container.master.getvalue(), lines, signals)
    logger.info("Replay finished bytes=%d lines=%d signals=%d", len(data), len(lines), len(signals))
    return 0


HISTORY_COMMANDS = {
    "list": run_history_list,
    "search": run_history_search,
    "clear": run_history_clear,
}


def dispatch(config: Config, args: argparse.Namespace) -> int:
    if args.command == "history":
        return HISTORY_COMMANDS[args.history_command](config, args)
    return run_replay(config, args)
