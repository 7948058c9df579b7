"""Composition root - the ONLY place where dependencies are wired."""

import io
import logging
from pathlib import Path

from termline.application.services import LineDisciplineTerminal, LineReader
from termline.config import Config, HistoryConfig, load_config
from termline.container import Container
from termline.domain import History, MasterSink, SignalDispatcher, SignalListener
from termline.infrastructure.history import FileHistoryStore

logger = logging.getLogger(__name__)


def create_history(config: HistoryConfig) -> tuple[History, FileHistoryStore | None]:
    """Build the history and its file store from configuration."""
    store = FileHistoryStore(config.file, config.max_size) if config.file else None
    history = History(
        max_size=config.max_size,
        store=store,
        permission=config.to_permission(),
        match=config.search_match,
    )
    if not config.enabled:
        history.disable()
    return history, store


def create_container(
    config_path: Path | str = "termline.yaml",
    master: MasterSink | None = None,
    listener: SignalListener | None = None,
    config: Config | None = None,
) -> Container:
    """Create the dependency container with all wired dependencies.

    Args:
        config_path: Path to config file, ignored when ``config`` is given.
        master: Controlling-side sink; defaults to an in-memory buffer.
        listener: Signal listener to register on the terminal.
        config: Pre-loaded configuration.

    Returns:
        Fully wired dependency container.
    """
    config = config or load_config(config_path)
    master = master if master is not None else io.BytesIO()

    history, store = create_history(config.history)

    terminal = LineDisciplineTerminal(
        master=master,
        attributes=config.to_attributes(),
        size=config.terminal.to_dimensions(),
        capacity=config.terminal.channel_capacity,
        dispatcher=SignalDispatcher(listener),
    )
    line_reader = LineReader(terminal, history)

    logger.debug(
        "Container created history_file=%s max_size=%d",
        config.history.file,
        config.history.max_size,
    )

    return Container(
        config=config,
        terminal=terminal,
        history=history,
        line_reader=line_reader,
        master=master,
        history_store=store,
    )
