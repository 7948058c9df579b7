"""Command line argument parsing."""

import argparse
import os

from termline import __version__

DEFAULT_CONFIG_PATH = "termline.yaml"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Commands:
        - history list/search/clear: inspect the persisted history file
        - replay: feed raw bytes through a line discipline terminal
    """
    parser = argparse.ArgumentParser(
        prog="termline",
        description="termline - line discipline and history tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=os.environ.get("TERMLINE_CONFIG_PATH", DEFAULT_CONFIG_PATH),
        help="Path to YAML config (default: $TERMLINE_CONFIG_PATH or termline.yaml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logs",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    history = commands.add_parser("history", help="Inspect persisted history")
    history_commands = history.add_subparsers(dest="history_command", required=True)

    list_cmd = history_commands.add_parser("list", help="List history entries, oldest first")
    list_cmd.add_argument(
        "-n",
        "--limit",
        type=int,
        default=None,
        help="Show only the newest N entries",
    )

    search_cmd = history_commands.add_parser("search", help="Search history entries")
    search_cmd.add_argument("term", help="Text to search for")
    search_cmd.add_argument(
        "--forward",
        action="store_true",
        help="Search oldest to newest (default: newest to oldest)",
    )
    search_cmd.add_argument(
        "--prefix",
        action="store_true",
        help="Match entries starting with TERM instead of containing it",
    )

    history_commands.add_parser("clear", help="Remove every history entry")

    replay = commands.add_parser("replay", help="Feed raw bytes through a line discipline terminal")
    replay.add_argument("file", help="File with raw terminal input, or - for stdin")
    replay.add_argument(
        "--save",
        action="store_true",
        help="Persist submitted lines to the history file",
    )

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)
