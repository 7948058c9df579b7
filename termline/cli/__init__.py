"""Command line interface."""

import sys

from pydantic import ValidationError

from termline.config import load_config
from termline.logging_setup import setup_logging, setup_logging_from_env

from .args import build_parser
from .commands import dispatch


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``termline`` command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        setup_logging("DEBUG")
    else:
        setup_logging_from_env()

    try:
        config = load_config(args.config)
    except ValidationError as e:
        parser.error(f"invalid config {args.config}: {e}")

    try:
        return dispatch(config, args)
    except ValueError as e:
        parser.error(str(e))
    except OSError as e:
        print(f"termline: {e}", file=sys.stderr)
        return 1


__all__ = ["main"]
