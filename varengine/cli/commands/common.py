"""Helpers shared by CLI commands."""

import logging
import sys
from argparse import Namespace
from pathlib import Path

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(args: Namespace) -> None:
    """Set up logging from --log-level, --debug and --quiet."""
    level_name = 'warning' if args.log_level == 'warn' else args.log_level
    log_level = getattr(logging, level_name.upper())
    if args.debug:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR

    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logging.getLogger('varengine').setLevel(log_level)


def read_template(args: Namespace) -> str:
    """
    Read template text from the positional argument, --in, or stdin.

    Raises:
        FileNotFoundError: If --in names a missing file
        ValueError: If both text and --in are given
    """
    if args.text is not None and args.input_file:
        raise ValueError("Pass template text or --in, not both")

    if args.text is not None:
        return args.text

    if args.input_file:
        path = Path(args.input_file)
        if not path.exists():
            raise FileNotFoundError(f"Template not found: {path}")
        return path.read_text(encoding='utf-8')

    return sys.stdin.read()
