"""Extract command implementation."""

import logging
from argparse import Namespace

from varengine.variables import extract_variables, unique_variables
from .common import configure_logging, read_template

logger = logging.getLogger(__name__)


def extract_command(args: Namespace) -> int:
    """Print the variable names referenced in a template, one per line."""
    configure_logging(args)

    try:
        text = read_template(args)
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Validation error: {e}")
        return 2

    names = unique_variables(text) if args.unique else extract_variables(text)
    for name in names:
        print(name)

    return 0
