"""Main CLI entry point for varengine."""

import argparse
import sys
from typing import Optional

from .commands import extract_command, resolve_command


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        'text',
        nargs='?',
        help='Template text (omit to read --in or stdin)'
    )
    parser.add_argument(
        '--in',
        dest='input_file',
        type=str,
        metavar='FILE',
        help='Read template from file'
    )


def _add_logging_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='warn',
        help='Set log level'
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the varengine CLI."""
    parser = argparse.ArgumentParser(
        prog='varengine',
        description='Resolve {{variable}} placeholders against an environment'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    resolve_parser = subparsers.add_parser('resolve', help='Resolve variables in a template')
    _add_input_arguments(resolve_parser)
    resolve_parser.add_argument(
        '--out',
        dest='output_file',
        type=str,
        metavar='FILE',
        help='Write resolved text to file instead of stdout'
    )
    resolve_parser.add_argument(
        '--env-file',
        type=str,
        help='Path to YAML or JSON environment file'
    )
    resolve_parser.add_argument(
        '--environment', '-e',
        type=str,
        metavar='NAME',
        help='Environment to use (defaults to the file\'s active environment)'
    )
    resolve_parser.add_argument(
        '--var',
        action='append',
        metavar='KEY=VALUE',
        help='Variable override (can be specified multiple times)'
    )
    resolve_parser.add_argument(
        '--var-file',
        type=str,
        help='Path to JSON file containing variable overrides'
    )
    _add_logging_arguments(resolve_parser)

    extract_parser = subparsers.add_parser('extract', help='List variables referenced in a template')
    _add_input_arguments(extract_parser)
    extract_parser.add_argument(
        '--unique',
        action='store_true',
        help='Report each name once'
    )
    _add_logging_arguments(extract_parser)

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'resolve':
        return resolve_command(parsed_args)
    elif parsed_args.command == 'extract':
        return extract_command(parsed_args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
