"""CLI command handlers."""

from .resolve import resolve_command
from .extract import extract_command

__all__ = ['resolve_command', 'extract_command']
