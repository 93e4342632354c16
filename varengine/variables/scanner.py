"""
Linear tokenizer for {{identifier}} placeholders.

A token is two opening braces, an identifier matching
[A-Za-z_][A-Za-z0-9_]*, and two closing braces, with nothing in between.
Anything else (single braces, unterminated openers, stray closers,
whitespace inside the braces) is literal text.
"""

import re
from dataclasses import dataclass
from typing import Iterator, Optional

OPEN = '{{'
CLOSE = '}}'

# Anchored run of identifier characters; matched at a fixed offset only.
_IDENTIFIER = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')
_FULL_IDENTIFIER = re.compile(r'[A-Za-z_][A-Za-z0-9_]*\Z')


@dataclass(frozen=True)
class Token:
    """A well-formed {{name}} occurrence; start/end are slice offsets."""
    name: str
    start: int
    end: int


def is_valid_variable_name(name: str) -> bool:
    """Check a string against the variable name grammar."""
    return isinstance(name, str) and _FULL_IDENTIFIER.match(name) is not None


def _token_at(text: str, start: int) -> Optional[Token]:
    """Parse a token whose opening braces sit at ``start``, if there is one."""
    match = _IDENTIFIER.match(text, start + len(OPEN))
    if match is None:
        return None
    end = match.end()
    if not text.startswith(CLOSE, end):
        return None
    return Token(match.group(0), start, end + len(CLOSE))


def iter_tokens(text: str) -> Iterator[Token]:
    """
    Yield every token in ``text`` from left to right.

    The scan never revisits consumed input: after a token the search resumes
    at its end, and after a failed opener it resumes one character later.
    Identifier runs cannot contain braces, so each character is examined a
    bounded number of times.

    Args:
        text: Text to scan

    Yields:
        Token for each well-formed placeholder
    """
    pos = text.find(OPEN)
    while pos != -1:
        token = _token_at(text, pos)
        if token is None:
            pos = text.find(OPEN, pos + 1)
            continue
        yield token
        pos = text.find(OPEN, token.end)
