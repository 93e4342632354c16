"""Side-effect-free introspection of {{variable}} references."""

from typing import List

from .scanner import iter_tokens


def extract_variables(text: str) -> List[str]:
    """
    List the variable names referenced in text, without resolving them.

    Duplicates are kept and names appear in left-to-right order.

    Example:
        extract_variables('{{baseUrl}}/users/{{userId}}')
        # ['baseUrl', 'userId']
    """
    return [token.name for token in iter_tokens(text)]


def has_variables(text: str) -> bool:
    """True if text contains at least one well-formed {{variable}}."""
    return next(iter_tokens(text), None) is not None


def unique_variables(text: str) -> List[str]:
    """Referenced names with duplicates removed, first occurrence wins."""
    seen = set()
    names = []
    for name in extract_variables(text):
        if name not in seen:
            seen.add(name)
            names.append(name)
    return names
