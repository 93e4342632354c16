"""
Variable resolution.
Expands {{name}} references against a flat environment snapshot, including
references introduced by substituted values, one breadth-first pass at a time.
"""

import itertools
import logging
from typing import Any, Dict, Iterable, List, Mapping, Union

from varengine.exceptions import MaxDepthExceededError, UndefinedVariableError
from .cycles import CycleDetector
from .scanner import Token, iter_tokens

logger = logging.getLogger(__name__)

# Ceiling on substitution passes per call. Also rejects acyclic chains that
# need more than this many passes.
MAX_DEPTH = 10


def _substitute_pass(
    text: str,
    tokens: Iterable[Token],
    variables: Mapping[str, str],
    detector: CycleDetector
) -> str:
    """
    Replace every token currently in text with its literal value.

    Inserted values are not rescanned here; any tokens they contain are
    picked up by the next pass.
    """
    pieces: List[str] = []
    last = 0
    for token in tokens:
        name = token.name
        if name not in variables:
            raise UndefinedVariableError(name)
        detector.check(name)
        detector.record(name)
        pieces.append(text[last:token.start])
        pieces.append(variables[name])
        last = token.end

    pieces.append(text[last:])
    detector.end_pass()
    return ''.join(pieces)


def resolve_variables(text: str, variables: Mapping[str, str]) -> str:
    """
    Resolve all {{variable}} references in text.

    Variables may reference other variables; those are expanded on later
    passes until no tokens remain.

    Args:
        text: Text containing {{variable}} placeholders
        variables: Snapshot of variable names to values

    Returns:
        Fully resolved text

    Raises:
        UndefinedVariableError: A referenced name is not in the snapshot
        CircularReferenceError: A name recurs in a later pass
        MaxDepthExceededError: More than MAX_DEPTH passes would be needed

    Example:
        resolve_variables('{{baseUrl}}/users',
                          {'baseUrl': 'https://{{domain}}', 'domain': 'api.dev'})
        # 'https://api.dev/users'
    """
    # Copy so that later changes by the caller cannot leak into this call
    snapshot = dict(variables)
    detector = CycleDetector()
    resolved = text

    while True:
        tokens = iter_tokens(resolved)
        first = next(tokens, None)
        if first is None:
            break
        if detector.passes >= MAX_DEPTH:
            raise MaxDepthExceededError(MAX_DEPTH)
        resolved = _substitute_pass(resolved, itertools.chain((first,), tokens), snapshot, detector)

    if detector.passes:
        logger.debug(f"Resolved in {detector.passes} pass(es), {len(resolved)} chars")
    return resolved


class VariableResolver:
    """
    Resolves {{variable}} references in strings and data structures.

    Strings are resolved with resolve_variables(); lists and dict values are
    resolved element by element; dict keys and any other values pass through
    unchanged. The first failure aborts the whole value.
    """

    def resolve(
        self,
        value: Union[str, List, Dict, Any],
        variables: Mapping[str, str]
    ) -> Union[str, List, Dict, Any]:
        """
        Resolve variables in a value (string, list, or dict).

        Args:
            value: The value to resolve
            variables: Snapshot of variable names to values

        Returns:
            Value with variables resolved

        Raises:
            VariableResolutionError: On the first string that fails
        """
        snapshot = dict(variables)
        return self._resolve_value(value, snapshot)

    def _resolve_value(self, value: Any, snapshot: Dict[str, str]) -> Any:
        if isinstance(value, str):
            return resolve_variables(value, snapshot)
        elif isinstance(value, list):
            return [self._resolve_value(item, snapshot) for item in value]
        elif isinstance(value, dict):
            return {k: self._resolve_value(v, snapshot) for k, v in value.items()}
        else:
            return value
