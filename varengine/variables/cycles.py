"""Per-call pass history and circular reference detection."""

from typing import Dict, List, Set

from varengine.exceptions import CircularReferenceError

PATH_SEPARATOR = ' → '


class CycleDetector:
    """
    Tracks which names were substituted in each pass of one resolution call.

    A name may appear any number of times within a single pass, but once a
    pass has completed its names are closed: seeing one of them again in a
    later pass means the chain loops back on itself.

    Instances hold call-local state and must not be shared between calls.
    """

    def __init__(self):
        self._history: List[List[str]] = []
        self._seen: Set[str] = set()
        self._current: Dict[str, None] = {}

    @property
    def passes(self) -> int:
        """Number of completed passes."""
        return len(self._history)

    def check(self, name: str) -> None:
        """
        Raise if name was substituted in an earlier pass.

        Raises:
            CircularReferenceError: With the full discovered path
        """
        if name in self._seen:
            raise CircularReferenceError(self.path(name))

    def record(self, name: str) -> None:
        """Record a substitution in the current pass (duplicates collapse)."""
        self._current[name] = None

    def end_pass(self) -> None:
        """Close the current pass and start a new one."""
        names = list(self._current)
        self._seen.update(names)
        self._history.append(names)
        self._current = {}

    def path(self, repeated: str) -> str:
        """Flatten the history in pass order and append the repeated name."""
        chain = [name for names in self._history for name in names]
        chain.append(repeated)
        return PATH_SEPARATOR.join(chain)
