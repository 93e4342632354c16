"""
Request templates.

Before a request is dispatched its URL, every header name and value, and its
body are resolved against one environment snapshot. Any failure aborts the
whole request; nothing is sent half-resolved.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import List, Mapping, Optional, Tuple

from varengine.variables import extract_variables, has_variables, resolve_variables

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Header:
    """Single request header."""
    name: str
    value: str
    enabled: bool = True


@dataclass(frozen=True)
class RequestTemplate:
    """An HTTP request whose text fields may contain {{variable}} references."""
    url: str
    method: str = 'GET'
    headers: Tuple[Header, ...] = field(default_factory=tuple)
    body: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'headers', tuple(self.headers))

    def _fields(self) -> List[str]:
        texts = [self.url]
        for header in self.headers:
            texts.extend([header.name, header.value])
        if self.body is not None:
            texts.append(self.body)
        return texts

    def variables(self) -> List[str]:
        """Names referenced anywhere in the request: URL, headers, then body."""
        names = []
        for text in self._fields():
            names.extend(extract_variables(text))
        return names

    def has_variables(self) -> bool:
        return any(has_variables(text) for text in self._fields())

    def resolve(self, variables: Mapping[str, str]) -> 'RequestTemplate':
        """
        Return a copy with every field resolved against one snapshot.

        Args:
            variables: Snapshot of variable names to values

        Returns:
            New RequestTemplate with no remaining variable references

        Raises:
            VariableResolutionError: On the first field that fails
        """
        snapshot = dict(variables)
        url = resolve_variables(self.url, snapshot)
        headers = tuple(
            replace(
                header,
                name=resolve_variables(header.name, snapshot),
                value=resolve_variables(header.value, snapshot),
            )
            for header in self.headers
        )
        body = resolve_variables(self.body, snapshot) if self.body is not None else None

        logger.debug(f"Resolved request {self.method} {self.url}")
        return replace(self, url=url, headers=headers, body=body)
