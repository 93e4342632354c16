"""Environment provider: a collection of environments with one active."""

import logging
from typing import Dict, List, Optional

from varengine.variables import has_variables, resolve_variables
from .model import Environment

logger = logging.getLogger(__name__)


class EnvironmentSet:
    """
    Environments keyed by name, with an optional active selection.

    Supplies per-call snapshots to the resolution engine. The engine never
    sees this object, only the copied dict returned by snapshot().
    """

    def __init__(self, environments: Optional[List[Environment]] = None, active: Optional[str] = None):
        self._environments: Dict[str, Environment] = {}
        for env in environments or []:
            self.add(env)
        self._active: Optional[str] = None
        if active is not None:
            self.select(active)

    def add(self, environment: Environment) -> None:
        """Add or replace an environment by name."""
        self._environments[environment.name] = environment

    def get(self, name: str) -> Optional[Environment]:
        return self._environments.get(name)

    @property
    def names(self) -> List[str]:
        return list(self._environments)

    @property
    def active(self) -> Optional[Environment]:
        if self._active is None:
            return None
        return self._environments.get(self._active)

    def select(self, name: Optional[str]) -> None:
        """
        Make the named environment active, or clear the selection with None.

        Raises:
            KeyError: If no environment has that name
        """
        if name is not None and name not in self._environments:
            raise KeyError(f"Unknown environment: {name}")
        self._active = name
        logger.debug(f"Active environment: {name}")

    def snapshot(self, name: Optional[str] = None) -> Dict[str, str]:
        """
        Copy of an environment's variables, the active one by default.

        Returns an empty dict when no environment is selected.

        Raises:
            KeyError: If an explicit name is not defined
        """
        if name is not None:
            if name not in self._environments:
                raise KeyError(f"Unknown environment: {name}")
            return self._environments[name].snapshot()
        env = self.active
        return env.snapshot() if env else {}

    def resolve(self, text: str) -> str:
        """
        Resolve text against the active environment.

        Text is returned untouched when nothing is active.
        """
        env = self.active
        if env is None:
            if has_variables(text):
                logger.debug("No active environment, leaving variables unresolved")
            return text
        return resolve_variables(text, env.snapshot())

    def __len__(self) -> int:
        return len(self._environments)

    def __contains__(self, name: str) -> bool:
        return name in self._environments
