"""Environment model: a named, flat set of variables."""

import re
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Dict, List, Optional

from varengine.exceptions import EnvironmentValidationError, ValidationError
from varengine.variables import is_valid_variable_name

NAME_PATTERN = re.compile(r'^[a-zA-Z0-9\s_-]+$')
MAX_NAME_LENGTH = 100


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def validate_environment(name: str, variables: Dict[str, str], path: str = "") -> List[ValidationError]:
    """
    Validate an environment name and its variable names.

    Args:
        name: Display name (1-100 chars, alphanumeric, space, hyphen, underscore)
        variables: Variable definitions
        path: Location prefix used in error messages

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not isinstance(name, str) or not name or len(name) > MAX_NAME_LENGTH:
        errors.append(ValidationError(
            f"Environment name must be 1-{MAX_NAME_LENGTH} characters", path))
    elif not NAME_PATTERN.match(name):
        errors.append(ValidationError(
            f"Environment name '{name}' contains invalid characters", path))

    for key, value in variables.items():
        key_path = f"{path}.{key}" if path else str(key)
        if not is_valid_variable_name(key):
            errors.append(ValidationError(f"Invalid variable name: {key}", key_path))
        elif not isinstance(value, str):
            errors.append(ValidationError(
                f"Variable '{key}' must be a string, got {type(value).__name__}", key_path))

    return errors


@dataclass(frozen=True)
class Environment:
    """
    Environment holding variables for request templates.

    Immutable: every modification returns a new instance with a refreshed
    updated_at timestamp.
    """
    id: str
    name: str
    variables: Dict[str, str] = field(default_factory=dict, hash=False)
    created_at: str = field(default_factory=_now)
    updated_at: str = field(default_factory=_now)

    def __post_init__(self):
        errors = validate_environment(self.name, self.variables)
        if errors:
            raise EnvironmentValidationError(errors)
        # Own a private copy so callers cannot mutate us through their dict
        object.__setattr__(self, 'variables', dict(self.variables))

    @classmethod
    def create(cls, name: str, variables: Optional[Dict[str, str]] = None) -> 'Environment':
        """Create a new environment with a generated id and timestamps."""
        now = _now()
        return cls(
            id=str(uuid.uuid4()),
            name=name,
            variables=dict(variables or {}),
            created_at=now,
            updated_at=now,
        )

    def update(self, name: Optional[str] = None, variables: Optional[Dict[str, str]] = None) -> 'Environment':
        """Return a copy with the given name and/or variables replaced."""
        return replace(
            self,
            name=self.name if name is None else name,
            variables=self.variables if variables is None else variables,
            updated_at=_now(),
        )

    def get_variable(self, key: str) -> Optional[str]:
        return self.variables.get(key)

    def set_variable(self, key: str, value: str) -> 'Environment':
        return self.update(variables={**self.variables, key: value})

    def delete_variable(self, key: str) -> 'Environment':
        rest = {k: v for k, v in self.variables.items() if k != key}
        return self.update(variables=rest)

    def snapshot(self) -> Dict[str, str]:
        """Detached copy of the variables for a single resolution call."""
        return dict(self.variables)
