"""Variable engine exceptions."""

from typing import Any, Dict, List
from dataclasses import dataclass


class VariableResolutionError(Exception):
    """Base class for failures raised while resolving {{variable}} references.

    Exactly one of these is raised per failing call. No partially resolved
    text is ever returned alongside it.
    """

    kind = "variable_resolution"
    exit_code = 2

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    @property
    def context(self) -> Dict[str, Any]:
        return {}

    def to_dict(self) -> Dict[str, Any]:
        """Structured error record suitable for JSON output."""
        return {
            'type': self.kind,
            'message': self.message,
            'context': self.context,
        }


class UndefinedVariableError(VariableResolutionError):
    """Raised when a referenced variable is missing from the snapshot."""

    kind = "undefined_variable"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Variable {{{{{name}}}}} is not defined in current environment")

    @property
    def context(self) -> Dict[str, Any]:
        return {'name': self.name}


class CircularReferenceError(VariableResolutionError):
    """Raised when a substitution chain revisits a variable."""

    kind = "circular_reference"

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Circular reference detected: {path}")

    @property
    def context(self) -> Dict[str, Any]:
        return {'path': self.path}


class MaxDepthExceededError(VariableResolutionError):
    """Raised when resolution needs more passes than the ceiling allows.

    Fires for long acyclic chains too, not only for true cycles.
    """

    kind = "max_depth_exceeded"

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Maximum nesting depth ({limit}) exceeded")

    @property
    def context(self) -> Dict[str, Any]:
        return {'limit': self.limit}


@dataclass
class ValidationError:
    """Single validation error."""
    message: str
    path: str = ""
    exit_code: int = 2


class EnvironmentValidationError(Exception):
    """Raised when an environment or environment file fails validation.

    The loader collects every problem before raising, so the CLI can report
    them all at once and map to the validation exit code.
    """

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors
        self.exit_code = 2

        messages = []
        for error in errors:
            if error.path:
                messages.append(f"Validation error at {error.path}: {error.message}")
            else:
                messages.append(f"Validation error: {error.message}")

        super().__init__("\n".join(messages))
