"""Variable resolution engine for {{name}} placeholders in request templates."""

from varengine.exceptions import (
    CircularReferenceError,
    EnvironmentValidationError,
    MaxDepthExceededError,
    UndefinedVariableError,
    ValidationError,
    VariableResolutionError,
)
from varengine.variables import (
    MAX_DEPTH,
    VariableResolver,
    extract_variables,
    has_variables,
    resolve_variables,
)
from varengine.environment import Environment, EnvironmentLoader, EnvironmentSet
from varengine.request import Header, RequestTemplate

__version__ = '0.1.0'

__all__ = [
    'CircularReferenceError',
    'EnvironmentValidationError',
    'MaxDepthExceededError',
    'UndefinedVariableError',
    'ValidationError',
    'VariableResolutionError',
    'MAX_DEPTH',
    'VariableResolver',
    'extract_variables',
    'has_variables',
    'resolve_variables',
    'Environment',
    'EnvironmentLoader',
    'EnvironmentSet',
    'Header',
    'RequestTemplate',
]
