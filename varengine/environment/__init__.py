"""Environment model, provider and file loader."""

from .model import Environment, validate_environment
from .provider import EnvironmentSet
from .loader import EnvironmentLoader

__all__ = [
    'Environment',
    'EnvironmentSet',
    'EnvironmentLoader',
    'validate_environment',
]
