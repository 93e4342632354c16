"""
Variable resolution module.
Implements {{variable}} scanning, extraction and nested resolution.
"""

from .scanner import Token, iter_tokens, is_valid_variable_name
from .extraction import extract_variables, has_variables, unique_variables
from .cycles import CycleDetector
from .resolution import MAX_DEPTH, VariableResolver, resolve_variables

__all__ = [
    'Token',
    'iter_tokens',
    'is_valid_variable_name',
    'extract_variables',
    'has_variables',
    'unique_variables',
    'CycleDetector',
    'MAX_DEPTH',
    'VariableResolver',
    'resolve_variables',
]
