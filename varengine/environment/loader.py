"""Environment file loader and strict validation."""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from varengine.exceptions import EnvironmentValidationError, ValidationError
from .model import Environment, validate_environment
from .provider import EnvironmentSet

logger = logging.getLogger(__name__)

BOOL_TAG = 'tag:yaml.org,2002:bool'


class PreservingLoader(yaml.SafeLoader):
    """YAML loader that keeps on/off/yes/no as strings; only true/false are booleans."""
    pass


# Drop the YAML 1.1 boolean resolver everywhere so names like `on` and values
# like `off` survive as written, then restore the YAML 1.2 true/false forms
PreservingLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
PreservingLoader.add_implicit_resolver(
    BOOL_TAG,
    re.compile(r'^(?:true|True|TRUE|false|False|FALSE)$'),
    list('tTfF')
)


class EnvironmentLoader:
    """Loads and validates environment files (YAML or JSON)."""

    SUPPORTED_VERSIONS = {"1"}
    KNOWN_FIELDS = {'version', 'active', 'environments'}

    def __init__(self):
        """Initialize loader."""
        self.errors: List[ValidationError] = []

    def load(self, path: Path) -> EnvironmentSet:
        """
        Load and validate an environment file.

        Raises:
            FileNotFoundError: If the file does not exist
            EnvironmentValidationError: If the file is malformed or invalid
        """
        path = Path(path)
        self.errors = []

        if not path.exists():
            raise FileNotFoundError(f"Environment file not found: {path}")

        logger.debug(f"Loading environment file: {path}")
        try:
            with open(path, 'r', encoding='utf-8') as f:
                if path.suffix == '.json':
                    data = json.load(f)
                else:
                    data = yaml.load(f, Loader=PreservingLoader)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            self._add_error(f"Failed to load environment file: {e}")
            self._raise_validation_errors()
        except UnicodeDecodeError as e:
            self._add_error(f"Environment file is not valid UTF-8: {e}")
            self._raise_validation_errors()
        except OSError as e:
            self._add_error(f"Failed to read environment file: {e}")
            self._raise_validation_errors()

        return self.load_data(data)

    def load_data(self, data: Any) -> EnvironmentSet:
        """Validate already-parsed file contents and build the environment set."""
        self.errors = []

        if data is None or not isinstance(data, dict):
            self._add_error("Environment file must be a mapping")
            self._raise_validation_errors()

        version = data.get('version')
        if version is None:
            self._add_error("'version' field is required")
        elif str(version) not in self.SUPPORTED_VERSIONS:
            self._add_error(f"Unsupported version '{version}'. Supported: {sorted(self.SUPPORTED_VERSIONS)}")

        for key in data.keys():
            if key not in self.KNOWN_FIELDS:
                self._add_error(f"Unknown field '{key}'")

        environments = self._build_environments(data.get('environments'))

        active = data.get('active')
        if active is not None:
            if not isinstance(active, str):
                self._add_error(f"'active' must be a string, got {type(active).__name__}", 'active')
            elif active not in {env.name for env in environments}:
                self._add_error(f"Active environment '{active}' is not defined", 'active')

        if self.errors:
            self._raise_validation_errors()

        logger.debug(f"Loaded {len(environments)} environment(s), active: {active}")
        return EnvironmentSet(environments, active=active)

    def _build_environments(self, raw: Any) -> List[Environment]:
        if raw is None:
            self._add_error("'environments' field is required")
            return []
        if not isinstance(raw, dict):
            self._add_error("'environments' must be a mapping of name to variables", 'environments')
            return []

        environments = []
        for name, variables in raw.items():
            path = f"environments.{name}"
            if variables is None:
                variables = {}
            if not isinstance(variables, dict):
                self._add_error("Environment variables must be a mapping", path)
                continue

            converted = self._convert_values(variables, path)
            errors = validate_environment(str(name), converted, path)
            if errors:
                self.errors.extend(errors)
                continue
            environments.append(Environment.create(str(name), converted))
        return environments

    def _convert_values(self, variables: Dict[Any, Any], path: str) -> Dict[str, str]:
        """Convert scalar values to strings; YAML may have parsed them as numbers."""
        converted = {}
        for key, value in variables.items():
            if not isinstance(key, str):
                self._add_error(
                    f"Variable name must be a string, got {type(key).__name__}: {key!r}",
                    f"{path}.{key}"
                )
            elif isinstance(value, bool):
                converted[str(key)] = 'true' if value else 'false'
            elif value is None:
                converted[str(key)] = ''
            elif isinstance(value, (int, float, str)):
                converted[str(key)] = str(value)
            else:
                self._add_error(
                    f"Variable '{key}' must be a scalar, got {type(value).__name__}",
                    f"{path}.{key}"
                )
        return converted

    def _add_error(self, message: str, path: Optional[str] = ""):
        self.errors.append(ValidationError(message, path or ""))

    def _raise_validation_errors(self):
        raise EnvironmentValidationError(self.errors)
