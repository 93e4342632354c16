"""Resolve command implementation."""

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path
from typing import Dict

from varengine.environment import EnvironmentLoader
from varengine.exceptions import EnvironmentValidationError, VariableResolutionError
from varengine.variables import is_valid_variable_name, resolve_variables
from .common import configure_logging, read_template

logger = logging.getLogger(__name__)


def parse_overrides(args: Namespace) -> Dict[str, str]:
    """Parse variable overrides from --var pairs and --var-file."""
    overrides = {}

    if args.var_file:
        var_file = Path(args.var_file)
        if not var_file.exists():
            raise FileNotFoundError(f"Variable file not found: {var_file}")

        with open(var_file, 'r', encoding='utf-8') as f:
            file_vars = json.load(f)
            if not isinstance(file_vars, dict):
                raise ValueError(f"Variable file must contain a JSON object, got {type(file_vars).__name__}")

            for key, value in file_vars.items():
                overrides[str(key)] = str(value)

    # Command line pairs win over the file
    if args.var:
        for item in args.var:
            if '=' not in item:
                raise ValueError(f"Invalid variable format: {item}. Expected KEY=VALUE")
            key, value = item.split('=', 1)
            overrides[key] = value

    for key in overrides:
        if not is_valid_variable_name(key):
            raise ValueError(f"Invalid variable name: {key}")

    return overrides


def build_snapshot(args: Namespace) -> Dict[str, str]:
    """Environment snapshot from --env-file/--environment, then overrides."""
    variables: Dict[str, str] = {}

    if args.env_file:
        environments = EnvironmentLoader().load(Path(args.env_file))
        if args.environment and args.environment not in environments:
            raise ValueError(
                f"Environment '{args.environment}' not found. Available: {environments.names}"
            )
        variables = environments.snapshot(args.environment)
        logger.info(f"Loaded {len(variables)} variable(s) from {args.env_file}")
    elif args.environment:
        raise ValueError("--environment requires --env-file")

    variables.update(parse_overrides(args))
    return variables


def resolve_command(args: Namespace) -> int:
    """
    Resolve a template and print or write the result.

    Exit codes: 0 on success, 1 for missing files, 2 for validation and
    resolution errors.
    """
    configure_logging(args)

    try:
        text = read_template(args)
        variables = build_snapshot(args)
        resolved = resolve_variables(text, variables)
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except EnvironmentValidationError as e:
        for error in e.errors:
            logger.error(f"Validation error: {error.message}")
        return e.exit_code
    except VariableResolutionError as e:
        logger.error(e.message)
        return e.exit_code
    except ValueError as e:
        logger.error(f"Validation error: {e}")
        return 2

    if args.output_file:
        out_path = Path(args.output_file)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(resolved, encoding='utf-8')
        logger.info(f"Wrote resolved template to {out_path}")
    elif args.text is not None:
        print(resolved)
    else:
        sys.stdout.write(resolved)

    return 0
