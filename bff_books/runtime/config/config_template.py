"""Render ``config.yaml`` from the environment and validate it."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic_core import ValidationError

from bff_books.runtime.config.config_data import ConfigData

PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def _resolve(expression: str) -> str:
    if ":-" in expression:
        name, default = expression.split(":-", 1)
        return os.getenv(name, default)

    if ":?" in expression:
        name, message = expression.split(":?", 1)
        problem = f"{name}: {message}"
    else:
        name = expression
        problem = f"{name} not set"

    value = os.getenv(name)
    if value is None:
        raise ValueError(f"Required environment variable {problem}")
    return value


def substitute_env_vars(text: str) -> str:
    """Fill ``${VAR}``, ``${VAR:-default}`` and ``${VAR:?message}`` placeholders.

    A missing variable without a default raises ``ValueError``.
    """
    return PLACEHOLDER.sub(lambda match: _resolve(match.group(1)), text)


def apply_environment_overrides(env_mode: str) -> None:
    """Promote ``<ENV>_FOO`` variables to ``FOO`` for the active environment.

    With ``APP_ENVIRONMENT=production`` a ``PRODUCTION_REDIS_HOST`` variable
    becomes ``REDIS_HOST`` before the template is rendered.
    """
    prefix = f"{env_mode.upper()}_"
    overrides = {
        name[len(prefix):]: value
        for name, value in os.environ.items()
        if name.startswith(prefix)
    }
    if overrides:
        logger.info("Applying {} overrides: {}", env_mode, sorted(overrides))
    os.environ.update(overrides)


def load_templated_yaml(file_path: Path, env_mode: str = "development") -> ConfigData:
    """Read ``file_path``, render its placeholders and validate the ``config`` key.

    Raises:
        ValueError: on a missing required variable, unparsable or empty YAML,
            or a document that does not validate.
        FileNotFoundError: if ``file_path`` does not exist.
    """
    raw = Path(file_path).read_text()

    logger.info("Loading configuration for environment: {}", env_mode)
    apply_environment_overrides(env_mode)

    try:
        document = yaml.safe_load(substitute_env_vars(raw))
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e
    if not document:
        raise ValueError("Failed to parse YAML")

    try:
        return ConfigData(**document.get("config", {}))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
