"""
Calculator configuration.

Settings come from an optional YAML or JSON file, with environment
variables taking precedence over file values.

Environment variables:
    SMARTCALC_CONFIG - Path to a YAML or JSON settings file
    SMARTCALC_LOG_LEVEL - Log level (debug, info, warning, error)
    SMARTCALC_APP_HOST - Host the HTTP server binds to (default: 0.0.0.0)
    SMARTCALC_APP_PORT - Port the HTTP server listens on (default: 8095)

Example file:
    logLevel: info
    expressionLimits:
      max_expression_length: 1024
      max_exponent: 100000
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

from smartcalc.expr.limits import ExpressionLimits

ENV_VAR_CONFIG = "SMARTCALC_CONFIG"
ENV_VAR_LOG_LEVEL = "SMARTCALC_LOG_LEVEL"
ENV_VAR_APP_HOST = "SMARTCALC_APP_HOST"
ENV_VAR_APP_PORT = "SMARTCALC_APP_PORT"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class CalculatorSettings(BaseModel):
    """Settings shared by the REPL and the HTTP server."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    expression_limits: ExpressionLimits = Field(
        default_factory=ExpressionLimits, alias="expressionLimits"
    )

    log_level: str = Field(default="warning", alias="logLevel")

    # Prompt printed before each REPL line; empty means no prompt
    prompt: str = ""

    host: str = "0.0.0.0"

    port: int = 8095


def load_settings(path: Optional[str | os.PathLike[str]] = None) -> CalculatorSettings:
    """
    Loads settings from a file and the environment.

    Args:
        path: Settings file; defaults to $SMARTCALC_CONFIG if set

    Raises:
        ValueError: If the file cannot be parsed or holds invalid settings
    """
    path = path or os.getenv(ENV_VAR_CONFIG)
    data: dict[str, Any] = {}

    if path:
        data = _read_settings_file(Path(path))

    if os.getenv(ENV_VAR_LOG_LEVEL):
        data["log_level"] = os.environ[ENV_VAR_LOG_LEVEL]
    if os.getenv(ENV_VAR_APP_HOST):
        data["host"] = os.environ[ENV_VAR_APP_HOST]
    if os.getenv(ENV_VAR_APP_PORT):
        data["port"] = os.environ[ENV_VAR_APP_PORT]

    # Drop the alias spelling when the environment supplied the field name
    if "log_level" in data:
        data.pop("logLevel", None)

    return CalculatorSettings.model_validate(data)


def _read_settings_file(path: Path) -> dict[str, Any]:
    # YAML is a superset of JSON, so one loader handles both formats
    try:
        content = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as error:
        raise ValueError(f"Cannot read settings file {path}: {error}") from error

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")
    return content


def enable_logging(log_level: str = "warning") -> None:
    """Configures root logging for the calculator entry points."""
    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT)
    logging.getLogger().setLevel(log_level.upper())
