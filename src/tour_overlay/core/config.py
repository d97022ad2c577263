"""Opening configuration loading.

Tour steps keep their opening parameters in small YAML files:

    padding: 8
    xOffset: 0
    yOffset: -4
    radius:
      topLeft: 12
      topRight: 12

Keys may be camelCase or snake_case. An empty file yields the defaults.
"""

from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from tour_overlay.core.logging import ErrorIds, logError
from tour_overlay.models.opening import OpeningConfig


class ConfigError(Exception):
    """Raised when an opening configuration file cannot be used."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Invalid opening config {self.path!r}: {reason}")


def parse_opening_config(data: Any, source: str | Path = "<memory>") -> OpeningConfig:
    """Validate already-parsed YAML data into an OpeningConfig.

    Raises:
        ConfigError: If the data is not a mapping or fails validation.
    """
    if data is None:
        return OpeningConfig()
    if not isinstance(data, dict):
        raise ConfigError(source, f"expected a mapping, got {type(data).__name__}")

    try:
        return OpeningConfig.model_validate(data)
    except ValidationError as e:
        logError(ErrorIds.CONFIG_INVALID, "Opening config failed validation", extra={"path": source})
        raise ConfigError(source, str(e)) from e


def load_opening_config(path: str | Path) -> OpeningConfig:
    """Load an OpeningConfig from a YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, or
            does not describe a valid configuration.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logError(ErrorIds.CONFIG_UNREADABLE, "Cannot read opening config", extra={"path": path})
        raise ConfigError(path, str(e)) from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logError(ErrorIds.CONFIG_INVALID, "Opening config is not valid YAML", extra={"path": path})
        raise ConfigError(path, str(e)) from e

    return parse_opening_config(data, source=path)
