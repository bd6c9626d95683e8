"""Runtime settings, read from the environment.

ARTMARKET_DATA_DIR  directory holding the JSON data files
ARTMARKET_ENV       development | test | staging | production
LOG_LEVEL           overrides the level implied by ARTMARKET_ENV
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_LEVEL_BY_ENV = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


class ConfigurationError(Exception):
    """An environment variable holds a value the application cannot use."""


def _log_level(raw: str) -> str:
    level = raw.strip().upper()
    # getLevelName maps known names to their number, anything else to a string
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(
            f"Invalid LOG_LEVEL '{raw}'. Must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )
    return level


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    environment: str = "development"
    log_level: str = "DEBUG"

    @property
    def json_logs(self) -> bool:
        return self.environment in ("production", "staging")

    @staticmethod
    def from_env() -> Settings:
        environment = os.getenv("ARTMARKET_ENV", "development").strip().lower()
        data_dir = os.getenv("ARTMARKET_DATA_DIR")
        return Settings(
            data_dir=Path(data_dir) if data_dir else _DEFAULT_DATA_DIR,
            environment=environment,
            log_level=_log_level(os.getenv("LOG_LEVEL", _LEVEL_BY_ENV.get(environment, "INFO"))),
        )

    def with_data_dir(self, data_dir: Path) -> Settings:
        return replace(self, data_dir=data_dir)
