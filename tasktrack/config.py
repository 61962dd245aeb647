"""Configuration storage for tasktrack.

Stores user preferences in ~/.tasktrack/config.json. The directory can be
moved with the TASKTRACK_HOME environment variable.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError

HOME_ENV_VAR = "TASKTRACK_HOME"

logger = logging.getLogger(__name__)


class AppConfig(BaseModel):
    """User configuration."""

    data_file: Optional[str] = None  # defaults to <config dir>/tasks.json
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    seed_on_first_run: bool = True

    def resolve_data_file(self) -> Path:
        """Return the data file location, falling back to the config dir."""
        if self.data_file:
            return Path(self.data_file).expanduser()
        return get_config_dir() / "tasks.json"


def get_config_dir() -> Path:
    """Get the tasktrack config directory."""
    override = os.environ.get(HOME_ENV_VAR)
    config_dir = Path(override).expanduser() if override else Path.home() / ".tasktrack"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config() -> AppConfig:
    """Load configuration, using defaults if the file is missing or invalid."""
    config_file = get_config_dir() / "config.json"
    if config_file.exists():
        try:
            data = json.loads(config_file.read_text(encoding="utf-8"))
            return AppConfig(**data)
        except (json.JSONDecodeError, TypeError, ValidationError) as e:
            logger.warning("Ignoring invalid config %s: %s", config_file, e)
    return AppConfig()  # defaults


def save_config(config: AppConfig) -> None:
    """Save configuration."""
    config_file = get_config_dir() / "config.json"
    config_file.write_text(
        json.dumps(config.model_dump(), indent=2),
        encoding="utf-8",
    )
