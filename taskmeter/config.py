"""Settings for taskmeter.

Read from ~/.taskmeter/config.json (or $TASKMETER_CONFIG_DIR/config.json)
when present, then overridden by TASKMETER_* environment variables.
Only settings are read from disk; tasks are never persisted.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "TASKMETER_"


class Settings(BaseModel):
    """User preferences."""

    # Completed count of a freshly added project row
    new_row_completed_default: str = "0"
    # strftime format of the name given to tasks saved without one
    task_name_date_format: str = "%Y年%m月%d日"
    log_level: str = "WARNING"


def get_config_dir() -> Path:
    """Get the taskmeter config directory."""
    override = os.environ.get(f"{ENV_PREFIX}CONFIG_DIR")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".taskmeter"


def _env_overrides() -> dict[str, str]:
    overrides: dict[str, str] = {}
    for name in Settings.model_fields:
        value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if value is not None:
            overrides[name] = value
    return overrides


def load_settings() -> Settings:
    """Load settings from the config file and environment."""
    data: dict = {}
    config_file = get_config_dir() / "config.json"
    if config_file.exists():
        try:
            loaded = json.loads(config_file.read_text(encoding="utf-8"))
            if isinstance(loaded, dict):
                data.update(loaded)
            else:
                logger.warning(f"Ignoring {config_file}: expected a JSON object")
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable {config_file}: {e}")

    data.update(_env_overrides())

    try:
        return Settings(**data)
    except ValidationError as e:
        logger.warning(f"Invalid settings, using defaults: {e}")
        return Settings()
