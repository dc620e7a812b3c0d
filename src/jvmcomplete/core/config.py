"""Completion engine settings.

Settings are plain JSON, for example::

    {
        "sort_runtime_names": true,
        "log_level": "DEBUG",
        "classlist_path": "/usr/lib/jvm/java-17/lib/classlist"
    }
"""

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from jvmcomplete.logger import get_logger

logger = get_logger("config")

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class CompletionSettings(BaseModel):
    """Settings for the completion engine."""

    model_config = ConfigDict(frozen=True)

    sort_runtime_names: bool = Field(
        default=True,
        description="Sort the runtime class list when no workspace is active",
    )
    log_level: str = Field(default="WARNING", description="Loguru level for the engine")
    log_file: Optional[str] = Field(default=None, description="Optional rotating log file")
    classlist_path: Optional[str] = Field(
        default=None,
        description="JDK classlist file used as the runtime class source",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_settings(config_path: str | Path) -> CompletionSettings:
    """
    Load completion settings from a JSON file.

    Args:
        config_path: Path to the JSON settings file

    Returns:
        CompletionSettings: Parsed settings

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the JSON is invalid
        ValidationError: If the settings structure is invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        error_msg = f"Completion settings file not found: {config_path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    logger.info("Loading completion settings from: {}", config_path)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in settings file {}: {}", config_path, e)
        raise

    try:
        return CompletionSettings(**data)
    except ValidationError as e:
        logger.error("Invalid settings structure in {}: {}", config_path, e)
        raise
