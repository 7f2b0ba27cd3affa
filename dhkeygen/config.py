"""Logging configuration from environment / ./.env (DHKEYGEN_LOG_LEVEL)."""

import os
import logging
from pathlib import Path
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from dotenv import dotenv_values

LOG_LEVEL_VAR = "DHKEYGEN_LOG_LEVEL"


class ConfigError(Exception):
    """Raised when an environment value is not a valid choice."""
    pass


class Settings(BaseModel):
    """Settings that affect diagnostics only, never the generated output."""
    model_config = ConfigDict(frozen=True)

    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level: {value}")
        return value


def load_settings() -> Settings:
    """
    Read the log level from the environment.

    Only a .env file in the working directory itself is consulted, and it
    is read without being copied into os.environ. A variable already set
    in the environment takes precedence over the file.

    Returns:
        Settings

    Raises:
        ConfigError if a variable holds an invalid value
    """
    dotenv_file = Path.cwd() / ".env"
    file_values = dotenv_values(dotenv_file) if dotenv_file.is_file() else {}

    log_level = os.getenv(LOG_LEVEL_VAR) or file_values.get(LOG_LEVEL_VAR) or "WARNING"
    try:
        return Settings(log_level=log_level)
    except ValidationError as e:
        details = "; ".join(err["msg"] for err in e.errors())
        raise ConfigError(f"invalid environment configuration: {details}")
