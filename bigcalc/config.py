"""Runtime settings for the calculator shell, read from the environment.

Values come from ``BIGCALC_*`` environment variables, optionally provided
through a ``.env`` file; command-line flags override them in ``main``.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

DEFAULT_HISTORY_FILE = os.path.expanduser("~/.bigcalc_history")
_LEVEL_NAMES = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseModel):
    """Shell configuration."""
    prompt: str = "> "
    history_file: str = DEFAULT_HISTORY_FILE
    use_history: bool = True
    log_level: str = Field(default="WARNING", description="Standard logging level name")

    @field_validator('log_level')
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator('history_file')
    @classmethod
    def expand_history_path(cls, v: str) -> str:
        return os.path.expanduser(v)

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Build Settings from BIGCALC_* environment variables (and .env)."""
    load_dotenv(env_file)
    values = {}
    if os.getenv("BIGCALC_PROMPT") is not None:
        values["prompt"] = os.getenv("BIGCALC_PROMPT")
    if os.getenv("BIGCALC_HISTORY_FILE"):
        values["history_file"] = os.getenv("BIGCALC_HISTORY_FILE")
    if os.getenv("BIGCALC_USE_HISTORY"):
        values["use_history"] = os.getenv("BIGCALC_USE_HISTORY")
    if os.getenv("BIGCALC_LOG_LEVEL"):
        values["log_level"] = os.getenv("BIGCALC_LOG_LEVEL")
    return Settings(**values)
