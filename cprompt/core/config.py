# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""
cprompt Configuration — Environment-driven settings.

All configuration is loaded from environment variables (prefixed with
``CPROMPT_``) or ``~/.config/cprompt/.env``. The .env path is fixed: the
prompt renders in every directory the user visits, and a project's own
.env must never be picked up.
"""

from __future__ import annotations

import logging
import os

from pydantic_settings import BaseSettings
from pydantic import Field, ValidationError

logger = logging.getLogger("cprompt.config")

ENV_FILE = os.path.expanduser(os.path.join("~", ".config", "cprompt", ".env"))


class PromptSettings(BaseSettings):
    """Process-wide configuration loaded from environment."""

    # --- Logging ---
    LOG_LEVEL: str = Field(
        default="WARNING",
        description="Level for the stderr log handler",
    )

    # --- Buffer bounds ---
    MAX_STRFTIME_SIZE: int = Field(
        default=50,
        gt=1,
        description="Capacity of the time formatting buffer, terminator included",
    )
    PATH_MAX: int = Field(
        default=4096,
        gt=1,
        description="Longest path accepted for cwd and basename extraction",
    )

    model_config = {
        "env_prefix": "CPROMPT_",
        "env_file": ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }


def load_settings() -> PromptSettings:
    """Settings from the environment, or the defaults if they do not validate."""
    try:
        return PromptSettings()
    except ValidationError as exc:
        logger.warning("Invalid cprompt settings, using defaults: %s", exc)
        return PromptSettings.model_construct()


# Global singleton
settings = load_settings()
