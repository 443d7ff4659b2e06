"""Core configuration.

Centralizes environment variables (pydantic-settings) so the CLI, the
runner and the services read the same values.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.platforms import DEFAULT_ARCH_RULES_PATH

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def get_user_config_dir() -> Path:
    """Per-user configuration directory (XDG aware)."""

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "ipblocker"
    return Path.home() / ".config" / "ipblocker"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Every field can be overridden with an `IPBLOCKER_` environment variable,
    a `.env` in the working directory or the user's config `.env`.
    """

    model_config = SettingsConfigDict(
        env_prefix="IPBLOCKER_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first, then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    os_release_path: Path = Field(
        default=Path("/etc/os-release"),
        description="Line-oriented OS identification file used for distro detection.",
    )
    arch_rules_path: Path = Field(
        default=DEFAULT_ARCH_RULES_PATH,
        description="Rules file loaded by iptables.service on Arch (overwritten wholesale).",
    )
    use_sudo: bool = Field(
        default=False,
        description="Prefix every external command with `sudo`.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level for the stderr handler.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level
