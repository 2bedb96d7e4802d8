"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets adapters (HTTP) and the deposit service read config consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DEPOSIT_URL = "https://jsonplaceholder.typicode.com/posts"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "deposit-callback"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "deposit-callback"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "deposit-callback"
    return Path.home() / ".config" / "deposit-callback"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Write or update variables in the user's global .env."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# deposit-callback user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing and validation at the edge (env vars) keep the service free of parsing.
    - A single config contract shared by the CLI, the HTTP adapter and the service.
    """

    model_config = SettingsConfigDict(
        env_prefix="DEPOSIT_CB_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    deposit_url: str = Field(
        default=DEFAULT_DEPOSIT_URL,
        min_length=8,
        description="Endpoint receiving the deposit POST.",
    )
    http_timeout_seconds: float = Field(
        default=9.0,
        gt=0,
        description="Default timeout per request (seconds).",
    )
    http_max_timeout_seconds: float = Field(
        default=9.0,
        gt=0,
        description="Upper bound for any per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="deposit-callback/0.1",
        min_length=1,
        description="User-Agent sent with outbound requests.",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Logging level used by the CLI (DEBUG, INFO, WARNING, ...).",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value
