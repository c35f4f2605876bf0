"""Client configuration.

Settings come from environment variables prefixed `DODO_PAYMENTS_`, from a
`.env` in the working directory, and finally from a per-user `.env` written
by `dodopayments setup`. Arguments passed to `DodoPayments(...)` always win.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dodopayments.core.domain.environment import Environment

logger = logging.getLogger(__name__)

LOG_LEVELS = ("debug", "info", "warning", "error")


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependency)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "dodopayments"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "dodopayments"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "dodopayments"
    return Path.home() / ".config" / "dodopayments"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    """KEY=value pairs; comments, blank lines and `export ` prefixes are tolerated."""

    data: dict[str, str] = {}
    for line in map(str.strip, text.splitlines()):
        if line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.removeprefix("export ").partition("=")
        key = key.strip()
        if key:
            data[key] = value.strip().strip("\"'")
    return data


def read_user_env_vars() -> dict[str, str]:
    """Values currently stored in the user `.env` (empty if missing or unreadable)."""

    env_path = get_user_env_file()
    if not env_path.exists():
        return {}
    try:
        return _parse_env_lines(env_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read %s: %s", env_path, exc)
        return {}


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Create or update keys in the user `.env`. `None` values are skipped."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing = read_user_env_vars()
    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# dodopayments user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class ClientSettings(BaseSettings):
    """Defaults for `DodoPayments` read from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="DODO_PAYMENTS_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        # Project .env first (development), then the user-level file.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_key: str | None = Field(
        default=None,
        description="Bearer token sent as `Authorization: Bearer <key>`.",
    )
    base_url: str | None = Field(
        default=None,
        description="Overrides the URL derived from `environment`.",
    )
    environment: Environment = Field(
        default=Environment.LIVE_MODE,
        description="live_mode or test_mode.",
    )
    webhook_key: str | None = Field(
        default=None,
        description="Standard Webhooks secret (`whsec_...`) used by `webhooks.unwrap`.",
    )
    timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    max_retries: int = Field(
        default=2,
        ge=0,
        le=10,
        description="Retries on connection errors, 408/409/429 and 5xx.",
    )
    log_level: str | None = Field(
        default=None,
        validation_alias=AliasChoices("DODO_PAYMENTS_LOG", "DODO_PAYMENTS_LOG_LEVEL"),
        description="debug, info, warning or error. Unset keeps the library silent.",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        value = value.strip().lower()
        if value not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return value

    def resolved_base_url(self) -> str:
        if self.base_url:
            return self.base_url
        return self.environment.base_url()
