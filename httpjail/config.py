"""Jail settings loaded from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from .jail import JailConfig

_TRUTHY = {"1", "true", "yes", "on"}


def _load_dotenv() -> None:
    env_path = Path(".env")
    if not env_path.exists():
        return
    for line in env_path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


_load_dotenv()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"Invalid integer for environment variable {name}: {raw!r}") from exc


def _bool_env(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    """Runtime configuration derived from environment variables."""

    allowed_requests: int = 60
    window_seconds: int = 60
    cooloff_seconds: int = 60
    proxied: bool = False
    silent: bool = False
    log_level: str = "INFO"

    def jail_config(self) -> JailConfig:
        return JailConfig(
            allowed_requests=self.allowed_requests,
            window=self.window_seconds,
            cooloff=self.cooloff_seconds,
            proxied=self.proxied,
            silent=self.silent,
        )

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            allowed_requests=_int_env("HTTPJAIL_ALLOWED_REQUESTS", 60),
            window_seconds=_int_env("HTTPJAIL_WINDOW_SECONDS", 60),
            cooloff_seconds=_int_env("HTTPJAIL_COOLOFF_SECONDS", 60),
            proxied=_bool_env("HTTPJAIL_PROXIED"),
            silent=_bool_env("HTTPJAIL_SILENT"),
            log_level=os.getenv("HTTPJAIL_LOG_LEVEL", "INFO").upper(),
        )


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings.from_env()
