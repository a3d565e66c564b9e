"""Load service settings from the environment or a JSON profile."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)

API_KEY_ENV = "API_FOOTBALL_KEY"
LEGACY_API_KEY_ENV = "APISPORTS_KEY"
API_BASE_ENV = "PITCHSIDE_API_BASE"
TIMEOUT_ENV = "PITCHSIDE_HTTP_TIMEOUT"
CACHE_SECONDS_ENV = "PITCHSIDE_CACHE_SECONDS"

DEFAULT_API_BASE = "https://v3.football.api-sports.io"


class ConfigurationError(RuntimeError):
    """Raised when a required setting (the upstream API key) is missing."""


def _env_float(name: str, default: float, *, clamp_min: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str] = None
    api_base: str = DEFAULT_API_BASE
    timeout: float = 10.0
    default_cache_seconds: int = 60
    stale_while_revalidate: int = 300

    @classmethod
    def from_env(cls) -> "Settings":
        api_key = os.getenv(API_KEY_ENV) or os.getenv(LEGACY_API_KEY_ENV) or None
        return cls(
            api_key=api_key,
            api_base=os.getenv(API_BASE_ENV, DEFAULT_API_BASE).rstrip("/"),
            timeout=_env_float(TIMEOUT_ENV, 10.0, clamp_min=0.1),
            default_cache_seconds=_env_int(CACHE_SECONDS_ENV, 60, min_value=0),
        )

    @classmethod
    def load(cls, path: Path) -> "Settings":
        """Read a JSON profile; keys it omits come from the environment."""

        data = json.loads(path.read_text(encoding="utf-8"))
        base = cls.from_env()
        known = {key: value for key, value in data.items() if key in asdict(base)}
        return replace(base, **known)

    def save(self, path: Path) -> None:
        payload = asdict(self)
        payload.pop("api_key", None)
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigurationError(f"{API_KEY_ENV} is not configured")
        return self.api_key
