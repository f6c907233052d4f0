"""Settings loaded from environment variables.

One frozen Settings object for the whole server; nothing is required at
import time and every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from kanban_mcp.enums import DEFAULT_SNAPSHOT_LOCATION

ENV_PREFIX = "KANBAN"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True, slots=True)
class Settings:
    app_name: str = "kanban_mcp"
    log_level: str = "INFO"
    sample_tasks: int = 8
    snapshot_location: str = DEFAULT_SNAPSHOT_LOCATION

    @staticmethod
    def from_env() -> Settings:
        return Settings(
            app_name=_env(_k("APP_NAME"), "kanban_mcp"),
            log_level=_env(_k("LOG_LEVEL"), "INFO").upper(),
            sample_tasks=max(0, _env_int(_k("SAMPLE_TASKS"), 8)),
            snapshot_location=_env(_k("SNAPSHOT_LOCATION"), DEFAULT_SNAPSHOT_LOCATION),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
