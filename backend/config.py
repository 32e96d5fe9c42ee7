"""Configuration for the upgrade types API."""

# Settings are read from environment variables, optionally seeded from a .env file.

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "INFO"


def parse_log_level(value: Optional[str]) -> str:
    """Normalise a level name, falling back to INFO for names logging does not know."""
    name = (value or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        return DEFAULT_LOG_LEVEL
    return name


@dataclass
class Settings:
    """API settings loaded from environment variables."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @staticmethod
    def _safe_int(value: Optional[str], default: int) -> int:
        try:
            return int(value)
        except (ValueError, TypeError):
            return default

    @staticmethod
    def _origins(value: Optional[str]) -> List[str]:
        origins = [origin.strip() for origin in (value or "").split(",") if origin.strip()]
        return origins or ["*"]

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Settings":
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        return cls(
            host=os.environ.get("UPGRADES_HOST", DEFAULT_HOST),
            port=cls._safe_int(os.environ.get("UPGRADES_PORT"), DEFAULT_PORT),
            log_level=parse_log_level(os.environ.get("UPGRADES_LOG_LEVEL")),
            cors_origins=cls._origins(os.environ.get("UPGRADES_CORS_ORIGINS")),
        )
