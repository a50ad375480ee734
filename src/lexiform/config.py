"""Environment-driven settings for the lexiform service."""

import logging
import os
from dataclasses import dataclass
from typing import Self

from lexiform.errors import ConfigError


@dataclass(frozen=True, slots=True)
class Settings:
    """Service settings.

    LEXIFORM_LOG_LEVEL      root log level (default INFO)
    LEXIFORM_KNOWN_VERBS    JSON file of verb records merged over the built-in table
    LEXIFORM_CORS_ORIGINS   comma-separated allowed origins (default *)
    """

    log_level: str = "INFO"
    known_verbs_path: str | None = None
    cors_origins: tuple[str, ...] = ("*",)

    @classmethod
    def from_env(cls) -> Self:
        log_level = os.getenv("LEXIFORM_LOG_LEVEL", "INFO").strip().upper()
        if log_level not in logging.getLevelNamesMapping():
            raise ConfigError(f"LEXIFORM_LOG_LEVEL: unknown log level {log_level!r}")

        origins = os.getenv("LEXIFORM_CORS_ORIGINS", "*")
        return cls(
            log_level=log_level,
            known_verbs_path=os.getenv("LEXIFORM_KNOWN_VERBS") or None,
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()) or ("*",),
        )
