from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///./data/tasks.db"
DEFAULT_ALLOWED_ORIGIN = "http://localhost:4200"


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    allowed_origin: str = DEFAULT_ALLOWED_ORIGIN
    log_level: str = "INFO"
    sql_echo: bool = False
    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = 8080

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def parse_bool_env(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized in {"true", "1", "yes", "on"}:
        return True
    if normalized in {"false", "0", "no", "off"}:
        return False
    return None


def parse_int_env(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Invalid integer env value '%s', using default=%s", value, default)
        return default


@lru_cache
def get_settings() -> Settings:
    database_url = os.getenv("DATABASE_URL", "").strip() or DEFAULT_DATABASE_URL
    allowed_origin = os.getenv("ALLOWED_ORIGIN", "").strip() or DEFAULT_ALLOWED_ORIGIN
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    sql_echo = parse_bool_env(os.getenv("SQL_ECHO")) or False
    environment = os.getenv("ENVIRONMENT", "development").lower()
    host = os.getenv("HOST", "0.0.0.0")
    port = parse_int_env(os.getenv("PORT"), 8080)

    return Settings(
        database_url=database_url,
        allowed_origin=allowed_origin.rstrip("/"),
        log_level=log_level,
        sql_echo=sql_echo,
        environment=environment,
        host=host,
        port=port,
    )
