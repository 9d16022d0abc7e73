"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass


def parse_bool(value: object, default: bool) -> bool:
    """Read a flag that may come from the environment as text."""

    if isinstance(value, bool):
        return value
    if value is None or not str(value).strip():
        return default
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    return parse_bool(os.getenv(name), default)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def resolve_database_url() -> str:
    """Resolve DB connection string.

    Priority:
      1) DATABASE_URL (explicit)
      2) Fallback to a local sqlite file
    """

    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit

    return "sqlite:///./cheeses.db"


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")
    DATABASE_URL: str = resolve_database_url()
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Paged list
    PAGE_SIZE: int = _env_int("PAGE_SIZE", 30)
    ENABLE_PLACEHOLDERS: bool = _env_bool("ENABLE_PLACEHOLDERS", True)
    MAX_SIZE: int = _env_int("MAX_SIZE", 200)

    # Fill an empty table with the built-in cheese names on startup.
    SEED_DATABASE: bool = _env_bool("SEED_DATABASE", True)


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


@dataclass(frozen=True)
class TestingConfig(BaseConfig):
    """Testing configuration."""

    TESTING: bool = True
    DEBUG: bool = False
    SEED_DATABASE: bool = False


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig
