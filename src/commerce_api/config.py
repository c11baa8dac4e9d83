import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

# Levels understood by both the logging module and uvicorn
LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


def _require(name: str) -> str:
    value = os.getenv(name, "").strip()
    if not value:
        raise ValueError(f"{name} environment variable is required")
    return value


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Stores
    database_url: str
    valkey_url: str

    # Pools
    database_max_connections: int = 2
    database_acquire_timeout: float = 30.0  # seconds
    valkey_pool_size: int = 1

    # API
    api_host: str = "127.0.0.1"
    api_port: int = 8080

    log_level: str = "info"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment.

        Raises:
            ValueError: If a required variable is missing or a value is malformed
        """
        return cls(
            database_url=_require("DATABASE_URL"),
            valkey_url=_require("VALKEY_URL"),
            database_max_connections=_int("DATABASE_MAX_CONNECTIONS", 2),
            database_acquire_timeout=_float("DATABASE_ACQUIRE_TIMEOUT", 30.0),
            valkey_pool_size=_int("VALKEY_POOL_SIZE", 1),
            api_host=os.getenv("API_HOST", "127.0.0.1"),
            api_port=_int("API_PORT", 8080),
            log_level=os.getenv("LOG_LEVEL", "info"),
        )

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.database_max_connections < 1:
            raise ValueError("DATABASE_MAX_CONNECTIONS must be at least 1")

        if self.valkey_pool_size < 1:
            raise ValueError("VALKEY_POOL_SIZE must be at least 1")

        if self.database_acquire_timeout <= 0:
            raise ValueError("DATABASE_ACQUIRE_TIMEOUT must be positive")

        if self.log_level.lower() not in LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
