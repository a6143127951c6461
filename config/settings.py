from dataclasses import dataclass
import os
from typing import Optional

from dotenv import load_dotenv


_TRUE_VALUES = {"1", "t", "T", "true", "TRUE", "True"}
_FALSE_VALUES = {"0", "f", "F", "false", "FALSE", "False"}


def parse_bool(name: str, raw: str) -> bool:
    """Parse a boolean environment value, rejecting anything unrecognized."""
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid {name} value: {raw!r}")


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"invalid {name} value: {raw!r}") from None


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"invalid {name} value: {raw!r}") from None


@dataclass
class Settings:
    """Runtime configuration for the content query service."""
    database_url: str
    statics_host: str
    app_env: str = "dev"
    redis_enabled: bool = False
    redis_url: str = ""
    redis_ttl: int = 3600
    redis_timeout: float = 1.0
    db_pool_size: int = 5
    db_max_open: int = 10
    db_idle_timeout: int = 300
    count_timeout: float = 5.0
    fetch_timeout: float = 10.0
    hydrate_timeout: float = 15.0
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @property
    def cache_active(self) -> bool:
        """Caching runs only when enabled and a backend is configured."""
        return self.redis_enabled and bool(self.redis_url)

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        """
        Load settings from the environment (and a local .env file).

        DATABASE_URL and STATICS_HOST are mandatory. Everything else
        falls back to a default.

        Raises:
            ValueError: If a required variable is missing or a value
                        cannot be parsed
        """
        if dotenv:
            load_dotenv()

        database_url = os.getenv("DATABASE_URL", "").strip()
        if not database_url:
            raise ValueError("DATABASE_URL not set")

        statics_host = os.getenv("STATICS_HOST", "").strip()
        if not statics_host:
            raise ValueError("STATICS_HOST not set")

        redis_enabled = False
        raw_enabled = os.getenv("REDIS_ENABLED", "").strip()
        if raw_enabled:
            redis_enabled = parse_bool("REDIS_ENABLED", raw_enabled)

        db_pool_size = _int_env("DB_POOL_SIZE", 5)
        db_max_open = _int_env("DB_MAX_OPEN", 10)
        if db_max_open < db_pool_size:
            raise ValueError(
                f"DB_MAX_OPEN ({db_max_open}) must be >= DB_POOL_SIZE ({db_pool_size})"
            )

        return cls(
            database_url=database_url,
            statics_host=statics_host.rstrip("/"),
            app_env=os.getenv("APP_ENV", "").strip() or "dev",
            redis_enabled=redis_enabled,
            redis_url=os.getenv("REDIS_URL", "").strip(),
            redis_ttl=_int_env("REDIS_TTL", 3600),
            redis_timeout=_float_env("REDIS_TIMEOUT", 1.0),
            db_pool_size=db_pool_size,
            db_max_open=db_max_open,
            db_idle_timeout=_int_env("DB_IDLE_TIMEOUT", 300),
            count_timeout=_float_env("QUERY_COUNT_TIMEOUT", 5.0),
            fetch_timeout=_float_env("QUERY_FETCH_TIMEOUT", 10.0),
            hydrate_timeout=_float_env("QUERY_HYDRATE_TIMEOUT", 15.0),
            log_level=os.getenv("LOG_LEVEL", "").strip().upper() or "INFO",
            log_file=os.getenv("LOG_FILE", "").strip() or None,
        )
