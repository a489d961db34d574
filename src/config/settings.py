"""
Configuration settings for the Credenciales Backend
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

# Server configuration
PORT = int(os.getenv("PORT", 3000))
HOST = os.getenv("HOST", "0.0.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS settings
ALLOWED_ORIGINS = [origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()]


def _int_setting(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


@dataclass(frozen=True)
class DatabaseSettings:
    """Connection parameters for the credenciales database"""
    user: str
    database: str
    password: str = ""
    host: str = "localhost"
    port: int = 5432
    min_pool_size: int = 1
    max_pool_size: int = 10

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "DatabaseSettings":
        """
        Build settings from environment variables

        Args:
            env: Mapping to read from (default: os.environ)

        Returns:
            DatabaseSettings instance

        Raises:
            ValueError: If DB_USER or DB_NAME is missing, or a numeric value is invalid
        """
        env = os.environ if env is None else env

        user = env.get("DB_USER")
        if not user:
            raise ValueError("DB_USER environment variable is required")
        database = env.get("DB_NAME")
        if not database:
            raise ValueError("DB_NAME environment variable is required")

        settings = cls(
            user=user,
            database=database,
            password=env.get("DB_PASS", ""),
            host=env.get("DB_HOST") or "localhost",
            port=_int_setting(env, "DB_PORT", 5432),
            min_pool_size=_int_setting(env, "DB_POOL_MIN_SIZE", 1),
            max_pool_size=_int_setting(env, "DB_POOL_MAX_SIZE", 10),
        )
        if settings.min_pool_size > settings.max_pool_size:
            raise ValueError("DB_POOL_MIN_SIZE cannot exceed DB_POOL_MAX_SIZE")
        return settings

    def __repr__(self) -> str:
        # Password stays out of logs
        return (
            f"DatabaseSettings(host={self.host!r}, port={self.port}, "
            f"user={self.user!r}, database={self.database!r})"
        )
