"""
Settings - Environment-driven configuration.

Environment variables:
    TICTAC_ENV          development | production (default: development)
    TICTAC_HOST         Bind address for `tictac serve` (default: 127.0.0.1)
    TICTAC_PORT         Bind port for `tictac serve` (default: 8000)
    TICTAC_LOG_LEVEL    Root log level (default: INFO)
    ALLOWED_ORIGINS     Comma-separated CORS origins (default: *)
"""

from __future__ import annotations
from dataclasses import dataclass
import os


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the API server and CLI."""
    env: str = "development"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    allowed_origins: tuple[str, ...] = ("*",)

    @property
    def is_production(self) -> bool:
        return self.env == "production"

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from the process environment."""
        origins = os.getenv("ALLOWED_ORIGINS", "*")
        port = os.getenv("TICTAC_PORT", "8000")
        if not port.isdecimal():
            raise ValueError(f"TICTAC_PORT must be a port number, got {port!r}")
        return cls(
            env=os.getenv("TICTAC_ENV", "development"),
            host=os.getenv("TICTAC_HOST", "127.0.0.1"),
            port=int(port),
            log_level=os.getenv("TICTAC_LOG_LEVEL", "INFO").upper(),
            allowed_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        )
