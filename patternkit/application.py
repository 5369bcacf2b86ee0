"""Application configuration and a builder that assembles it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = ["Application", "ApplicationBuilder"]

DEFAULT_KEEP_ALIVE_SECONDS = 5
DEFAULT_PORT = 3000


@dataclass(frozen=True)
class Application:
    """An immutable application configuration."""

    api_key: str
    jwt_secret: str
    keep_alive_seconds: int = DEFAULT_KEEP_ALIVE_SECONDS
    port: int = DEFAULT_PORT

    def __str__(self) -> str:
        return (
            "Application Configuration:\n"
            f"  API Key: {self.api_key}\n"
            f"  JWT Secret: {self.jwt_secret}\n"
            f"  Keep Alive (seconds): {self.keep_alive_seconds}\n"
            f"  Port: {self.port}\n"
        )


@dataclass
class ApplicationBuilder:
    """Collects configuration values and builds an Application from them."""

    api_key: Optional[str] = None
    jwt_secret: Optional[str] = None
    keep_alive_seconds: int = DEFAULT_KEEP_ALIVE_SECONDS
    port: int = DEFAULT_PORT

    def build(self) -> Application:
        """Return the configured Application.

        Raises ValueError if the API key or JWT secret has not been given.
        """
        if self.api_key is None:
            raise ValueError("api_key is required")
        if self.jwt_secret is None:
            raise ValueError("jwt_secret is required")
        return Application(
            api_key=self.api_key,
            jwt_secret=self.jwt_secret,
            keep_alive_seconds=self.keep_alive_seconds,
            port=self.port,
        )