"""A lazily created, shared configuration object."""

from __future__ import annotations

from typing import ClassVar, Optional

__all__ = ["Config"]

DEFAULT_DB = "https://example.com/"


class Config:
    """Application configuration shared through a single instance."""

    _instance: ClassVar[Optional[Config]] = None

    def __init__(self, db: str) -> None:
        self.db = db
        print("Creating object! [Xpensive]")

    @classmethod
    def get_instance(cls) -> Config:
        """Return the shared instance, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls(DEFAULT_DB)
        print("Serving object")
        return cls._instance