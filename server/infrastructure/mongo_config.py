"""
MongoDB connection parameters.

Builds pymongo clients from application settings.
"""

from dataclasses import dataclass
from typing import Optional

from pymongo import MongoClient

from core.config import Settings
from core.exceptions import ConfigurationError


@dataclass(frozen=True)
class MongoConfig:
    """Connection parameters for the document store."""

    host: str = "localhost"
    port: int = 27017
    db_name: str = "onlinelibrary"
    username: Optional[str] = None
    password: Optional[str] = None
    auth_source: str = "admin"
    timeout_ms: int = 5000

    def __post_init__(self):
        if not self.db_name:
            raise ConfigurationError("MongoDB database name must not be empty")
        if self.password is not None and not self.username:
            raise ConfigurationError("MongoDB password given without a username")

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoConfig":
        return cls(
            host=settings.mongo_host,
            port=settings.mongo_port,
            db_name=settings.mongo_db_name,
            username=settings.mongo_username,
            password=settings.mongo_password,
            auth_source=settings.mongo_auth_source,
            timeout_ms=settings.mongo_timeout_ms,
        )

    def new_client(self) -> MongoClient:
        """Open a new client. pymongo connects lazily on first use."""
        kwargs = {"serverSelectionTimeoutMS": self.timeout_ms}
        if self.username:
            kwargs.update(username=self.username, password=self.password, authSource=self.auth_source)
        return MongoClient(self.host, self.port, **kwargs)

    def __repr__(self) -> str:
        # Never print the password
        return f"MongoConfig(host={self.host!r}, port={self.port}, db_name={self.db_name!r}, username={self.username!r})"
