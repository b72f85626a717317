"""
Shared data access instance for the application.

Holds the single long-lived MongoDataAccess (and with it the MongoDB client)
used by the web layer.
"""

import threading
from typing import Optional

from core.config import get_settings
from core.logging_config import get_logger
from domain.models import Book, LibraryUser
from infrastructure.mongo_config import MongoConfig
from repositories.mongo_data_access import MongoDataAccess

logger = get_logger("infrastructure")

_data_access_instance: Optional[MongoDataAccess] = None
_data_access_lock = threading.Lock()


def create_data_access(config: MongoConfig) -> MongoDataAccess:
    """Open a client from connection parameters; the data access owns it."""
    client = config.new_client()
    logger.info("Connecting to MongoDB at %s:%s/%s", config.host, config.port, config.db_name)
    return MongoDataAccess(client[config.db_name], client=client)


def get_data_access() -> MongoDataAccess:
    """Get the data access instance (singleton).

    Creates it from settings on first use and ensures the entity indexes.
    """
    global _data_access_instance

    if _data_access_instance is None:
        with _data_access_lock:
            if _data_access_instance is None:
                config = MongoConfig.from_settings(get_settings())
                data_access = create_data_access(config)
                try:
                    data_access.ensure_indexes(Book, LibraryUser)
                except Exception:
                    data_access.close()
                    raise
                _data_access_instance = data_access
                logger.info("Created new MongoDataAccess instance for %r", config)

    return _data_access_instance


def set_data_access(data_access: MongoDataAccess) -> None:
    """Set a custom data access (useful for testing)."""
    global _data_access_instance
    with _data_access_lock:
        _data_access_instance = data_access
    logger.info("Custom MongoDataAccess set")


def reset_data_access() -> None:
    """Close and drop the data access so the next call creates a new one."""
    global _data_access_instance
    with _data_access_lock:
        if _data_access_instance is not None:
            _data_access_instance.close()
        _data_access_instance = None
    logger.info("MongoDataAccess reset")


def ping() -> bool:
    """Check that the store answers."""
    get_data_access().database.command("ping")
    return True
