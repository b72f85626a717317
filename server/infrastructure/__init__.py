"""Infrastructure module exports."""

from infrastructure.mongo_client import (
    create_data_access,
    get_data_access,
    ping,
    reset_data_access,
    set_data_access,
)
from infrastructure.mongo_config import MongoConfig

__all__ = [
    "MongoConfig",
    "create_data_access",
    "get_data_access",
    "set_data_access",
    "reset_data_access",
    "ping",
]
