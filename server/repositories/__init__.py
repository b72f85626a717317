"""Repository module exports."""

from repositories.base import DataAccess, MutableDataAccess
from repositories.listeners import EntityChangeListenerManager
from repositories.mongo_data_access import MongoDataAccess

__all__ = [
    "DataAccess",
    "MutableDataAccess",
    "EntityChangeListenerManager",
    "MongoDataAccess",
]
