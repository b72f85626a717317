"""
Data access implementation backed by MongoDB.

Each entity class maps to one collection; entities are stored as whole
documents keyed by their string ID. Store failures surface as
DataAccessError; validation failures raised by the entities pass through
untouched.
"""

import uuid
from typing import Any, Iterable, Iterator, List, Optional, Type

from pymongo import ASCENDING
from pymongo.collection import Collection
from pymongo.database import Database

from core.exceptions import DataAccessError, ValidationFailure
from core.logging_config import get_logger, log_error
from domain.listeners import EntityChangeListener
from domain.persistable import Persistable, ValidationOperation
from repositories.base import MutableDataAccess, T
from repositories.listeners import EntityChangeListenerManager

logger = get_logger("repositories.mongo")


class MongoDataAccess(MutableDataAccess):
    """MongoDB version of the data access layer."""

    def __init__(self, database: Database, client=None):
        """
        Initialize the data access.

        Args:
            database: Open pymongo database handle
            client: Client owning the database; closed by close() when given
        """
        self._db = database
        self._client = client
        self._listeners = EntityChangeListenerManager()

    @property
    def database(self) -> Database:
        return self._db

    def close(self) -> None:
        """Close the owned client, if any."""
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("MongoDB client closed")

    def _collection(self, entity_type: Type[Persistable]) -> Collection:
        return self._db[entity_type.get_collection_name()]

    def _fail(self, message: str, error: Exception, **context: Any) -> DataAccessError:
        log_error(logger, error, {"operation_message": message, **context})
        return DataAccessError(message)

    def ensure_indexes(self, *entity_types: Type[Persistable]) -> None:
        """Create the indexes each entity type declares."""
        for entity_type in entity_types:
            try:
                collection = self._collection(entity_type)
                for field in entity_type.index_fields:
                    collection.create_index([(field, ASCENDING)])
            except Exception as e:
                raise self._fail(f"Could not create indexes for {entity_type.__name__}", e) from e

    def _iterate(self, entity_type: Type[T], documents: Iterable[dict]) -> Iterator[T]:
        try:
            for document in documents:
                yield entity_type.from_document(document)
        except Exception as e:
            raise self._fail(f"Could not list {entity_type.__name__} entities", e) from e

    def list_all(self, entity_type: Type[T]) -> Iterator[T]:
        try:
            cursor = self._collection(entity_type).find({})
        except Exception as e:
            raise self._fail(f"Could not list {entity_type.__name__} entities", e) from e
        return self._iterate(entity_type, cursor)

    def find_by_id(self, entity_type: Type[T], entity_id: str) -> Optional[T]:
        try:
            document = self._collection(entity_type).find_one({"_id": entity_id})
            return entity_type.from_document(document) if document is not None else None
        except Exception as e:
            raise self._fail(
                f"Could not lookup entity {entity_type.__name__} with id {entity_id}", e, entity_id=entity_id
            ) from e

    def exists(self, entity_type: Type[Persistable], entity_id: str) -> bool:
        try:
            return self._collection(entity_type).count_documents({"_id": entity_id}, limit=1) != 0
        except Exception as e:
            raise self._fail(
                f"Could not determine existence of {entity_type.__name__} with id {entity_id}", e, entity_id=entity_id
            ) from e

    def find_one_by(self, entity_type: Type[T], **filters: Any) -> Optional[T]:
        try:
            document = self._collection(entity_type).find_one(filters)
            return entity_type.from_document(document) if document is not None else None
        except Exception as e:
            raise self._fail(f"Could not lookup {entity_type.__name__} by {filters}", e) from e

    def count(self, entity_type: Type[Persistable], **filters: Any) -> int:
        try:
            return self._collection(entity_type).count_documents(filters)
        except Exception as e:
            raise self._fail(f"Could not count {entity_type.__name__} entities", e) from e

    def list_page(self, entity_type: Type[T], skip: int, limit: int, sort_by: Optional[str] = None, **filters: Any) -> List[T]:
        try:
            cursor = self._collection(entity_type).find(filters)
            if sort_by:
                cursor = cursor.sort(sort_by, ASCENDING)
            cursor = cursor.skip(max(skip, 0)).limit(max(limit, 0))
            return [entity_type.from_document(document) for document in cursor]
        except Exception as e:
            raise self._fail(f"Could not list page of {entity_type.__name__} (skip={skip}, limit={limit})", e) from e

    def save(self, entity: T) -> T:
        try:
            if entity.id is None:
                entity.assign_id(str(uuid.uuid4()))
                is_new = True
            else:
                is_new = not self.exists(type(entity), entity.id)

            operation = ValidationOperation.ADD if is_new else ValidationOperation.UPDATE
            entity.validate_for(operation, self)
            self._collection(type(entity)).replace_one({"_id": entity.id}, entity.to_document(), upsert=True)
        except (DataAccessError, ValidationFailure):
            raise
        except Exception as e:
            raise self._fail(f"Failed to save entity {entity}", e, entity_id=entity.id) from e

        logger.debug("Saved %s (new=%s)", entity, is_new)
        self._listeners.fire_item_saved(entity, is_new)
        return entity

    def delete(self, entity_type: Type[Persistable], entity_id: str) -> bool:
        try:
            old_entity = self.find_by_id(entity_type, entity_id)
            if old_entity is None:
                return False
            old_entity.validate_for(ValidationOperation.DELETE, self)
            self._collection(entity_type).delete_one({"_id": entity_id})
        except (DataAccessError, ValidationFailure):
            raise
        except Exception as e:
            raise self._fail(
                f"Failed to delete entity {entity_type.__name__} with id {entity_id}", e, entity_id=entity_id
            ) from e

        logger.debug("Deleted %s", old_entity)
        self._listeners.fire_item_deleted(old_entity)
        return True

    def add_listener(self, listener: EntityChangeListener) -> None:
        self._listeners.add(listener)

    def remove_listener(self, listener: EntityChangeListener) -> None:
        self._listeners.remove(listener)
