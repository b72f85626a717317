"""
Data access interfaces.

All persistence backends must implement these interfaces.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional, Type, TypeVar

from domain.listeners import EntityChangeListener
from domain.persistable import Persistable

T = TypeVar("T", bound=Persistable)


class DataAccess(ABC):
    """Read-only access to persisted entities."""

    @abstractmethod
    def list_all(self, entity_type: Type[T]) -> Iterator[T]:
        """Lazily iterate over every entity of the given type."""
        pass

    @abstractmethod
    def find_by_id(self, entity_type: Type[T], entity_id: str) -> Optional[T]:
        """Get entity by ID, or None if absent."""
        pass

    @abstractmethod
    def exists(self, entity_type: Type[Persistable], entity_id: str) -> bool:
        """Check if an entity with the given ID is stored."""
        pass

    @abstractmethod
    def find_one_by(self, entity_type: Type[T], **filters: Any) -> Optional[T]:
        """Get the first entity whose fields equal the filters."""
        pass

    @abstractmethod
    def count(self, entity_type: Type[Persistable], **filters: Any) -> int:
        """Count entities whose fields equal the filters."""
        pass

    @abstractmethod
    def list_page(self, entity_type: Type[T], skip: int, limit: int, sort_by: Optional[str] = None, **filters: Any) -> List[T]:
        """List one slice of matching entities, optionally sorted by a field."""
        pass


class MutableDataAccess(DataAccess):
    """Data access that can also add, update and delete entities."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Add or update an entity, assigning an ID when it has none."""
        pass

    @abstractmethod
    def delete(self, entity_type: Type[Persistable], entity_id: str) -> bool:
        """Delete entity by ID. Returns False when nothing was stored."""
        pass

    @abstractmethod
    def add_listener(self, listener: EntityChangeListener) -> None:
        """Register a listener for subsequent save and delete notifications."""
        pass

    @abstractmethod
    def remove_listener(self, listener: EntityChangeListener) -> None:
        """Stop notifying a listener."""
        pass
