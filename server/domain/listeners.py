"""Entity change listener interface."""

from abc import ABC, abstractmethod

from domain.persistable import Persistable


class EntityChangeListener(ABC):
    """Receives notifications after entities are saved or deleted."""

    @abstractmethod
    def item_saved(self, entity: Persistable, is_new: bool) -> None:
        """Called after an entity was persisted. `is_new` is True for an add."""
        pass

    @abstractmethod
    def item_deleted(self, entity: Persistable) -> None:
        """Called after an entity was removed from the store."""
        pass
