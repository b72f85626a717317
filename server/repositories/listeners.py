"""
Entity change listener registry.

Fans save and delete notifications out to registered listeners.
"""

import threading
from typing import List

from core.logging_config import get_logger
from domain.listeners import EntityChangeListener
from domain.persistable import Persistable

logger = get_logger("repositories.listeners")


class EntityChangeListenerManager:
    """Ordered set of listeners notified after each mutation."""

    def __init__(self):
        self._listeners: List[EntityChangeListener] = []
        self._lock = threading.RLock()

    def add(self, listener: EntityChangeListener) -> None:
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def remove(self, listener: EntityChangeListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def __len__(self) -> int:
        return len(self._listeners)

    def _snapshot(self) -> List[EntityChangeListener]:
        with self._lock:
            return list(self._listeners)

    def fire_item_saved(self, entity: Persistable, is_new: bool) -> None:
        """Notify every listener that an entity was saved."""
        for listener in self._snapshot():
            try:
                listener.item_saved(entity, is_new)
            except Exception:
                # The save is already applied; keep notifying the rest
                logger.exception(
                    "Listener %s failed on save of %s",
                    type(listener).__name__,
                    entity,
                    extra={"entity_id": entity.id, "event": "listener_error"},
                )

    def fire_item_deleted(self, entity: Persistable) -> None:
        """Notify every listener that an entity was deleted."""
        for listener in self._snapshot():
            try:
                listener.item_deleted(entity)
            except Exception:
                logger.exception(
                    "Listener %s failed on delete of %s",
                    type(listener).__name__,
                    entity,
                    extra={"entity_id": entity.id, "event": "listener_error"},
                )
