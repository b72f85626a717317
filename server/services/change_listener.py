"""
Change listener that writes an audit trail of entity mutations to the log.
"""

from core.logging_config import get_logger
from domain.listeners import EntityChangeListener
from domain.persistable import Persistable

logger = get_logger("services.audit")


class LoggingChangeListener(EntityChangeListener):
    """Logs every save and delete reported by the data access layer."""

    def item_saved(self, entity: Persistable, is_new: bool) -> None:
        action = "added" if is_new else "updated"
        logger.info(
            f"{type(entity).__name__} {entity.id} {action}",
            extra={"entity_type": type(entity).__name__, "entity_id": entity.id, "event": f"entity_{action}"},
        )

    def item_deleted(self, entity: Persistable) -> None:
        logger.info(
            f"{type(entity).__name__} {entity.id} deleted",
            extra={"entity_type": type(entity).__name__, "entity_id": entity.id, "event": "entity_deleted"},
        )
