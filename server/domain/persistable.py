"""
Persistable entity base model.

Every entity stored through the data-access layer derives from Persistable:
it carries a string identifier, knows which collection it lives in, maps
itself to and from a store document, and validates itself before each
mutation.
"""

from abc import abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Mapping, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel

if TYPE_CHECKING:
    from repositories.base import DataAccess

P = TypeVar("P", bound="Persistable")


class ValidationOperation(str, Enum):
    """Lifecycle stage an entity is validated for."""

    ADD = "ADD"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class Persistable(BaseModel):
    """Base model for entities persisted as whole documents."""

    # Collection name; defaults to the class name
    collection_name: ClassVar[Optional[str]] = None
    # Fields to index in the collection
    index_fields: ClassVar[Tuple[str, ...]] = ()

    id: Optional[str] = None

    @classmethod
    def get_collection_name(cls) -> str:
        return cls.collection_name or cls.__name__

    def assign_id(self, entity_id: str) -> None:
        """Set the identifier. An identifier that is already set never changes."""
        self.id = entity_id

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and self.id is not None and value != self.id:
            raise ValueError(f"{type(self).__name__} already has id {self.id}")
        super().__setattr__(name, value)

    @abstractmethod
    def validate_for(self, operation: ValidationOperation, data_access: "DataAccess") -> None:
        """
        Check that the entity may undergo the given operation.

        Args:
            operation: Stage being validated (ADD, UPDATE or DELETE)
            data_access: Data access to use for cross-entity lookups

        Raises:
            ValidationFailure: If the operation must not be applied
        """

    def to_document(self) -> Dict[str, Any]:
        """Map the entity to a store document keyed by `_id`."""
        document = self.model_dump(mode="json", exclude={"id"})
        document["_id"] = self.id
        return document

    @classmethod
    def from_document(cls: Type[P], document: Mapping[str, Any]) -> P:
        """Build an entity from a store document."""
        data = dict(document)
        data["id"] = data.pop("_id", None)
        return cls.model_validate(data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Persistable):
            return NotImplemented
        if type(self) is not type(other):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return object.__hash__(self)
        return hash((type(self), self.id))

    def __str__(self) -> str:
        return f"{type(self).__name__}(id={self.id})"
