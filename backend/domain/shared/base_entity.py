"""
Base Entity class for all domain entities.

Entities have identity and lifecycle.
Identity is assigned by the persistence layer on first save;
two persisted entities are equal if they have the same ID.
"""

from __future__ import annotations
from abc import ABC
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from .exceptions import InvalidOperationException


@dataclass(eq=False)
class Entity(ABC):
    """
    Base class for all domain entities.

    Entities are objects that have a distinct identity that runs through time
    and different representations. They are defined by their identity, not their attributes.
    A transient entity (not saved yet) is only equal to itself.
    """

    id: Optional[int] = None

    def assign_identity(self, entity_id: int) -> None:
        """
        Assign the identity generated by the store.

        Called by repositories on first save. Re-assigning a different
        identity is not allowed.
        """
        if self.id is not None and self.id != entity_id:
            raise InvalidOperationException(
                f"{self.__class__.__name__} already has id '{self.id}'",
                current_state="persisted"
            )
        self.id = entity_id

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Entity) or type(self) is not type(other):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return object.__hash__(self)
        return hash((type(self).__name__, self.id))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} id={self.id}>"


@dataclass(eq=False)
class AuditableEntity(Entity):
    """
    Entity with audit timestamps.
    Timestamps are stamped by the store, never by the domain.
    """

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def stamp(self, created_at: Optional[datetime], updated_at: Optional[datetime]) -> None:
        """Copy store-generated timestamps onto the entity."""
        if self.created_at is None:
            self.created_at = created_at
        self.updated_at = updated_at
