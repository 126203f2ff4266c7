"""
Domain Events.

Domain events are records of significant business occurrences.
They are used for decoupling and eventual consistency.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DomainEvent:
    """
    Base class for all domain events.

    Domain events are immutable records of something that happened in the domain.
    They are used for:
    - Decoupling the services from side effects (logging, notifications)
    - Audit trail
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=_utcnow)

    @property
    def event_type(self) -> str:
        """Get the event type name."""
        return self.__class__.__name__


# =============================================================================
# TASK EVENTS
# =============================================================================

@dataclass(frozen=True)
class TaskEvent(DomainEvent):
    """Base class for events raised by a task changing its state."""

    task_id: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.event_type}(task_id={self.task_id}, occurred_at={self.occurred_at.isoformat()})"


@dataclass(frozen=True)
class TaskDone(TaskEvent):
    """Event raised when a task is marked as done."""


@dataclass(frozen=True)
class TaskUndone(TaskEvent):
    """Event raised when a done task is reopened."""
