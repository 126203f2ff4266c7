"""
Base Aggregate Root class.

Projects, task groups and tasks are saved as whole units through their
own repositories; the aggregate root is what a repository loads and saves.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from .base_entity import AuditableEntity
from .events import DomainEvent


@dataclass(eq=False)
class AggregateRoot(AuditableEntity):
    """
    Base class for Project, TaskGroup and Task.

    Children (steps of a project, tasks of a group) are only reached
    through their root and refer back to it by id.
    Events such as TaskDone are kept here until the root has been saved;
    the application service then takes them with clear_domain_events().
    """

    _domain_events: List[DomainEvent] = field(default_factory=list, init=False, repr=False)

    def add_domain_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def clear_domain_events(self) -> List[DomainEvent]:
        """Take the pending events, leaving none behind."""
        events = self._domain_events.copy()
        self._domain_events.clear()
        return events

    @property
    def domain_events(self) -> List[DomainEvent]:
        return self._domain_events.copy()

    def validate(self) -> None:
        """
        Check the root's own invariants, e.g. a non-blank description.
        Called on construction and again by repositories before saving.

        Raises:
            ValidationException: an invariant does not hold
        """
