"""
Task Domain - Entities.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from domain.shared.base_aggregate import AggregateRoot
from domain.shared.events import TaskDone, TaskUndone
from domain.shared.exceptions import ValidationException


@dataclass(eq=False)
class Task(AggregateRoot):
    """
    A single task with an absolute deadline.

    Tasks are created inside a task group and reference it by id only;
    the group owns the task, the task never owns the group.
    Toggling a task is done through its own repository, which is why it
    carries its own domain events.
    """

    description: str = ""
    done: bool = False
    deadline: Optional[datetime] = None
    group_id: Optional[int] = None

    def __post_init__(self):
        self.validate()

    def toggle(self) -> None:
        """Flip the done flag and record TaskDone / TaskUndone."""
        self.done = not self.done
        event = TaskDone(task_id=self.id) if self.done else TaskUndone(task_id=self.id)
        self.add_domain_event(event)

    def update_from(self, source: Task) -> None:
        """Copy editable state from another task. Identity and group stay unchanged."""
        source.validate()
        self.description = source.description
        self.done = source.done
        self.deadline = source.deadline

    def validate(self) -> None:
        if not self.description or not self.description.strip():
            raise ValidationException("Task description must not be blank", "description")
