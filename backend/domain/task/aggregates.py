"""
Task Domain - Aggregates.

TaskGroup is the aggregate root owning its tasks.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from domain.shared.base_aggregate import AggregateRoot
from domain.shared.exceptions import ValidationException

from .entities import Task
from .rules import earlier_deadline


@dataclass(eq=False)
class TaskGroup(AggregateRoot):
    """
    TaskGroup - a bundle of tasks sharing a lifecycle and a deadline.

    Usually instantiated from a project's step templates. The group
    deadline follows the earliest task deadline while tasks are added.

    Key responsibilities:
    - Own its tasks (tasks are created and saved with the group)
    - Keep task back-references (group_id) in sync with its identity
    """

    description: str = ""
    deadline: Optional[datetime] = None
    done: bool = False
    project_id: Optional[int] = None

    _tasks: List[Task] = field(default_factory=list, repr=False)

    def __post_init__(self):
        self.validate()
        tasks, self._tasks = self._tasks, []
        for task in tasks:
            self._attach(task)

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def tasks(self) -> List[Task]:
        """Get all tasks of the group."""
        return self._tasks.copy()

    # =========================================================================
    # TASK MANAGEMENT
    # =========================================================================

    def add_task(self, task: Task) -> None:
        """Add a task and move the group deadline to it if it is earlier."""
        self._attach(task)
        self.deadline = earlier_deadline(self.deadline, task.deadline)

    def replace_task(self, task: Task) -> None:
        """Replace a persisted task with a newer version of it."""
        for index, existing in enumerate(self._tasks):
            if existing == task:
                self._tasks[index] = task
                return
        raise ValidationException(f"Task {task.id} does not belong to group {self.id}", "task_id", task.id)

    def _attach(self, task: Task) -> None:
        if task in self._tasks:
            return
        task.group_id = self.id
        self._tasks.append(task)

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def toggle(self) -> None:
        """Flip the done flag of the group."""
        self.done = not self.done

    def assign_identity(self, entity_id: int) -> None:
        super().assign_identity(entity_id)
        for task in self._tasks:
            task.group_id = entity_id

    # =========================================================================
    # VALIDATION
    # =========================================================================

    def validate(self) -> None:
        if not self.description or not self.description.strip():
            raise ValidationException("Task group description must not be blank", "description")
