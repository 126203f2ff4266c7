"""
Task Domain - Read and Write Models.

Read models are immutable views returned to callers, so persisted state
cannot be changed through them. Write models are plain input shapes.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple

from .aggregates import TaskGroup
from .entities import Task


# =============================================================================
# READ MODELS
# =============================================================================

@dataclass(frozen=True)
class GroupTaskReadModel:
    """Read-only view of a task inside a group."""

    description: str
    deadline: Optional[datetime]
    done: bool

    @classmethod
    def from_task(cls, task: Task) -> GroupTaskReadModel:
        return cls(description=task.description, deadline=task.deadline, done=task.done)


@dataclass(frozen=True)
class GroupReadModel:
    """Read-only view of a task group with its tasks."""

    id: Optional[int]
    description: str
    deadline: Optional[datetime]
    done: bool
    tasks: Tuple[GroupTaskReadModel, ...] = ()

    @classmethod
    def from_group(cls, group: TaskGroup) -> GroupReadModel:
        return cls(
            id=group.id,
            description=group.description,
            deadline=group.deadline,
            done=group.done,
            tasks=tuple(GroupTaskReadModel.from_task(task) for task in group.tasks)
        )


# =============================================================================
# WRITE MODELS
# =============================================================================

@dataclass
class GroupTaskWriteModel:
    description: str
    deadline: Optional[datetime] = None

    def to_task(self) -> Task:
        return Task(description=self.description, deadline=self.deadline)


@dataclass
class GroupWriteModel:
    """Input for TaskGroupService.create_group."""

    description: str
    tasks: List[GroupTaskWriteModel] = field(default_factory=list)

    def to_group(self, project_id: Optional[int] = None) -> TaskGroup:
        """
        Build a new, transient task group.

        The group deadline is the earliest of the task deadlines,
        None when there are no tasks with a deadline.
        """
        group = TaskGroup(description=self.description, project_id=project_id)
        for source in self.tasks:
            group.add_task(source.to_task())
        return group
