"""
Task Domain - Repository Interfaces.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .aggregates import TaskGroup
from .entities import Task


class TaskGroupRepository(ABC):
    """Repository interface for TaskGroup aggregate."""

    @abstractmethod
    def find_all(self) -> List[TaskGroup]:
        """Get all task groups with their tasks."""
        pass

    @abstractmethod
    def find_by_id(self, group_id: int) -> Optional[TaskGroup]:
        """Get task group by ID, or None if it does not exist."""
        pass

    @abstractmethod
    def exists_undone_by_project_id(self, project_id: int) -> bool:
        """Check if the project has a group that is not done."""
        pass

    @abstractmethod
    def exists_by_description(self, description: str) -> bool:
        """Check if a group with the given description exists."""
        pass

    @abstractmethod
    def save(self, group: TaskGroup) -> TaskGroup:
        """Save group with its tasks. Assigns identity on first save."""
        pass


class TaskRepository(ABC):
    """Repository interface for Task."""

    @abstractmethod
    def find_all(self) -> List[Task]:
        """Get all tasks."""
        pass

    @abstractmethod
    def find_by_id(self, task_id: int) -> Optional[Task]:
        """Get task by ID."""
        pass

    @abstractmethod
    def exists_by_id(self, task_id: int) -> bool:
        """Check if task exists."""
        pass

    @abstractmethod
    def find_by_done(self, done: bool) -> List[Task]:
        """Get tasks by done flag."""
        pass

    @abstractmethod
    def find_by_group_id(self, group_id: int) -> List[Task]:
        """Get all tasks of a group."""
        pass

    @abstractmethod
    def exists_undone_by_group_id(self, group_id: int) -> bool:
        """Check if the group has a task that is not done."""
        pass

    @abstractmethod
    def save(self, task: Task) -> Task:
        """Save an existing task. Tasks are created through their group."""
        pass
