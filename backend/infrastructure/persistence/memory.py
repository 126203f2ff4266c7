"""
In-memory repository implementations.

These repositories keep aggregates in dictionaries, primarily for
testing and development purposes. Stored state is copied on the way in
and out, so callers see the same isolation a database gives them.
"""

import copy
import itertools
from datetime import datetime, timezone
from typing import Dict, List, Optional

from domain.project.aggregates import Project
from domain.project.repositories import ProjectRepository
from domain.shared.exceptions import EntityNotFoundException, ValidationException
from domain.task.aggregates import TaskGroup
from domain.task.entities import Task
from domain.task.repositories import TaskGroupRepository, TaskRepository
from domain.task.rules import earlier_deadline


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryProjectRepository(ProjectRepository):
    """In-memory store of projects and their steps."""

    def __init__(self):
        self._store: Dict[int, Project] = {}
        self._project_ids = itertools.count(1)
        self._step_ids = itertools.count(1)

    def count(self) -> int:
        return len(self._store)

    def find_all(self) -> List[Project]:
        return [copy.deepcopy(project) for project in self._store.values()]

    def find_by_id(self, project_id: int) -> Optional[Project]:
        project = self._store.get(project_id)
        return copy.deepcopy(project) if project is not None else None

    def save(self, project: Project) -> Project:
        project.validate()
        now = _now()

        if project.id is None:
            project.assign_identity(next(self._project_ids))
        for step in project.steps:
            if step.id is None:
                step.assign_identity(next(self._step_ids))
            step.stamp(now, now)
        project.stamp(now, now)

        self._store[project.id] = copy.deepcopy(project)
        return project


class InMemoryTaskGroupRepository(TaskGroupRepository):
    """In-memory store of task groups; tasks are stored inside their group."""

    def __init__(self):
        self._store: Dict[int, TaskGroup] = {}
        self._group_ids = itertools.count(1)
        self._task_ids = itertools.count(1)

    def count(self) -> int:
        return len(self._store)

    def find_all(self) -> List[TaskGroup]:
        return [copy.deepcopy(group) for group in self._store.values()]

    def find_by_id(self, group_id: int) -> Optional[TaskGroup]:
        group = self._store.get(group_id)
        return copy.deepcopy(group) if group is not None else None

    def exists_undone_by_project_id(self, project_id: int) -> bool:
        return any(
            not group.done and group.project_id is not None and group.project_id == project_id
            for group in self._store.values()
        )

    def exists_by_description(self, description: str) -> bool:
        return any(group.description == description for group in self._store.values())

    def save(self, group: TaskGroup) -> TaskGroup:
        group.validate()
        now = _now()

        if group.id is None:
            group.assign_identity(next(self._group_ids))
        for task in group.tasks:
            if task.id is None:
                task.assign_identity(next(self._task_ids))
            task.stamp(now, now)
        group.stamp(now, now)

        previous = self._store.get(group.id)
        if previous is not None:
            # Tasks saved since this group was loaded may have pulled the deadline forward
            group.deadline = earlier_deadline(previous.deadline, group.deadline)

        stored = copy.deepcopy(group)
        stored.clear_domain_events()
        for task in stored.tasks:
            task.clear_domain_events()
        if previous is not None:
            # Keep tasks added through InMemoryTaskRepository after this group was loaded
            stored = TaskGroup(
                id=stored.id,
                created_at=stored.created_at,
                updated_at=stored.updated_at,
                description=stored.description,
                deadline=stored.deadline,
                done=stored.done,
                project_id=stored.project_id,
                _tasks=stored.tasks + [task for task in previous.tasks if task not in stored.tasks],
            )
        self._store[group.id] = stored
        return group

    # -------------------------------------------------------------------------
    # Task access, shared with InMemoryTaskRepository
    # -------------------------------------------------------------------------

    def _stored_tasks(self) -> List[Task]:
        return [task for group in self._store.values() for task in group.tasks]

    def _store_task(self, task: Task) -> None:
        group = self._store.get(task.group_id) if task.group_id is not None else None
        if group is None:
            raise EntityNotFoundException("TaskGroup", task.group_id)

        now = _now()
        stored = copy.deepcopy(task)
        stored.clear_domain_events()
        if task.id is None:
            task.assign_identity(next(self._task_ids))
            stored.assign_identity(task.id)
            group.add_task(stored)
        else:
            group.replace_task(stored)
        task.stamp(now, now)
        stored.stamp(now, now)


class InMemoryTaskRepository(TaskRepository):
    """In-memory view of the tasks kept by an InMemoryTaskGroupRepository."""

    def __init__(self, groups: InMemoryTaskGroupRepository):
        self.groups = groups

    def find_all(self) -> List[Task]:
        return [copy.deepcopy(task) for task in self.groups._stored_tasks()]

    def find_by_id(self, task_id: int) -> Optional[Task]:
        for task in self.groups._stored_tasks():
            if task.id == task_id:
                return copy.deepcopy(task)
        return None

    def exists_by_id(self, task_id: int) -> bool:
        return any(task.id == task_id for task in self.groups._stored_tasks())

    def find_by_done(self, done: bool) -> List[Task]:
        return [copy.deepcopy(task) for task in self.groups._stored_tasks() if task.done == done]

    def find_by_group_id(self, group_id: int) -> List[Task]:
        return [copy.deepcopy(task) for task in self.groups._stored_tasks() if task.group_id == group_id]

    def exists_undone_by_group_id(self, group_id: int) -> bool:
        return any(
            not task.done and task.group_id == group_id
            for task in self.groups._stored_tasks()
        )

    def save(self, task: Task) -> Task:
        task.validate()
        if task.group_id is None:
            raise ValidationException("Task must belong to a task group", "group_id")
        self.groups._store_task(task)
        return task
