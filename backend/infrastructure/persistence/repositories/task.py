"""
Task Group and Task Repositories - Django ORM implementation.
"""

from typing import List, Optional

from django.db import transaction

from domain.shared.exceptions import EntityNotFoundException, ValidationException
from domain.task.aggregates import TaskGroup
from domain.task.entities import Task
from domain.task.repositories import TaskGroupRepository, TaskRepository
from domain.task.rules import earlier_deadline
from infrastructure.persistence.models import (
    Task as TaskModel,
    TaskGroup as TaskGroupModel,
)


def task_to_domain(model: TaskModel) -> Task:
    return Task(
        id=model.pk,
        created_at=model.created_at,
        updated_at=model.updated_at,
        description=model.description,
        done=model.done,
        deadline=model.deadline,
        group_id=model.group_id,
    )


def group_to_domain(model: TaskGroupModel) -> TaskGroup:
    return TaskGroup(
        id=model.pk,
        created_at=model.created_at,
        updated_at=model.updated_at,
        description=model.description,
        deadline=model.deadline,
        done=model.done,
        project_id=model.project_id,
        _tasks=[task_to_domain(task) for task in model.tasks.all()],
    )


def _write_task(task: Task, model: TaskModel) -> None:
    model.description = task.description
    model.done = task.done
    model.deadline = task.deadline
    model.save()
    task.assign_identity(model.pk)
    task.group_id = model.group_id
    task.stamp(model.created_at, model.updated_at)


class DjangoTaskGroupRepository(TaskGroupRepository):
    """Task groups stored in the `task_groups` table, tasks cascade to `tasks`."""

    def find_all(self) -> List[TaskGroup]:
        queryset = TaskGroupModel.objects.prefetch_related('tasks')
        return [group_to_domain(model) for model in queryset]

    def find_by_id(self, group_id: int) -> Optional[TaskGroup]:
        model = TaskGroupModel.objects.prefetch_related('tasks').filter(pk=group_id).first()
        if model is None:
            return None
        return group_to_domain(model)

    def exists_undone_by_project_id(self, project_id: int) -> bool:
        return TaskGroupModel.objects.filter(done=False, project_id=project_id).exists()

    def exists_by_description(self, description: str) -> bool:
        return TaskGroupModel.objects.filter(description=description).exists()

    @transaction.atomic
    def save(self, group: TaskGroup) -> TaskGroup:
        group.validate()

        if group.id is None:
            model = TaskGroupModel(project_id=group.project_id)
        else:
            model = TaskGroupModel.objects.select_for_update().get(pk=group.id)
            model.project_id = group.project_id
            # Tasks saved since this group was loaded may have pulled the deadline forward
            group.deadline = earlier_deadline(model.deadline, group.deadline)
        model.description = group.description
        model.deadline = group.deadline
        model.done = group.done
        model.save()
        group.assign_identity(model.pk)

        # Rows of tasks missing from the aggregate are left alone: they were
        # added through TaskRepository after this group was loaded.
        for task in group.tasks:
            if task.id is None:
                task_model = TaskModel(group=model)
            else:
                task_model = TaskModel.objects.get(pk=task.id, group=model)
            _write_task(task, task_model)

        group.stamp(model.created_at, model.updated_at)
        return group


class DjangoTaskRepository(TaskRepository):
    """Tasks stored in the `tasks` table."""

    def find_all(self) -> List[Task]:
        return [task_to_domain(model) for model in TaskModel.objects.all()]

    def find_by_id(self, task_id: int) -> Optional[Task]:
        model = TaskModel.objects.filter(pk=task_id).first()
        if model is None:
            return None
        return task_to_domain(model)

    def exists_by_id(self, task_id: int) -> bool:
        return TaskModel.objects.filter(pk=task_id).exists()

    def find_by_done(self, done: bool) -> List[Task]:
        return [task_to_domain(model) for model in TaskModel.objects.filter(done=done)]

    def find_by_group_id(self, group_id: int) -> List[Task]:
        return [task_to_domain(model) for model in TaskModel.objects.filter(group_id=group_id)]

    def exists_undone_by_group_id(self, group_id: int) -> bool:
        return TaskModel.objects.filter(done=False, group_id=group_id).exists()

    @transaction.atomic
    def save(self, task: Task) -> Task:
        task.validate()

        if task.id is not None:
            model = TaskModel.objects.select_for_update().get(pk=task.id)
            _write_task(task, model)
            return task
        if task.group_id is None:
            raise ValidationException("Task must belong to a task group", "group_id")

        group = TaskGroupModel.objects.select_for_update().filter(pk=task.group_id).first()
        if group is None:
            raise EntityNotFoundException("TaskGroup", task.group_id)

        _write_task(task, TaskModel(group=group))

        deadline = earlier_deadline(group.deadline, task.deadline)
        if deadline != group.deadline:
            group.deadline = deadline
            group.save(update_fields=["deadline", "updated_at"])
        return task
