"""
Task ORM Models.

Task groups and their tasks.
"""

from django.db import models

from .base import BaseModel
from .project import Project


class TaskGroup(BaseModel):
    """Task group, usually instantiated from a project."""

    project = models.ForeignKey(
        Project,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='task_groups',
        verbose_name="Проект"
    )
    deadline = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name="Срок"
    )
    done = models.BooleanField(
        default=False,
        verbose_name="Выполнено"
    )

    class Meta:
        db_table = 'task_groups'
        verbose_name = 'Группа задач'
        verbose_name_plural = 'Группы задач'
        ordering = ['id']
        indexes = [
            models.Index(fields=['project', 'done'], name='task_groups_project_done_idx'),
        ]


class Task(BaseModel):
    """Task owned by a task group."""

    group = models.ForeignKey(
        TaskGroup,
        on_delete=models.CASCADE,
        related_name='tasks',
        verbose_name="Группа задач"
    )
    deadline = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name="Срок"
    )
    done = models.BooleanField(
        default=False,
        db_index=True,
        verbose_name="Выполнено"
    )

    class Meta:
        db_table = 'tasks'
        verbose_name = 'Задача'
        verbose_name_plural = 'Задачи'
        ordering = ['group', 'id']
