"""
Project ORM Models.

Projects and their step templates.
"""

from django.db import models

from .base import BaseModel


class Project(BaseModel):
    """Project - a plan made of step templates."""

    class Meta:
        db_table = 'projects'
        verbose_name = 'Проект'
        verbose_name_plural = 'Проекты'
        ordering = ['id']


class ProjectStep(BaseModel):
    """Step template of a project, offset in days from the group's reference date."""

    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name='steps',
        verbose_name="Проект"
    )
    days_to_deadline = models.IntegerField(
        default=0,
        verbose_name="Дней до срока"
    )

    class Meta:
        db_table = 'project_steps'
        verbose_name = 'Шаг проекта'
        verbose_name_plural = 'Шаги проекта'
        ordering = ['project', 'id']
