"""
Service wiring.

Builds application services on top of the Django ORM repositories.
Everything is passed through constructors; there is no container.
"""

from application.configuration import SettingsTaskConfiguration
from application.services import ProjectService, TaskGroupService, TaskService
from infrastructure.persistence.repositories import (
    DjangoProjectRepository,
    DjangoTaskGroupRepository,
    DjangoTaskRepository,
)


def build_task_group_service() -> TaskGroupService:
    return TaskGroupService(DjangoTaskGroupRepository(), DjangoTaskRepository())


def build_task_service() -> TaskService:
    return TaskService(DjangoTaskRepository())


def build_project_service() -> ProjectService:
    group_repository = DjangoTaskGroupRepository()
    return ProjectService(
        DjangoProjectRepository(),
        group_repository,
        SettingsTaskConfiguration(),
        TaskGroupService(group_repository, DjangoTaskRepository()),
    )
