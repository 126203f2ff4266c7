"""
Shared fixtures: in-memory repositories and small builders.
"""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from application.configuration import TaskConfiguration, TemplateConfiguration
from application.services import ProjectService, TaskGroupService, TaskService
from domain.project.aggregates import Project
from domain.project.entities import ProjectStep
from domain.project.repositories import ProjectRepository
from domain.task.projections import GroupTaskWriteModel, GroupWriteModel
from domain.task.repositories import TaskGroupRepository
from infrastructure.persistence.memory import (
    InMemoryProjectRepository,
    InMemoryTaskGroupRepository,
    InMemoryTaskRepository,
)


def configuration(allow_multiple_tasks: bool) -> TaskConfiguration:
    return TaskConfiguration(template=TemplateConfiguration(allow_multiple_tasks=allow_multiple_tasks))


def project_with(description: str, offsets, step_description: str = "test") -> Project:
    return Project(
        description=description,
        _steps=[ProjectStep(description=step_description, days_to_deadline=days) for days in offsets]
    )


def project_repository_returning(project=None) -> MagicMock:
    repository = MagicMock(spec=ProjectRepository)
    repository.find_by_id.return_value = project
    return repository


def group_repository_returning(undone_group_exists: bool) -> MagicMock:
    repository = MagicMock(spec=TaskGroupRepository)
    repository.exists_undone_by_project_id.return_value = undone_group_exists
    return repository


@pytest.fixture
def reference_date():
    return datetime(2024, 1, 10, 0, 0)


@pytest.fixture
def project_repository():
    return InMemoryProjectRepository()


@pytest.fixture
def group_repository():
    return InMemoryTaskGroupRepository()


@pytest.fixture
def task_repository(group_repository):
    return InMemoryTaskRepository(group_repository)


@pytest.fixture
def group_service(group_repository, task_repository):
    return TaskGroupService(group_repository, task_repository)


@pytest.fixture
def published_events():
    return []


@pytest.fixture
def task_service(task_repository, published_events):
    return TaskService(task_repository, publish=published_events.append)


@pytest.fixture
def make_project_service(project_repository, group_repository, group_service):
    """Project service over the in-memory stores with the given policy flag."""
    def make(allow_multiple_tasks: bool = False) -> ProjectService:
        return ProjectService(
            project_repository,
            group_repository,
            configuration(allow_multiple_tasks),
            group_service,
        )
    return make


@pytest.fixture
def saved_group(group_service, reference_date):
    """A saved group with two undone tasks."""
    return group_service.create_group(GroupWriteModel(
        description="release",
        tasks=[
            GroupTaskWriteModel("freeze branch", reference_date),
            GroupTaskWriteModel("ship", reference_date),
        ]
    ))
