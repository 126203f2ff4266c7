"""
Project Service.

Creating projects and instantiating task groups from their step templates.
"""

import logging
from datetime import datetime
from typing import List

from domain.project.aggregates import Project
from domain.project.projections import ProjectWriteModel
from domain.project.repositories import ProjectRepository
from domain.shared.exceptions import BusinessRuleViolationException, EntityNotFoundException
from domain.task.projections import GroupReadModel, GroupTaskWriteModel, GroupWriteModel
from domain.task.repositories import TaskGroupRepository
from domain.task.rules import SINGLE_UNDONE_GROUP_RULE, compute_deadline, group_creation_allowed

from .task_group_service import TaskGroupService

logger = logging.getLogger(__name__)


class ProjectService:
    """
    Orchestrates projects and task group instantiation.

    Collaborators are passed in explicitly; `config` only needs a
    `template.allow_multiple_tasks` attribute.
    """

    def __init__(
        self,
        repository: ProjectRepository,
        task_group_repository: TaskGroupRepository,
        config,
        task_group_service: TaskGroupService
    ):
        self.repository = repository
        self.task_group_repository = task_group_repository
        self.config = config
        self.task_group_service = task_group_service

    def read_all(self) -> List[Project]:
        return self.repository.find_all()

    def save(self, source: ProjectWriteModel) -> Project:
        project = self.repository.save(source.to_project())
        logger.info(f"Created project {project.id} '{project.description}' with {len(project.steps)} steps")
        return project

    def create_group(self, project_id: int, now: datetime) -> GroupReadModel:
        """
        Create a task group from the steps of a project.

        Every step becomes one task due `now` plus the step's days to deadline.
        The group takes the project description and the earliest task deadline.

        Args:
            project_id: Project to instantiate
            now: Reference date-time for the task deadlines

        Returns:
            GroupReadModel: View of the saved group

        Raises:
            BusinessRuleViolationException: another undone group exists and the
                configuration allows a single one (checked first)
            EntityNotFoundException: no project with this id
        """
        allow_multiple = self.config.template.allow_multiple_tasks
        if not group_creation_allowed(
            allow_multiple,
            self.task_group_repository.exists_undone_by_project_id(project_id)
        ):
            logger.warning(f"Refused to create task group for project {project_id}: undone group exists")
            raise BusinessRuleViolationException(
                SINGLE_UNDONE_GROUP_RULE,
                "Only one undone group from project is allowed"
            )

        project = self.repository.find_by_id(project_id)
        if project is None:
            raise EntityNotFoundException("Project", project_id)

        target = GroupWriteModel(
            description=project.description,
            tasks=[
                GroupTaskWriteModel(
                    description=step.description,
                    deadline=compute_deadline(now, step.days_to_deadline)
                )
                for step in project.steps
            ]
        )
        return self.task_group_service.create_group(target, project)
