"""
Task Group Service.

Creating, listing and closing task groups.
"""

import logging
from typing import List, Optional

from domain.project.aggregates import Project
from domain.shared.exceptions import EntityNotFoundException, InvalidOperationException
from domain.task.projections import GroupReadModel, GroupWriteModel
from domain.task.repositories import TaskGroupRepository, TaskRepository

logger = logging.getLogger(__name__)


class TaskGroupService:

    def __init__(
        self,
        repository: TaskGroupRepository,
        task_repository: Optional[TaskRepository] = None
    ):
        self.repository = repository
        self.task_repository = task_repository

    def read_all(self) -> List[GroupReadModel]:
        return [GroupReadModel.from_group(group) for group in self.repository.find_all()]

    def create_group(self, source: GroupWriteModel, project: Optional[Project] = None) -> GroupReadModel:
        """Build a group from the write model and save it together with its tasks."""
        group = source.to_group(project_id=project.id if project is not None else None)
        saved = self.repository.save(group)
        logger.info(
            f"Created task group {saved.id} '{saved.description}' "
            f"with {len(saved.tasks)} tasks"
        )
        return GroupReadModel.from_group(saved)

    def toggle_group(self, group_id: int) -> GroupReadModel:
        """
        Flip the done flag of a group.

        A group can only be toggled once all of its tasks are done.

        Raises:
            InvalidOperationException: the group still has undone tasks
            EntityNotFoundException: no group with this id
        """
        if self.task_repository is None:
            raise InvalidOperationException("Task repository is required to toggle groups")

        if self.task_repository.exists_undone_by_group_id(group_id):
            logger.warning(f"Refused to toggle task group {group_id}: undone tasks left")
            raise InvalidOperationException(
                "Group has undone tasks. Done all the tasks first",
                current_state="undone_tasks"
            )

        group = self.repository.find_by_id(group_id)
        if group is None:
            raise EntityNotFoundException("TaskGroup", group_id)

        group.toggle()
        saved = self.repository.save(group)
        logger.info(f"Task group {group_id} marked as {'done' if saved.done else 'undone'}")
        return GroupReadModel.from_group(saved)
