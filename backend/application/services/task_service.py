"""
Task Service.

Reading, editing and toggling single tasks.
"""

import logging
from typing import Callable, List, Optional

from domain.shared.events import DomainEvent
from domain.shared.exceptions import EntityNotFoundException
from domain.task.entities import Task
from domain.task.repositories import TaskRepository

from application.event_handlers import log_task_event

logger = logging.getLogger(__name__)


class TaskService:

    def __init__(
        self,
        repository: TaskRepository,
        publish: Optional[Callable[[DomainEvent], None]] = None
    ):
        self.repository = repository
        self.publish = publish or log_task_event

    def read_all(self) -> List[Task]:
        return self.repository.find_all()

    def read_done(self, done: bool = True) -> List[Task]:
        return self.repository.find_by_done(done)

    def read_by_group(self, group_id: int) -> List[Task]:
        return self.repository.find_by_group_id(group_id)

    def task_descriptions(self) -> List[str]:
        """Descriptions of all tasks across all groups."""
        return [task.description for task in self.repository.find_all()]

    def update_task(self, task_id: int, source: Task) -> Task:
        task = self._get(task_id)
        task.update_from(source)
        return self.repository.save(task)

    def toggle_task(self, task_id: int) -> Task:
        """Flip the done flag, save, then publish TaskDone / TaskUndone."""
        task = self._get(task_id)
        task.toggle()
        saved = self.repository.save(task)

        for event in task.clear_domain_events():
            self.publish(event)

        logger.info(f"Task {task_id} marked as {'done' if saved.done else 'undone'}")
        return saved

    def _get(self, task_id: int) -> Task:
        task = self.repository.find_by_id(task_id)
        if task is None:
            raise EntityNotFoundException("Task", task_id)
        return task
