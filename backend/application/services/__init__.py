"""
Application services.

Each service receives its repositories through the constructor.
"""

from .project_service import ProjectService
from .task_group_service import TaskGroupService
from .task_service import TaskService

__all__ = ['ProjectService', 'TaskGroupService', 'TaskService']
