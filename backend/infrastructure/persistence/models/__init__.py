"""
Persistence Models Package.

All Django ORM models of the task planner.
"""

# Base mixins
from .base import (
    TimeStampedMixin,
    BaseModel,
)

# Project models
from .project import (
    Project,
    ProjectStep,
)

# Task models
from .task import (
    TaskGroup,
    Task,
)

__all__ = [
    # Base
    'TimeStampedMixin',
    'BaseModel',
    # Project
    'Project',
    'ProjectStep',
    # Task
    'TaskGroup',
    'Task',
]
