"""
Django ORM repository implementations.
"""

from .project import DjangoProjectRepository
from .task import DjangoTaskGroupRepository, DjangoTaskRepository

__all__ = [
    'DjangoProjectRepository',
    'DjangoTaskGroupRepository',
    'DjangoTaskRepository',
]
