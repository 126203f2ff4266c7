"""
Project Domain - Repository Interfaces.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .aggregates import Project


class ProjectRepository(ABC):
    """Repository interface for Project aggregate."""

    @abstractmethod
    def find_all(self) -> List[Project]:
        """Get all projects with their steps."""
        pass

    @abstractmethod
    def find_by_id(self, project_id: int) -> Optional[Project]:
        """Get project by ID, or None if it does not exist."""
        pass

    @abstractmethod
    def save(self, project: Project) -> Project:
        """Save project with its steps. Assigns identity on first save."""
        pass
