"""
Project Domain - Write Models.

Plain input shapes for creating projects, kept apart from the aggregate.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from .aggregates import Project
from .entities import ProjectStep


@dataclass
class ProjectStepWriteModel:
    description: str
    days_to_deadline: int = 0

    def to_step(self) -> ProjectStep:
        return ProjectStep(description=self.description, days_to_deadline=self.days_to_deadline)


@dataclass
class ProjectWriteModel:
    """Input for ProjectService.save."""

    description: str
    steps: List[ProjectStepWriteModel] = field(default_factory=list)

    def to_project(self) -> Project:
        return Project(
            description=self.description,
            _steps=[step.to_step() for step in self.steps]
        )
