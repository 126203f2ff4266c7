"""
Project Domain - Aggregates.

Project is the aggregate root owning its step templates.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from domain.shared.base_aggregate import AggregateRoot
from domain.shared.exceptions import ValidationException

from .entities import ProjectStep


@dataclass(eq=False)
class Project(AggregateRoot):
    """
    Project - a reusable plan made of step templates.

    A Project is never executed directly: its steps are copied into a
    task group (see ProjectService.create_group), one task per step.

    Key responsibilities:
    - Own its steps (steps do not outlive the project)
    - Keep every step unique within the project
    """

    description: str = ""

    _steps: List[ProjectStep] = field(default_factory=list, repr=False)

    def __post_init__(self):
        self.validate()
        steps, self._steps = self._steps, []
        for step in steps:
            self.add_step(step)

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def steps(self) -> List[ProjectStep]:
        """Get all step templates."""
        return self._steps.copy()

    # =========================================================================
    # STEP MANAGEMENT
    # =========================================================================

    def add_step(self, step: ProjectStep) -> None:
        """Add a step template. Adding the same step twice has no effect."""
        if step in self._steps:
            return
        if step.project_id is not None and self.id is not None and step.project_id != self.id:
            raise ValidationException(
                f"Step belongs to another project ({step.project_id})",
                "project_id",
                step.project_id
            )
        step.project_id = self.id
        self._steps.append(step)

    def remove_step(self, step: ProjectStep) -> None:
        """Remove a step template."""
        if step in self._steps:
            self._steps.remove(step)

    def assign_identity(self, entity_id: int) -> None:
        super().assign_identity(entity_id)
        for step in self._steps:
            step.project_id = entity_id

    # =========================================================================
    # VALIDATION
    # =========================================================================

    def validate(self) -> None:
        if not self.description or not self.description.strip():
            raise ValidationException("Project description must not be blank", "description")
