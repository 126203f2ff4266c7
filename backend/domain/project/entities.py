"""
Project Domain - Entities.

Step templates owned by a project.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from domain.shared.base_entity import AuditableEntity
from domain.shared.exceptions import ValidationException


@dataclass(eq=False)
class ProjectStep(AuditableEntity):
    """
    A step template of a project.

    Used as a blueprint for exactly one task when a task group is created
    from the project. `days_to_deadline` is relative to the reference date
    of the group and may be negative (days before the reference date).
    """

    description: str = ""
    days_to_deadline: int = 0
    project_id: Optional[int] = None

    def __post_init__(self):
        if not self.description or not self.description.strip():
            raise ValidationException("Step description must not be blank", "description")
        if isinstance(self.days_to_deadline, bool) or not isinstance(self.days_to_deadline, int):
            raise ValidationException(
                "Days to deadline must be an integer",
                "days_to_deadline",
                self.days_to_deadline
            )
