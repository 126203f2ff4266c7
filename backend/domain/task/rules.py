"""
Task Domain - Business rules.

Pure functions, no state: every caller re-evaluates them with fresh input.
"""

from datetime import datetime, timedelta
from typing import Optional


SINGLE_UNDONE_GROUP_RULE = "single_undone_group_per_project"


def compute_deadline(reference: datetime, days_to_deadline: int) -> datetime:
    """
    Absolute deadline of a task created from a step template.

    The result keeps the tzinfo of the reference value; no conversion is done.
    """
    return reference + timedelta(days=days_to_deadline)


def group_creation_allowed(allow_multiple_groups: bool, undone_group_exists: bool) -> bool:
    """Check if another task group may be opened for a project."""
    return allow_multiple_groups or not undone_group_exists


def earlier_deadline(current: Optional[datetime], candidate: Optional[datetime]) -> Optional[datetime]:
    """Group deadline after a task with the candidate deadline joins it. None means no deadline."""
    if candidate is None:
        return current
    if current is None or candidate < current:
        return candidate
    return current
