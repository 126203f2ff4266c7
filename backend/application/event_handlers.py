"""
Domain Event Handlers.

Handlers receive events after the changed aggregate has been saved.
"""

import logging

from domain.shared.events import DomainEvent

logger = logging.getLogger(__name__)


def log_task_event(event: DomainEvent) -> None:
    """Default handler: write the event to the application log."""
    logger.info(f"Got {event}")
