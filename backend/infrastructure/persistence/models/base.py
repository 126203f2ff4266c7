"""
Base ORM Models and Mixins.

Provides common functionality for all models:
- Integer primary keys (BigAutoField, see DEFAULT_AUTO_FIELD)
- Timestamps (created_at, updated_at)
"""

from django.db import models


class TimeStampedMixin(models.Model):
    """Mixin for created_at and updated_at timestamps."""

    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name="Дата создания"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name="Дата обновления"
    )

    class Meta:
        abstract = True


class BaseModel(TimeStampedMixin):
    """
    Base model with all common functionality.

    Includes:
    - Auto-incremented primary key
    - Timestamps (created_at, updated_at)
    - Non-blank description
    """

    description = models.CharField(
        max_length=255,
        verbose_name="Описание"
    )

    class Meta:
        abstract = True

    def __str__(self):
        return self.description
