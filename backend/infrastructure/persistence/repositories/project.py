"""
Project Repository - Django ORM implementation.
"""

import logging
from typing import List, Optional

from django.db import transaction

from domain.project.aggregates import Project
from domain.project.entities import ProjectStep
from domain.project.repositories import ProjectRepository
from infrastructure.persistence.models import (
    Project as ProjectModel,
    ProjectStep as ProjectStepModel,
)

logger = logging.getLogger(__name__)


def step_to_domain(model: ProjectStepModel) -> ProjectStep:
    return ProjectStep(
        id=model.pk,
        created_at=model.created_at,
        updated_at=model.updated_at,
        description=model.description,
        days_to_deadline=model.days_to_deadline,
        project_id=model.project_id,
    )


def project_to_domain(model: ProjectModel) -> Project:
    return Project(
        id=model.pk,
        created_at=model.created_at,
        updated_at=model.updated_at,
        description=model.description,
        _steps=[step_to_domain(step) for step in model.steps.all()],
    )


class DjangoProjectRepository(ProjectRepository):
    """Projects stored in the `projects` / `project_steps` tables."""

    def find_all(self) -> List[Project]:
        queryset = ProjectModel.objects.prefetch_related('steps')
        return [project_to_domain(model) for model in queryset]

    def find_by_id(self, project_id: int) -> Optional[Project]:
        model = ProjectModel.objects.prefetch_related('steps').filter(pk=project_id).first()
        if model is None:
            return None
        return project_to_domain(model)

    @transaction.atomic
    def save(self, project: Project) -> Project:
        project.validate()

        if project.id is None:
            model = ProjectModel.objects.create(description=project.description)
            project.assign_identity(model.pk)
        else:
            model = ProjectModel.objects.select_for_update().get(pk=project.id)
            model.description = project.description
            model.save(update_fields=['description', 'updated_at'])

        kept_ids = []
        for step in project.steps:
            if step.id is None:
                step_model = ProjectStepModel(project=model)
            else:
                step_model = ProjectStepModel.objects.get(pk=step.id, project=model)
            step_model.description = step.description
            step_model.days_to_deadline = step.days_to_deadline
            step_model.save()

            step.assign_identity(step_model.pk)
            step.stamp(step_model.created_at, step_model.updated_at)
            kept_ids.append(step_model.pk)

        removed, _ = model.steps.exclude(pk__in=kept_ids).delete()
        if removed:
            logger.debug(f"Removed {removed} steps from project {model.pk}")

        project.stamp(model.created_at, model.updated_at)
        return project
