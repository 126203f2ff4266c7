"""\
Setup Demo Data Command.

Purpose:
- Seed a few projects with step templates for local demo environments.
- Safe to run repeatedly: projects are matched by description and never duplicated.
"""

from __future__ import annotations

from django.core.management.base import BaseCommand
from django.db import transaction

from domain.project.projections import ProjectStepWriteModel, ProjectWriteModel
from infrastructure.persistence.models import Project as ProjectModel, TaskGroup as TaskGroupModel
from infrastructure.services import build_project_service


DEMO_PROJECTS = [
    ProjectWriteModel(
        description='Подготовка к релизу',
        steps=[
            ProjectStepWriteModel('Заморозить ветку', -7),
            ProjectStepWriteModel('Прогнать регрессионные тесты', -3),
            ProjectStepWriteModel('Подготовить release notes', -1),
            ProjectStepWriteModel('Выкатить релиз', 0),
        ],
    ),
    ProjectWriteModel(
        description='Онбординг сотрудника',
        steps=[
            ProjectStepWriteModel('Выдать доступы', 0),
            ProjectStepWriteModel('Назначить наставника', 1),
            ProjectStepWriteModel('Провести ревью первой недели', 7),
        ],
    ),
]


class Command(BaseCommand):
    help = 'Seed demo projects with step templates'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete all projects and task groups before seeding'
        )

    def handle(self, *args, **options):
        service = build_project_service()

        with transaction.atomic():
            if options.get('clear'):
                self.stdout.write('Clearing projects and task groups...')
                TaskGroupModel.objects.all().delete()
                ProjectModel.objects.all().delete()

            created = 0
            for source in DEMO_PROJECTS:
                if ProjectModel.objects.filter(description=source.description).exists():
                    self.stdout.write(f'  = {source.description} (уже существует)')
                    continue
                project = service.save(source)
                created += 1
                self.stdout.write(f'  + [{project.id}] {project.description}: {len(project.steps)} шагов')

        self.stdout.write(self.style.SUCCESS(f'Готово: создано проектов {created}.'))
