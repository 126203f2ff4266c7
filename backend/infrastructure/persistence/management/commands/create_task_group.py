from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from domain.shared.exceptions import DomainException
from infrastructure.services import build_project_service


class Command(BaseCommand):
    help = (
        "Создаёт группу задач из шагов проекта. "
        "Срок каждой задачи = опорная дата + дней до срока шага."
    )

    def add_arguments(self, parser):
        parser.add_argument('project_id', type=int, help='ID проекта')
        parser.add_argument(
            '--date',
            type=str,
            default=None,
            help='Опорная дата в ISO-формате (по умолчанию: сейчас)'
        )

    def handle(self, *args, **options):
        now = self._parse_date(options.get('date'))

        try:
            group = build_project_service().create_group(options['project_id'], now)
        except DomainException as exc:
            raise CommandError(f'{exc.code}: {exc.message}') from exc

        self.stdout.write(self.style.SUCCESS(
            f'Создана группа [{group.id}] {group.description}, срок: {self._format(group.deadline)}'
        ))
        for task in group.tasks:
            self.stdout.write(f'  - {task.description} (срок: {self._format(task.deadline)})')

    def _parse_date(self, value):
        if not value:
            return timezone.now()
        parsed = parse_datetime(value)
        if parsed is None:
            raise CommandError(f'Некорректная дата: {value}')
        if timezone.is_naive(parsed):
            parsed = timezone.make_aware(parsed)
        return parsed

    @staticmethod
    def _format(value):
        return value.isoformat() if value is not None else '—'
