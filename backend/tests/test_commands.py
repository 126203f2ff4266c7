"""
Tests for the management commands.
"""

from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from application.configuration import SettingsTaskConfiguration, TaskConfiguration
from infrastructure.persistence import models

pytestmark = pytest.mark.django_db


def run(*args, **options) -> str:
    out = StringIO()
    call_command(*args, stdout=out, **options)
    return out.getvalue()


def test_setup_demo_data_is_idempotent():
    run('setup_demo_data')
    projects = models.Project.objects.count()
    steps = models.ProjectStep.objects.count()

    output = run('setup_demo_data')

    assert projects == 2
    assert steps == 7
    assert models.Project.objects.count() == projects
    assert 'уже существует' in output


def test_setup_demo_data_clear_removes_groups():
    run('setup_demo_data')
    project_id = models.Project.objects.first().pk
    run('create_task_group', str(project_id), date='2024-01-10T00:00:00')

    run('setup_demo_data', clear=True)

    assert models.TaskGroup.objects.count() == 0
    assert models.Project.objects.count() == 2


def test_create_task_group_prints_group_and_tasks():
    run('setup_demo_data')
    project = models.Project.objects.get(description='Онбординг сотрудника')

    output = run('create_task_group', str(project.pk), date='2024-01-10T09:00:00+00:00')

    group = models.TaskGroup.objects.get(project=project)
    assert group.tasks.count() == 3
    assert group.deadline.isoformat() == '2024-01-10T09:00:00+00:00'
    assert 'Выдать доступы' in output


def test_create_task_group_unknown_project():
    with pytest.raises(CommandError, match='ENTITY_NOT_FOUND'):
        run('create_task_group', '404')


def test_create_task_group_second_undone_group_is_rejected(settings):
    settings.TASK_TEMPLATE_ALLOW_MULTIPLE_TASKS = False
    run('setup_demo_data')
    project_id = models.Project.objects.first().pk
    run('create_task_group', str(project_id))

    with pytest.raises(CommandError, match='BUSINESS_RULE_VIOLATION'):
        run('create_task_group', str(project_id))


def test_create_task_group_rejects_bad_date():
    with pytest.raises(CommandError, match='Некорректная дата'):
        run('create_task_group', '1', date='yesterday')


def test_settings_configuration_reads_current_settings(settings):
    configuration = SettingsTaskConfiguration()

    settings.TASK_TEMPLATE_ALLOW_MULTIPLE_TASKS = True
    assert configuration.template.allow_multiple_tasks is True

    settings.TASK_TEMPLATE_ALLOW_MULTIPLE_TASKS = False
    assert configuration.template.allow_multiple_tasks is False


def test_default_configuration_allows_single_group():
    assert TaskConfiguration().template.allow_multiple_tasks is False


def test_only_persistence_apps_are_installed():
    from django.apps import apps

    assert apps.is_installed('infrastructure.persistence')
    assert not apps.is_installed('django.contrib.auth')
