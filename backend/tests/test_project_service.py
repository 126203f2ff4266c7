"""
Tests for ProjectService: group instantiation rules, deadlines and persistence.
"""

from datetime import datetime, timedelta, timezone

import pytest

from application.services import ProjectService, TaskGroupService
from domain.project.projections import ProjectStepWriteModel, ProjectWriteModel
from domain.shared.exceptions import BusinessRuleViolationException, EntityNotFoundException
from domain.task.aggregates import TaskGroup

from conftest import (
    configuration,
    group_repository_returning,
    project_repository_returning,
    project_with,
)


def test_create_group_single_group_config_and_undone_group_exists_raises_policy_violation():
    group_repository = group_repository_returning(True)
    service = ProjectService(None, group_repository, configuration(False), None)

    with pytest.raises(BusinessRuleViolationException) as exc_info:
        service.create_group(0, datetime.now())

    assert "one undone group" in exc_info.value.message
    assert exc_info.value.code == "BUSINESS_RULE_VIOLATION"
    group_repository.save.assert_not_called()


def test_create_group_config_ok_and_no_project_raises_not_found():
    project_repository = project_repository_returning(None)
    service = ProjectService(project_repository, group_repository_returning(False), configuration(True), None)

    with pytest.raises(EntityNotFoundException) as exc_info:
        service.create_group(0, datetime.now())

    assert "not found" in exc_info.value.message
    assert exc_info.value.details == {"entity_type": "Project", "entity_id": "0"}


def test_create_group_single_group_config_no_undone_group_and_no_project_raises_not_found():
    group_repository = group_repository_returning(False)
    service = ProjectService(project_repository_returning(None), group_repository, configuration(False), None)

    with pytest.raises(EntityNotFoundException):
        service.create_group(0, datetime.now())

    group_repository.save.assert_not_called()


def test_create_group_policy_is_checked_before_project_existence():
    project_repository = project_repository_returning(None)
    service = ProjectService(project_repository, group_repository_returning(True), configuration(False), None)

    with pytest.raises(BusinessRuleViolationException):
        service.create_group(404, datetime.now())

    project_repository.find_by_id.assert_not_called()


@pytest.mark.parametrize("allow_multiple", [True, False])
def test_create_group_unknown_project_raises_not_found_regardless_of_flag(make_project_service, allow_multiple):
    service = make_project_service(allow_multiple)

    with pytest.raises(EntityNotFoundException):
        service.create_group(12345, datetime.now())


def test_create_group_from_project_creates_and_saves_group(
    make_project_service, project_repository, group_repository, reference_date
):
    project = project_repository.save(project_with("lorem", [-1]))
    service = make_project_service(True)
    count_before = group_repository.count()

    result = service.create_group(project.id, reference_date)

    assert group_repository.count() == count_before + 1
    assert result.description == "lorem"
    assert result.deadline == datetime(2024, 1, 9, 0, 0)
    assert len(result.tasks) == 1
    assert result.tasks[0].description == "test"
    assert result.tasks[0].done is False


def test_create_group_with_mocked_project_repository(group_repository, reference_date):
    project = project_with("lorem", [-1, -2])
    project_repository = project_repository_returning(project)
    service = ProjectService(
        project_repository,
        group_repository,
        configuration(True),
        TaskGroupService(group_repository, None),
    )

    result = service.create_group(1, reference_date)

    assert group_repository.count() == 1
    assert result.description == "lorem"
    assert all(task.description == "test" for task in result.tasks)
    project_repository.find_by_id.assert_called_once_with(1)


def test_create_group_one_task_per_step_with_offset_deadlines(
    make_project_service, project_repository, group_repository, reference_date
):
    offsets = [-3, 0, 2, 7]
    project = project_repository.save(ProjectWriteModel(
        description="release",
        steps=[ProjectStepWriteModel(f"step {days}", days) for days in offsets]
    ).to_project())

    result = make_project_service(False).create_group(project.id, reference_date)

    assert len(result.tasks) == len(offsets)
    expected = {(f"step {days}", reference_date + timedelta(days=days)) for days in offsets}
    assert {(task.description, task.deadline) for task in result.tasks} == expected
    assert result.deadline == reference_date - timedelta(days=3)

    stored = group_repository.find_by_id(result.id)
    assert stored.project_id == project.id
    assert stored.done is False
    assert all(task.group_id == stored.id for task in stored.tasks)


def test_create_group_deadline_is_earliest_task_deadline(make_project_service, project_repository, reference_date):
    project = project_repository.save(project_with("lorem", [-1, -2]))

    result = make_project_service(True).create_group(project.id, reference_date)

    assert result.deadline == datetime(2024, 1, 8, 0, 0)
    assert min(task.deadline for task in result.tasks) == result.deadline


def test_create_group_keeps_reference_timezone(make_project_service, project_repository):
    project = project_repository.save(project_with("lorem", [1]))
    now = datetime(2024, 3, 30, 12, 0, tzinfo=timezone(timedelta(hours=2)))

    result = make_project_service(True).create_group(project.id, now)

    assert result.deadline == datetime(2024, 3, 31, 12, 0, tzinfo=timezone(timedelta(hours=2)))
    assert result.deadline.utcoffset() == timedelta(hours=2)


def test_create_group_project_without_steps_creates_empty_group(make_project_service, project_repository, reference_date):
    project = project_repository.save(project_with("empty", []))

    result = make_project_service(True).create_group(project.id, reference_date)

    assert result.tasks == ()
    assert result.deadline is None


def test_create_group_twice_with_multiple_groups_allowed_creates_two_groups(
    make_project_service, project_repository, group_repository, reference_date
):
    project = project_repository.save(project_with("lorem", [-1]))
    service = make_project_service(True)

    first = service.create_group(project.id, reference_date)
    second = service.create_group(project.id, reference_date)

    assert group_repository.count() == 2
    assert first.id != second.id


def test_create_group_twice_with_single_group_config_rejects_second_call(
    make_project_service, project_repository, group_repository, reference_date
):
    project = project_repository.save(project_with("lorem", [-1]))
    service = make_project_service(False)
    service.create_group(project.id, reference_date)

    with pytest.raises(BusinessRuleViolationException):
        service.create_group(project.id, reference_date)

    assert group_repository.count() == 1


def test_create_group_allowed_again_once_previous_group_is_done(
    make_project_service, project_repository, group_repository, reference_date
):
    project = project_repository.save(project_with("lorem", [-1]))
    service = make_project_service(False)
    first = service.create_group(project.id, reference_date)

    group = group_repository.find_by_id(first.id)
    group.toggle()
    group_repository.save(group)

    service.create_group(project.id, reference_date)
    assert group_repository.count() == 2


def test_create_group_undone_group_of_other_project_does_not_block(
    make_project_service, project_repository, group_repository, reference_date
):
    first = project_repository.save(project_with("first", [1]))
    second = project_repository.save(project_with("second", [2]))
    service = make_project_service(False)

    service.create_group(first.id, reference_date)
    service.create_group(second.id, reference_date)

    assert group_repository.count() == 2


def test_create_group_policy_is_re_evaluated_on_every_call(project_repository, group_repository, group_service, reference_date):
    class SwitchableConfiguration:
        def __init__(self):
            self.template = configuration(True).template

    config = SwitchableConfiguration()
    service = ProjectService(project_repository, group_repository, config, group_service)
    project = project_repository.save(project_with("lorem", [0]))

    service.create_group(project.id, reference_date)
    config.template = configuration(False).template

    with pytest.raises(BusinessRuleViolationException):
        service.create_group(project.id, reference_date)


def test_create_group_result_is_read_only(make_project_service, project_repository, group_repository, reference_date):
    project = project_repository.save(project_with("lorem", [-1]))

    result = make_project_service(True).create_group(project.id, reference_date)

    with pytest.raises(AttributeError):
        result.description = "changed"
    assert isinstance(result.tasks, tuple)
    assert group_repository.find_by_id(result.id).description == "lorem"
    assert not isinstance(result, TaskGroup)


def test_save_project_and_read_all(make_project_service):
    service = make_project_service()

    project = service.save(ProjectWriteModel(
        description="onboarding",
        steps=[ProjectStepWriteModel("accounts", 0), ProjectStepWriteModel("mentor", 1)]
    ))

    assert project.id is not None
    assert all(step.id is not None and step.project_id == project.id for step in project.steps)
    assert [p.description for p in service.read_all()] == ["onboarding"]


def test_create_group_logs_created_group(make_project_service, project_repository, reference_date, caplog):
    project = project_repository.save(project_with("lorem", [-1]))

    with caplog.at_level("INFO"):
        make_project_service(True).create_group(project.id, reference_date)

    assert any("Created task group" in record.getMessage() for record in caplog.records)
