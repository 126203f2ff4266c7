"""
Task Configuration.

Policy settings consumed by the services. Services only read
`config.template.allow_multiple_tasks`, so any object with that shape works.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TemplateConfiguration:
    """Rules applied when task groups are created from project templates."""

    allow_multiple_tasks: bool = False


@dataclass(frozen=True)
class TaskConfiguration:
    """Fixed configuration, for explicit wiring and tests."""

    template: TemplateConfiguration = field(default_factory=TemplateConfiguration)


class SettingsTaskConfiguration:
    """
    Configuration backed by Django settings.

    Settings are read on every access, so a change of
    TASK_TEMPLATE_ALLOW_MULTIPLE_TASKS is seen by the next call.
    """

    setting_name = 'TASK_TEMPLATE_ALLOW_MULTIPLE_TASKS'

    @property
    def template(self) -> TemplateConfiguration:
        from django.conf import settings

        return TemplateConfiguration(
            allow_multiple_tasks=bool(getattr(settings, self.setting_name, False))
        )
