"""The ``schema_tool`` extension.

Settings are accumulated with :meth:`SchemaToolExtension.configure` and
distributed by :meth:`SchemaToolExtension.finalize_and_register`, which
creates one task per SchemaTool mode and copies a snapshot of the settings
onto each. Tasks keep their snapshot; later ``configure`` calls don't reach
them.
"""

import logging
from typing import TYPE_CHECKING, Any, Callable

from schematool.core.exceptions import ConfigError
from schematool.core.host import CLASSES_TASK, CompiledOutput
from schematool.models.settings import SchemaToolSettings, TaskSettings
from schematool.tasks.base import SchemaToolTask
from schematool.tasks.schema_tool import SCHEMA_TOOL_TASKS

if TYPE_CHECKING:
    from schematool.extensions.datanucleus import DataNucleusExtension

logger = logging.getLogger(__name__)

SettingsUpdate = Callable[[SchemaToolSettings], Any]


class SchemaToolExtension:
    """Settings for the SchemaTool tasks and their registration."""

    def __init__(self, datanucleus: "DataNucleusExtension"):
        self.datanucleus = datanucleus
        self.settings = SchemaToolSettings()

    @property
    def project(self):
        return self.datanucleus.project

    @property
    def compiled_output(self) -> CompiledOutput:
        return self.project.compiled_output

    def configure(
        self, update: SettingsUpdate | None = None, **overrides: Any
    ) -> "SchemaToolExtension":
        """Apply keyword overrides, then ``update(settings)``.

        Values are not validated. Unknown keyword names raise
        :class:`ConfigError`.
        """
        for key, value in overrides.items():
            if key not in SchemaToolSettings.model_fields:
                raise ConfigError(
                    f"Unknown schema_tool setting: '{key}'",
                    context={
                        "available": ", ".join(SchemaToolSettings.model_fields)
                    },
                )
            setattr(self.settings, key, value)
        if update is not None:
            update(self.settings)
        return self

    def snapshot(self) -> TaskSettings:
        return TaskSettings.capture(self.settings, parent_skip=self.datanucleus.skip)

    def finalize_and_register(self) -> list[SchemaToolTask]:
        """Create the SchemaTool tasks in the project, in fixed order.

        Every task gets the same snapshot and depends on the ``classes``
        task. A second call fails in the host on the first duplicate name.
        """
        snapshot = self.snapshot()

        def configure_task(task: SchemaToolTask) -> None:
            task.apply_settings(snapshot)

        tasks = []
        for name, task_cls in SCHEMA_TOOL_TASKS:
            tasks.append(self.project.tasks.create(name, task_cls, configure_task))

        for task in tasks:
            task.depends_on(CLASSES_TASK)

        logger.info(
            "Registered SchemaTool tasks",
            extra={
                "context": {
                    "count": len(tasks),
                    "dialect": getattr(snapshot.dialect, "value", snapshot.dialect),
                    "skip": snapshot.skip,
                }
            },
        )
        return tasks

    def configure_and_register(
        self, update: SettingsUpdate | None = None, **overrides: Any
    ) -> list[SchemaToolTask]:
        """Configure, then register the tasks."""
        self.configure(update, **overrides)
        return self.finalize_and_register()
