"""Core host, logging and exceptions."""

from schematool.core.exceptions import (
    ConfigError,
    SchemaToolPluginError,
    TaskExecutionError,
    TaskRegistrationError,
)
from schematool.core.host import CLASSES_TASK, ClassesTask, CompiledOutput, Project, Task, TaskContainer

__all__ = [
    "SchemaToolPluginError",
    "ConfigError",
    "TaskRegistrationError",
    "TaskExecutionError",
    "CLASSES_TASK",
    "ClassesTask",
    "CompiledOutput",
    "Project",
    "Task",
    "TaskContainer",
]
