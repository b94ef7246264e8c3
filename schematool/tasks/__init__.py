"""SchemaTool tasks and the process runner."""

from schematool.tasks.base import SchemaToolTask
from schematool.tasks.runner import (
    SCHEMA_TOOL_MAIN_CLASS,
    ProcessRunner,
    RunnerConfig,
    SchemaToolInvocation,
)
from schematool.tasks.schema_tool import (
    SCHEMA_TOOL_TASKS,
    CreateDatabaseTablesTask,
    CreateDatabaseTask,
    DBInfoTask,
    DeleteDatabaseTablesTask,
    DeleteDatabaseTask,
    DeleteThenCreateDatabaseTablesTask,
    SchemaInfoTask,
    ValidateDatabaseTablesTask,
    list_task_names,
)

__all__ = [
    "SchemaToolTask",
    "SCHEMA_TOOL_TASKS",
    "list_task_names",
    "CreateDatabaseTask",
    "DeleteDatabaseTask",
    "CreateDatabaseTablesTask",
    "DeleteDatabaseTablesTask",
    "DeleteThenCreateDatabaseTablesTask",
    "ValidateDatabaseTablesTask",
    "DBInfoTask",
    "SchemaInfoTask",
    "ProcessRunner",
    "RunnerConfig",
    "SchemaToolInvocation",
    "SCHEMA_TOOL_MAIN_CLASS",
]
