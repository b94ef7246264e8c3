"""schematool - DataNucleus SchemaTool tasks for a build.

Registers createDatabase, deleteDatabase, createDatabaseTables,
deleteDatabaseTables, deleteThenCreateDatabaseTables, validateDatabaseTables,
dbinfo and schemainfo tasks, each carrying a snapshot of the schema_tool
settings.
"""

__version__ = "0.1.0"

# Public API
from schematool.api import apply_schema_tool, build_project, from_yaml

# Host
from schematool.core.host import CompiledOutput, Project

# Exceptions
from schematool.core.exceptions import (
    ConfigError,
    SchemaToolPluginError,
    TaskExecutionError,
    TaskRegistrationError,
)

# Extensions and settings
from schematool.extensions import DataNucleusExtension, SchemaToolExtension
from schematool.models.settings import Dialect, SchemaToolSettings, TaskSettings

__all__ = [
    # Version
    "__version__",
    # Public API
    "apply_schema_tool",
    "build_project",
    "from_yaml",
    # Host
    "Project",
    "CompiledOutput",
    # Extensions and settings
    "DataNucleusExtension",
    "SchemaToolExtension",
    "Dialect",
    "SchemaToolSettings",
    "TaskSettings",
    # Exceptions
    "SchemaToolPluginError",
    "ConfigError",
    "TaskRegistrationError",
    "TaskExecutionError",
]
