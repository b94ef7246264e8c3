"""The SchemaTool tasks registered by the schema_tool extension."""

from schematool.tasks.base import SchemaToolTask

CREATE_DATABASE = "createDatabase"
DELETE_DATABASE = "deleteDatabase"
CREATE_DATABASE_TABLES = "createDatabaseTables"
DELETE_DATABASE_TABLES = "deleteDatabaseTables"
DELETE_THEN_CREATE_DATABASE_TABLES = "deleteThenCreateDatabaseTables"
VALIDATE_DATABASE_TABLES = "validateDatabaseTables"
DBINFO = "dbinfo"
SCHEMAINFO = "schemainfo"


class CreateDatabaseTask(SchemaToolTask):
    description = "Create the database catalog/schema"
    mode = "-createDatabase"
    requires_catalog_and_schema = True


class DeleteDatabaseTask(SchemaToolTask):
    description = "Delete the database catalog/schema"
    mode = "-deleteDatabase"
    requires_catalog_and_schema = True


class CreateDatabaseTablesTask(SchemaToolTask):
    description = "Create tables for the persistent classes"
    mode = "-create"


class DeleteDatabaseTablesTask(SchemaToolTask):
    description = "Delete tables of the persistent classes"
    mode = "-delete"


class DeleteThenCreateDatabaseTablesTask(SchemaToolTask):
    description = "Delete, then recreate, tables of the persistent classes"
    mode = "-deletecreate"


class ValidateDatabaseTablesTask(SchemaToolTask):
    description = "Validate tables against the persistent classes"
    mode = "-validate"


class DBInfoTask(SchemaToolTask):
    description = "Print information about the datastore"
    mode = "-dbinfo"


class SchemaInfoTask(SchemaToolTask):
    description = "Print information about the datastore schema"
    mode = "-schemainfo"


# Registration order matters: tasks are created in this order.
SCHEMA_TOOL_TASKS: tuple[tuple[str, type[SchemaToolTask]], ...] = (
    (CREATE_DATABASE, CreateDatabaseTask),
    (DELETE_DATABASE, DeleteDatabaseTask),
    (CREATE_DATABASE_TABLES, CreateDatabaseTablesTask),
    (DELETE_DATABASE_TABLES, DeleteDatabaseTablesTask),
    (DELETE_THEN_CREATE_DATABASE_TABLES, DeleteThenCreateDatabaseTablesTask),
    (VALIDATE_DATABASE_TABLES, ValidateDatabaseTablesTask),
    (DBINFO, DBInfoTask),
    (SCHEMAINFO, SchemaInfoTask),
)


def list_task_names() -> list[str]:
    """Names of the SchemaTool tasks, in registration order."""
    return [name for name, _ in SCHEMA_TOOL_TASKS]
