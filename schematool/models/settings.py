"""SchemaTool settings and the per-task snapshot."""

from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Dialect(str, Enum):
    """Metadata API the persistence classes are written against."""

    JDO = "JDO"
    JPA = "JPA"


PATH_FIELDS = ("log4j_config", "jdk_log_config", "ddl_file")


def resolve_skip(
    parent_skip: Optional[bool],
    own_skip: Optional[bool],
    default: bool = False,
) -> bool:
    """Resolve the effective skip flag.

    Precedence, least to most specific: ``default``, the parent extension's
    explicit value, this extension's explicit value. ``None`` means unset.
    """
    skip = default
    if parent_skip is not None:
        skip = parent_skip
    if own_skip is not None:
        skip = own_skip
    return skip


def _as_path(value: Any) -> Any:
    if isinstance(value, str):
        return Path(value)
    return value


class SchemaToolSettings(BaseModel):
    """User-facing SchemaTool settings.

    Assignment is not validated; bad values are reported when a task runs.
    """

    dialect: Dialect = Field(
        default=Dialect.JDO, description="Metadata API (JDO or JPA)"
    )
    ignore_missing_classes: bool = Field(
        default=False,
        description="Ignore metadata specified for classes that aren't found",
    )
    catalog_name: Optional[str] = Field(
        default=None,
        description="Catalog name (needed by createDatabase/deleteDatabase)",
    )
    schema_name: Optional[str] = Field(
        default=None,
        description="Schema name (needed by createDatabase/deleteDatabase)",
    )
    persistence_unit_name: Optional[str] = Field(
        default=None,
        description="Persistence unit defining the classes and datastore",
    )
    log4j_config: Optional[Path] = Field(
        default=None, description="Log4J configuration file"
    )
    jdk_log_config: Optional[Path] = Field(
        default=None, description="java.util.logging configuration file"
    )
    verbose: bool = Field(default=False, description="Verbose SchemaTool output")
    fork: bool = Field(
        default=True,
        description="Fork the SchemaTool process. Without forking, class names "
        "can't be derived from input files and the persistence unit must "
        "list them.",
    )
    complete_ddl: bool = Field(
        default=False,
        description="Generate DDL including objects that already exist",
    )
    ddl_file: Optional[Path] = Field(
        default=None, description="File to dump generated DDL to"
    )
    skip: Optional[bool] = Field(
        default=None,
        description="Skip the tasks; unset inherits from the datanucleus extension",
    )


class TaskSettings(BaseModel):
    """Frozen copy of the settings captured by a task at registration."""

    model_config = ConfigDict(frozen=True)

    dialect: Dialect = Dialect.JDO
    ignore_missing_classes: bool = False
    catalog_name: Optional[str] = None
    schema_name: Optional[str] = None
    persistence_unit_name: Optional[str] = None
    log4j_config: Optional[Path] = None
    jdk_log_config: Optional[Path] = None
    verbose: bool = False
    fork: bool = True
    complete_ddl: bool = False
    ddl_file: Optional[Path] = None
    skip: bool = False

    @classmethod
    def capture(
        cls, settings: SchemaToolSettings, parent_skip: Optional[bool] = None
    ) -> "TaskSettings":
        """Copy ``settings`` field by field, resolving ``skip``.

        Values are copied as-is (only path strings become ``Path``); nothing
        is validated here.
        """
        values = {
            name: getattr(settings, name)
            for name in SchemaToolSettings.model_fields
            if name != "skip"
        }
        for name in PATH_FIELDS:
            values[name] = _as_path(values[name])
        values["skip"] = resolve_skip(parent_skip, settings.skip)
        return cls.model_construct(**values)
