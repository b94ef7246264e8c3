"""Public Python API for the schematool package."""

from pathlib import Path
from typing import Any, Callable

from schematool.core.host import CompiledOutput, Project
from schematool.models.config import BuildConfig
from schematool.models.loader import load_build
from schematool.models.settings import SchemaToolSettings
from schematool.tasks.base import SchemaToolTask


def apply_schema_tool(
    project: Project,
    update: Callable[[SchemaToolSettings], Any] | None = None,
    **overrides: Any,
) -> list[SchemaToolTask]:
    """Configure the project's schema_tool extension and register its tasks.

    Example:
        >>> project = Project("shop")
        >>> tasks = apply_schema_tool(project, persistence_unit_name="shop")
        >>> [t.name for t in tasks][:2]
        ['createDatabase', 'deleteDatabase']
    """
    return project.datanucleus.schema_tool.configure_and_register(update, **overrides)


def build_project(config: BuildConfig) -> Project:
    """Create a project from a build definition and register the tasks."""
    project = Project(
        config.name,
        project_dir=config.project_dir,
        compiled_output=CompiledOutput(
            classes_dirs=config.compiled_output.classes_dirs,
            resources_dir=config.compiled_output.resources_dir,
        ),
        runner_config=config.runner,
    )
    project.datanucleus.configure(skip=config.datanucleus.skip)
    apply_schema_tool(project, **config.datanucleus.schema_tool)
    return project


def from_yaml(path: str | Path, cli_vars: dict[str, str] | None = None) -> Project:
    """Load a build file and return the configured project.

    Raises:
        ConfigError: If the build file can't be loaded or names an unknown
            schema_tool setting.
    """
    return build_project(load_build(path, cli_vars))
