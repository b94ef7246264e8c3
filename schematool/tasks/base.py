"""Base class for tasks that drive the DataNucleus SchemaTool."""

import logging
import os
from pathlib import Path

from schematool.core.exceptions import TaskExecutionError
from schematool.core.host import Task
from schematool.models.settings import Dialect, TaskSettings
from schematool.tasks.runner import SchemaToolInvocation

logger = logging.getLogger(__name__)


class SchemaToolTask(Task):
    """A SchemaTool mode bound to a settings snapshot.

    Subclasses set :attr:`mode` (the SchemaTool flag selecting the
    operation) and :attr:`requires_catalog_and_schema`.
    """

    mode: str = ""
    requires_catalog_and_schema: bool = False

    def __init__(self, name, project):
        super().__init__(name, project)
        self.settings = TaskSettings()

    @property
    def skip(self) -> bool:
        return self.settings.skip

    def apply_settings(self, settings: TaskSettings) -> None:
        self.settings = settings

    def build_invocation(self) -> SchemaToolInvocation:
        """Translate the snapshot into a SchemaTool command line.

        Raises:
            TaskExecutionError: If the snapshot can't be run as-is.
        """
        settings = self.settings
        context = {"task_name": self.name}

        if not settings.persistence_unit_name:
            raise TaskExecutionError(
                "persistence_unit_name is mandatory", context=context
            )
        try:
            dialect = Dialect(settings.dialect)
        except ValueError as e:
            raise TaskExecutionError(
                f"Unsupported dialect: {settings.dialect!r}",
                context={**context, "supported": ", ".join(d.value for d in Dialect)},
            ) from e
        if self.requires_catalog_and_schema and not (
            settings.catalog_name and settings.schema_name
        ):
            raise TaskExecutionError(
                f"{self.name} needs both catalog_name and schema_name",
                context=context,
            )

        arguments = [
            self.mode,
            "-api",
            dialect.value,
            "-pu",
            str(settings.persistence_unit_name),
        ]
        if settings.ignore_missing_classes:
            arguments.append("-ignoreMetaDataForMissingClasses")
        if settings.catalog_name:
            arguments.extend(["-catalog", str(settings.catalog_name)])
        if settings.schema_name:
            arguments.extend(["-schema", str(settings.schema_name)])
        if settings.verbose:
            arguments.append("-v")
        if settings.complete_ddl:
            arguments.append("-completeDdl")
        if settings.ddl_file is not None:
            ddl_file = self._path_setting(settings.ddl_file, "ddl_file")
            arguments.extend(["-ddlFile", str(self._resolve(ddl_file))])

        output = self.project.compiled_output
        if settings.fork:
            arguments.extend(str(p) for p in output.metadata_files())

        jvm_properties = {}
        if settings.log4j_config is not None:
            log4j = self._existing_file(settings.log4j_config, "log4j_config")
            jvm_properties["log4j.configuration"] = log4j.as_uri()
        if settings.jdk_log_config is not None:
            jdk = self._existing_file(settings.jdk_log_config, "jdk_log_config")
            jvm_properties["java.util.logging.config.file"] = str(jdk)

        runner_config = self.project.runner_config
        classpath = [str(p) for p in output.classpath()]
        classpath.extend(runner_config.classpath)

        return SchemaToolInvocation(
            java_executable=runner_config.java_executable,
            main_class=runner_config.main_class,
            jvm_args=list(runner_config.jvm_args),
            jvm_properties=jvm_properties,
            classpath=classpath,
            arguments=arguments,
            working_dir=self.project.project_dir,
        )

    def execute(self) -> None:
        if self.skip:
            logger.info("Skipping SchemaTool task", extra={"task_name": self.name})
            return

        invocation = self.build_invocation()
        if not self.settings.fork:
            logger.debug(
                "Not forking: classes must be listed in the persistence unit",
                extra={"task_name": self.name},
            )
        exit_code = self.project.runner.run(invocation, task_name=self.name)
        if exit_code != 0:
            raise TaskExecutionError(
                f"SchemaTool {self.mode} failed with exit code {exit_code}",
                context={"task_name": self.name},
            )
        logger.info("SchemaTool task finished", extra={"task_name": self.name})

    def _resolve(self, path: Path) -> Path:
        return path if path.is_absolute() else self.project.project_dir / path

    def _path_setting(self, value, field: str) -> Path:
        if not isinstance(value, (str, os.PathLike)):
            raise TaskExecutionError(
                f"{field} must be a path, got {value!r}",
                context={"task_name": self.name},
            )
        return Path(value)

    def _existing_file(self, path, field: str) -> Path:
        resolved = self._resolve(self._path_setting(path, field)).resolve()
        if not resolved.is_file():
            raise TaskExecutionError(
                f"{field} file not found: {path}",
                context={"task_name": self.name},
            )
        return resolved
