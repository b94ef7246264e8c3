"""Launching the DataNucleus SchemaTool as an external process."""

import logging
import os
import subprocess
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from schematool.core.exceptions import TaskExecutionError

logger = logging.getLogger(__name__)

SCHEMA_TOOL_MAIN_CLASS = "org.datanucleus.store.schema.SchemaTool"


class RunnerConfig(BaseModel):
    """How the SchemaTool JVM is launched."""

    java_executable: str = Field(default="java", description="Java launcher")
    main_class: str = Field(
        default=SCHEMA_TOOL_MAIN_CLASS, description="SchemaTool entry point"
    )
    jvm_args: list[str] = Field(
        default_factory=list, description="Extra JVM arguments (e.g. -Xmx512m)"
    )
    classpath: list[str] = Field(
        default_factory=list,
        description="Extra classpath entries: DataNucleus jars, JDBC driver",
    )
    timeout: Optional[float] = Field(
        default=None, description="Seconds before the process is killed", gt=0
    )


class SchemaToolInvocation(BaseModel):
    """Everything needed to run SchemaTool once."""

    java_executable: str = "java"
    main_class: str = SCHEMA_TOOL_MAIN_CLASS
    jvm_args: list[str] = Field(default_factory=list)
    jvm_properties: dict[str, str] = Field(default_factory=dict)
    classpath: list[str] = Field(default_factory=list)
    arguments: list[str] = Field(default_factory=list)
    working_dir: Optional[Path] = None

    def command(self) -> list[str]:
        """Full argv for the JVM."""
        argv = [self.java_executable, *self.jvm_args]
        argv.extend(f"-D{key}={value}" for key, value in self.jvm_properties.items())
        if self.classpath:
            argv.extend(["-cp", os.pathsep.join(self.classpath)])
        argv.append(self.main_class)
        argv.extend(self.arguments)
        return argv


class ProcessRunner:
    """Runs invocations with :mod:`subprocess` and waits for them."""

    def __init__(self, config: RunnerConfig | None = None):
        self.config = config or RunnerConfig()

    def run(self, invocation: SchemaToolInvocation, task_name: str = "") -> int:
        """Run SchemaTool and return its exit code.

        Raises:
            TaskExecutionError: If the JVM can't be started or times out.
        """
        command = invocation.command()
        logger.debug(
            "Launching SchemaTool",
            extra={"task_name": task_name, "context": {"argv": " ".join(command)}},
        )
        try:
            completed = subprocess.run(
                command,
                cwd=invocation.working_dir,
                capture_output=True,
                text=True,
                timeout=self.config.timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise TaskExecutionError(
                f"Cannot start SchemaTool: {invocation.java_executable} not found",
                context={"task_name": task_name},
            ) from e
        except subprocess.TimeoutExpired as e:
            raise TaskExecutionError(
                f"SchemaTool timed out after {self.config.timeout}s",
                context={"task_name": task_name},
            ) from e

        for line in (completed.stdout or "").splitlines():
            logger.info(line, extra={"task_name": task_name})
        for line in (completed.stderr or "").splitlines():
            logger.warning(line, extra={"task_name": task_name})

        return completed.returncode
