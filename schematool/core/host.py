"""Minimal build host: a project, its task container and compiled output.

Tasks are registered by name into a :class:`TaskContainer` owned by a
:class:`Project`. Each task may depend on other tasks by name; running a
task runs its dependencies first, each at most once per run.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Iterator, Optional, Sequence, TypeVar

from schematool.core.exceptions import TaskExecutionError, TaskRegistrationError

if TYPE_CHECKING:
    from schematool.extensions.datanucleus import DataNucleusExtension
    from schematool.tasks.runner import ProcessRunner, RunnerConfig

logger = logging.getLogger(__name__)

CLASSES_TASK = "classes"

METADATA_SUFFIXES = (".class", ".jdo", ".orm")

T = TypeVar("T", bound="Task")


class CompiledOutput:
    """Where compiled classes and resources of the main source set live.

    Used to resolve default locations; never modified by tasks.
    """

    def __init__(
        self,
        classes_dirs: Sequence[Path | str] = ("build/classes",),
        resources_dir: Path | str | None = "build/resources",
    ):
        self.classes_dirs = [Path(p) for p in classes_dirs]
        self.resources_dir = Path(resources_dir) if resources_dir else None

    def relative_to(self, base: Path) -> "CompiledOutput":
        """Return a copy with relative directories anchored at ``base``."""
        resources = self.resources_dir
        return CompiledOutput(
            classes_dirs=[p if p.is_absolute() else base / p for p in self.classes_dirs],
            resources_dir=(
                None
                if resources is None
                else resources if resources.is_absolute() else base / resources
            ),
        )

    def existing_classes_dirs(self) -> list[Path]:
        return [p for p in self.classes_dirs if p.is_dir()]

    def classpath(self) -> list[Path]:
        """Classes directories followed by the resources directory."""
        entries = list(self.classes_dirs)
        if self.resources_dir is not None:
            entries.append(self.resources_dir)
        return entries

    def metadata_files(self) -> list[Path]:
        """Class and mapping files under the output directories, sorted."""
        roots = self.existing_classes_dirs()
        if self.resources_dir is not None and self.resources_dir.is_dir():
            roots.append(self.resources_dir)

        found = []
        for root in roots:
            for path in root.rglob("*"):
                if path.is_file() and path.suffix in METADATA_SUFFIXES:
                    found.append(path)
        return sorted(found)


class Task:
    """A named unit of work in the project's task graph."""

    description: str = ""

    def __init__(self, name: str, project: "Project"):
        self.name = name
        self.project = project
        self._dependencies: list[str] = []

    @property
    def dependencies(self) -> list[str]:
        return list(self._dependencies)

    def depends_on(self, *task_names: str) -> "Task":
        for task_name in task_names:
            if task_name not in self._dependencies:
                self._dependencies.append(task_name)
        return self

    def execute(self) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class ClassesTask(Task):
    """Precondition: compiled classes exist on disk."""

    description = "Check that compiled classes are available"

    def execute(self) -> None:
        output = self.project.compiled_output
        if not output.existing_classes_dirs():
            raise TaskExecutionError(
                "No compiled classes found; compile the project first",
                context={
                    "classes_dirs": ", ".join(str(p) for p in output.classes_dirs)
                },
            )
        logger.debug("Compiled classes available", extra={"task_name": self.name})


class TaskContainer:
    """Registry of the project's tasks, keyed by unique name."""

    def __init__(self, project: "Project"):
        self._project = project
        self._tasks: dict[str, Task] = {}

    def create(
        self,
        name: str,
        task_cls: type[T],
        configure_action: Optional[Callable[[T], Any]] = None,
    ) -> T:
        """Create a task, register it under ``name`` and configure it.

        Raises:
            TaskRegistrationError: If a task with the same name exists.
        """
        if name in self._tasks:
            raise TaskRegistrationError(
                f"Cannot add task '{name}' as a task with that name already exists",
                context={"task_name": name, "project": self._project.name},
            )
        task = task_cls(name, self._project)
        self._tasks[name] = task
        if configure_action is not None:
            configure_action(task)
        logger.debug(
            "Registered task",
            extra={"task_name": name, "context": {"type": task_cls.__name__}},
        )
        return task

    def get(self, name: str) -> Task:
        task = self._tasks.get(name)
        if task is None:
            available = ", ".join(self.names()) or "(none)"
            raise TaskExecutionError(
                f"Task '{name}' not found",
                context={"task_name": name, "available_tasks": available},
            )
        return task

    def names(self) -> list[str]:
        """Task names in registration order."""
        return list(self._tasks)

    def __contains__(self, name: object) -> bool:
        return name in self._tasks

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks.values()))

    def __len__(self) -> int:
        return len(self._tasks)


class Project:
    """The build being configured: tasks, compiled output and extensions."""

    def __init__(
        self,
        name: str,
        project_dir: Path | str = ".",
        compiled_output: CompiledOutput | None = None,
        runner: "ProcessRunner | None" = None,
        runner_config: "RunnerConfig | None" = None,
    ):
        from schematool.extensions.datanucleus import DataNucleusExtension
        from schematool.tasks.runner import ProcessRunner, RunnerConfig

        self.name = name
        self.project_dir = Path(project_dir)
        self.compiled_output = (compiled_output or CompiledOutput()).relative_to(
            self.project_dir
        )
        self.runner_config = runner_config or RunnerConfig()
        self.runner = runner or ProcessRunner(self.runner_config)
        self.tasks = TaskContainer(self)
        self.tasks.create(CLASSES_TASK, ClassesTask)
        self.datanucleus: DataNucleusExtension = DataNucleusExtension(self)

    def run(self, task_name: str) -> list[str]:
        """Execute ``task_name`` after its dependencies.

        Returns:
            Names of the executed tasks, in execution order.

        Raises:
            TaskExecutionError: On unknown task names, dependency cycles or
                a failing task.
        """
        order = self._execution_order(task_name)
        for name in order:
            task = self.tasks.get(name)
            logger.info("Running task", extra={"task_name": name})
            task.execute()
        return order

    def _execution_order(self, task_name: str) -> list[str]:
        order: list[str] = []
        done: set[str] = set()

        def visit(name: str, path: list[str]) -> None:
            if name in done:
                return
            if name in path:
                cycle = " -> ".join(path + [name])
                raise TaskExecutionError(
                    f"Circular dependency between tasks: {cycle}",
                    context={"task_name": task_name},
                )
            task = self.tasks.get(name)
            for dependency in task.dependencies:
                visit(dependency, path + [name])
            done.add(name)
            order.append(name)

        visit(task_name, [])
        return order
