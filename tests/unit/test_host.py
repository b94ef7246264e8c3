"""Tests for the minimal build host."""

from pathlib import Path

import pytest

from schematool.core.exceptions import TaskExecutionError, TaskRegistrationError
from schematool.core.host import (
    CLASSES_TASK,
    ClassesTask,
    CompiledOutput,
    Project,
    Task,
)


class RecordingTask(Task):
    """Task that appends its name to a shared list when executed."""

    executed: list = []

    def execute(self) -> None:
        RecordingTask.executed.append(self.name)


@pytest.fixture(autouse=True)
def reset_recording():
    RecordingTask.executed = []
    yield


class TestCompiledOutput:
    """Tests for CompiledOutput."""

    def test_defaults(self):
        output = CompiledOutput()
        assert output.classes_dirs == [Path("build/classes")]
        assert output.resources_dir == Path("build/resources")

    def test_relative_to(self, temp_dir):
        output = CompiledOutput(["out/classes", "/abs/classes"], "out/res").relative_to(temp_dir)
        assert output.classes_dirs == [temp_dir / "out/classes", Path("/abs/classes")]
        assert output.resources_dir == temp_dir / "out/res"

    def test_without_resources(self, temp_dir):
        output = CompiledOutput(["classes"], None).relative_to(temp_dir)
        assert output.resources_dir is None
        assert output.classpath() == [temp_dir / "classes"]

    def test_metadata_files_missing_dirs(self, temp_dir):
        output = CompiledOutput(["nope"], "nope-either").relative_to(temp_dir)
        assert output.metadata_files() == []

    def test_metadata_files_include_resources(self, temp_dir):
        (temp_dir / "classes").mkdir()
        (temp_dir / "res" / "META-INF").mkdir(parents=True)
        (temp_dir / "res" / "META-INF" / "mapping.orm").write_text("<orm/>")
        output = CompiledOutput(["classes"], "res").relative_to(temp_dir)
        assert output.metadata_files() == [temp_dir / "res" / "META-INF" / "mapping.orm"]


class TestTaskContainer:
    """Tests for task registration."""

    def test_project_has_classes_task(self, project):
        assert CLASSES_TASK in project.tasks
        assert isinstance(project.tasks.get(CLASSES_TASK), ClassesTask)

    def test_create_registers_and_configures(self, project):
        seen = []
        task = project.tasks.create("custom", RecordingTask, seen.append)
        assert seen == [task]
        assert project.tasks.get("custom") is task
        assert task.project is project

    def test_duplicate_name_rejected(self, project):
        project.tasks.create("custom", RecordingTask)
        with pytest.raises(TaskRegistrationError) as exc_info:
            project.tasks.create("custom", RecordingTask)
        assert "already exists" in str(exc_info.value)

    def test_unknown_task(self, project):
        with pytest.raises(TaskExecutionError) as exc_info:
            project.tasks.get("nope")
        assert "classes" in exc_info.value.context["available_tasks"]

    def test_iteration_and_len(self, project):
        project.tasks.create("a", RecordingTask)
        assert [t.name for t in project.tasks] == [CLASSES_TASK, "a"]
        assert len(project.tasks) == 2

    def test_depends_on_ignores_duplicates(self, project):
        task = project.tasks.create("a", RecordingTask)
        task.depends_on("x", "x").depends_on("x")
        assert task.dependencies == ["x"]


class TestProjectRun:
    """Tests for Project.run."""

    def test_runs_dependencies_first(self, project):
        project.tasks.create("a", RecordingTask)
        project.tasks.create("b", RecordingTask).depends_on("a")
        project.tasks.create("c", RecordingTask).depends_on("a", "b")

        assert project.run("c") == ["a", "b", "c"]
        assert RecordingTask.executed == ["a", "b", "c"]

    def test_cycle_detected(self, project):
        project.tasks.create("a", RecordingTask).depends_on("b")
        project.tasks.create("b", RecordingTask).depends_on("a")
        with pytest.raises(TaskExecutionError) as exc_info:
            project.run("a")
        assert "a -> b -> a" in str(exc_info.value)
        assert RecordingTask.executed == []

    def test_unknown_dependency(self, project):
        project.tasks.create("a", RecordingTask).depends_on("missing")
        with pytest.raises(TaskExecutionError):
            project.run("a")

    def test_classes_task_passes_with_compiled_output(self, project):
        assert project.run(CLASSES_TASK) == [CLASSES_TASK]

    def test_classes_task_fails_without_compiled_output(self, temp_dir):
        project = Project("empty", project_dir=temp_dir)
        with pytest.raises(TaskExecutionError) as exc_info:
            project.run(CLASSES_TASK)
        assert "compile" in str(exc_info.value)

    def test_schema_task_runs_after_classes(self, project, runner):
        project.datanucleus.schema_tool.configure_and_register(persistence_unit_name="pu")
        assert project.run("dbinfo") == [CLASSES_TASK, "dbinfo"]
        assert len(runner.invocations) == 1

    def test_schema_task_blocked_without_classes(self, temp_dir, runner):
        project = Project("empty", project_dir=temp_dir, runner=runner)
        project.datanucleus.schema_tool.configure_and_register(persistence_unit_name="pu")
        with pytest.raises(TaskExecutionError):
            project.run("createDatabaseTables")
        assert runner.invocations == []
