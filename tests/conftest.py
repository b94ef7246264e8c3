"""Pytest configuration and shared fixtures."""

import tempfile
from pathlib import Path

import pytest

from schematool.core.host import CompiledOutput, Project


class RecordingRunner:
    """Runner double that records invocations instead of starting a JVM."""

    def __init__(self, exit_code: int = 0):
        self.exit_code = exit_code
        self.invocations = []

    def run(self, invocation, task_name=""):
        self.invocations.append((task_name, invocation))
        return self.exit_code


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def compiled_project_dir(temp_dir):
    """Project directory with a compiled class and a JDO mapping file."""
    classes = temp_dir / "build" / "classes"
    (classes / "shop").mkdir(parents=True)
    (classes / "shop" / "Product.class").write_bytes(b"\xca\xfe\xba\xbe")
    (classes / "shop" / "package.jdo").write_text("<jdo/>")
    (classes / "shop" / "notes.txt").write_text("not metadata")
    (temp_dir / "build" / "resources").mkdir(parents=True)
    return temp_dir


@pytest.fixture
def runner():
    return RecordingRunner()


@pytest.fixture
def project(compiled_project_dir, runner):
    """Project with compiled output and a recording runner."""
    return Project(
        "shop",
        project_dir=compiled_project_dir,
        compiled_output=CompiledOutput(
            classes_dirs=["build/classes"], resources_dir="build/resources"
        ),
        runner=runner,
    )


@pytest.fixture
def build_dir(temp_dir):
    """Create a builds subdirectory in temp_dir."""
    builds = temp_dir / "builds"
    builds.mkdir()
    return builds
