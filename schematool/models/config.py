"""Build file model: project layout plus extension settings."""

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from schematool.tasks.runner import RunnerConfig


class CompiledOutputConfig(BaseModel):
    """Location of the compiled main source set."""

    classes_dirs: list[Path] = Field(
        default_factory=lambda: [Path("build/classes")],
        description="Directories holding compiled classes",
    )
    resources_dir: Optional[Path] = Field(
        default=Path("build/resources"), description="Processed resources directory"
    )


class DataNucleusConfig(BaseModel):
    """``datanucleus`` block of a build file."""

    skip: Optional[bool] = Field(default=None, description="Build-wide skip default")
    schema_tool: dict[str, Any] = Field(
        default_factory=dict,
        description="SchemaTool settings, applied without validation",
    )


class BuildConfig(BaseModel):
    """Complete build file definition."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(description="Project name (required)")
    project_dir: Path = Field(
        default=Path("."), description="Project directory, relative to the build file"
    )
    compiled_output: CompiledOutputConfig = Field(
        default_factory=CompiledOutputConfig, description="Compiled output layout"
    )
    runner: RunnerConfig = Field(
        default_factory=RunnerConfig, description="SchemaTool launcher settings"
    )
    datanucleus: DataNucleusConfig = Field(
        default_factory=DataNucleusConfig, description="DataNucleus settings"
    )

    @classmethod
    def from_dict(cls, data: dict) -> "BuildConfig":
        return cls(**data)
