"""Configuration models for schematool."""

from schematool.models.config import BuildConfig, CompiledOutputConfig, DataNucleusConfig
from schematool.models.settings import (
    Dialect,
    SchemaToolSettings,
    TaskSettings,
    resolve_skip,
)

__all__ = [
    "BuildConfig",
    "CompiledOutputConfig",
    "DataNucleusConfig",
    "Dialect",
    "SchemaToolSettings",
    "TaskSettings",
    "resolve_skip",
]
