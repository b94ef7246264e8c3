"""The ``datanucleus`` extension: build-wide defaults for DataNucleus tasks."""

from typing import TYPE_CHECKING, Any, Callable, Optional

from schematool.core.exceptions import ConfigError
from schematool.extensions.schema_tool import SchemaToolExtension

if TYPE_CHECKING:
    from schematool.core.host import Project


class DataNucleusExtension:
    """Parent of the schema_tool extension.

    ``skip`` is the build-wide default; ``None`` means it was never set.
    """

    def __init__(self, project: "Project"):
        self.project = project
        self.skip: Optional[bool] = None
        self.schema_tool = SchemaToolExtension(self)

    def configure(
        self,
        update: Callable[["DataNucleusExtension"], Any] | None = None,
        **overrides: Any,
    ) -> "DataNucleusExtension":
        for key, value in overrides.items():
            if key != "skip":
                raise ConfigError(
                    f"Unknown datanucleus setting: '{key}'",
                    context={"available": "skip"},
                )
            self.skip = value
        if update is not None:
            update(self)
        return self
