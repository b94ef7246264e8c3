"""Build extensions contributed by schematool."""

from schematool.extensions.datanucleus import DataNucleusExtension
from schematool.extensions.schema_tool import SchemaToolExtension

__all__ = ["DataNucleusExtension", "SchemaToolExtension"]
