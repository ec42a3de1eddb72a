"""propcatalog: parse component metadata descriptors into queryable rows."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("propcatalog")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from propcatalog.api import (
    ComponentInfo,
    PropertyInfo,
    describe_component,
    describe_properties,
    describe_property,
    load_main_rows,
    load_rows,
)
from propcatalog.codes import ArtifactKind, LogicalType
from propcatalog.errors import SchemaParseError
from propcatalog.kernel.parser import parse_json_schema, parse_main_json_schema

__all__ = [
    "__version__",
    "ArtifactKind",
    "ComponentInfo",
    "LogicalType",
    "PropertyInfo",
    "SchemaParseError",
    "describe_component",
    "describe_properties",
    "describe_property",
    "load_main_rows",
    "load_rows",
    "parse_json_schema",
    "parse_main_json_schema",
]
