"""Enumerated constants for descriptor metadata.

These constants prevent stringly-typed comparisons against row values
and artifact kinds.
"""

from enum import Enum


class LogicalType(str, Enum):
    """Logical types a property ``type`` value is interpreted as."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class ArtifactKind(str, Enum):
    """Kinds of descriptor a schema source can supply."""

    COMPONENT = "component"
    DATA_FORMAT = "dataformat"
    LANGUAGE = "language"
    MODEL = "model"
    OTHER = "other"


# Well-known group names of the grouped descriptor shape
GROUP_COMPONENT = "component"
GROUP_COMPONENT_PROPERTIES = "componentProperties"
GROUP_PROPERTIES = "properties"
