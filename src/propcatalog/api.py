"""Public API for propcatalog.

High-level functions that fetch descriptors from a schema source, parse
them and summarize properties as pydantic models. Tools should use these
instead of composing the kernel functions themselves.
"""

import logging
from typing import Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, Field

from propcatalog.codes import ArtifactKind, GROUP_COMPONENT, GROUP_PROPERTIES
from propcatalog.kernel import accessor
from propcatalog.kernel.accessor import Row
from propcatalog.kernel.parser import parse_json_schema, parse_main_json_schema
from propcatalog.source import SchemaSource, get_json_schema

logger = logging.getLogger(__name__)


class PropertyInfo(BaseModel):
    """Typed summary of one property row."""
    name: str
    type: Optional[str] = None  # logical type: boolean, integer, number, string, array, object
    java_type: Optional[str] = None
    kind: Optional[str] = None  # "parameter" | "path" | "property" | ...
    default_value: Optional[str] = None
    enum: List[str] = Field(default_factory=list)
    prefix: Optional[str] = None
    required: bool = False
    deprecated: bool = False
    multi_value: bool = False
    consumer_only: bool = False
    producer_only: bool = False
    description: Optional[str] = None
    label: Optional[str] = None


class ComponentInfo(BaseModel):
    """Typed summary of a component group parsed in row mode."""
    lenient_properties: bool = False
    consumer_only: bool = False
    producer_only: bool = False
    attributes: Dict[str, str] = Field(default_factory=dict)  # all raw key/value pairs, in row order


def load_rows(
    source: SchemaSource,
    kind: Union[ArtifactKind, str],
    name: str,
    group: str = GROUP_PROPERTIES,
    flatten_properties: bool = True,
) -> List[Row]:
    """Fetch an artifact's descriptor and parse one group of it.

    Returns an empty list when the source has no such artifact.

    Raises:
        SchemaParseError: If the descriptor cannot be parsed
    """
    json_text = get_json_schema(source, kind, name)
    if json_text is None:
        logger.debug("No %s descriptor named '%s'", ArtifactKind(kind).value, name)
    return parse_json_schema(group, json_text, flatten_properties)


def load_main_rows(source: SchemaSource) -> List[Row]:
    """Fetch and parse the main configuration descriptor."""
    return parse_main_json_schema(source.get_main_json_schema())


def resolve_property_name(rows: Sequence[Row], name: str) -> Optional[str]:
    """Resolve an externally supplied option name to a declared property name.

    Tries the name as given, then with optional prefixes stripped, then as
    a prefixed multi-value key (``header.Foo`` -> ``header``).
    """
    if accessor.find_property_row(rows, name) is not None:
        return name
    stripped = accessor.strip_optional_prefix_from_name(rows, name)
    if accessor.find_property_row(rows, stripped) is not None:
        return stripped
    return accessor.get_property_name_from_name_with_prefix(rows, stripped)


def _split_enum(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return value.split(",")


def describe_property(rows: Sequence[Row], name: str) -> Optional[PropertyInfo]:
    """Summarize a property, or None when the name cannot be resolved."""
    resolved = resolve_property_name(rows, name)
    if resolved is None:
        return None
    row = accessor.find_property_row(rows, resolved)
    if row is None:
        return None
    return PropertyInfo(
        name=row["name"],
        type=row.get("type"),
        java_type=accessor.get_property_java_type(rows, resolved),
        kind=accessor.get_property_kind(rows, resolved),
        default_value=accessor.get_property_default_value(rows, resolved),
        enum=_split_enum(accessor.get_property_enum(rows, resolved)),
        prefix=accessor.get_property_prefix(rows, resolved),
        required=accessor.is_property_required(rows, resolved),
        deprecated=accessor.is_property_deprecated(rows, resolved),
        multi_value=accessor.is_property_multi_value(rows, resolved),
        consumer_only=accessor.is_property_consumer_only(rows, resolved),
        producer_only=accessor.is_property_producer_only(rows, resolved),
        description=row.get("description"),
        label=row.get("label"),
    )


def describe_properties(rows: Sequence[Row]) -> List[PropertyInfo]:
    """Summarize every named row, in row order."""
    answer = []
    for name in accessor.get_names(rows):
        info = describe_property(rows, name)
        if info is not None:
            answer.append(info)
    return answer


def describe_component(rows: Sequence[Row]) -> ComponentInfo:
    """Summarize rows parsed from the ``component`` group in row mode."""
    attributes: Dict[str, str] = {}
    for row in rows:
        for key, value in row.items():
            attributes.setdefault(key, value)
    return ComponentInfo(
        lenient_properties=accessor.is_component_lenient_properties(rows),
        consumer_only=accessor.is_component_consumer_only(rows),
        producer_only=accessor.is_component_producer_only(rows),
        attributes=attributes,
    )


def load_component_info(source: SchemaSource, name: str) -> Optional[ComponentInfo]:
    """Fetch a component descriptor and summarize its ``component`` group."""
    json_text = source.get_component_json_schema(name)
    if json_text is None:
        return None
    return describe_component(parse_json_schema(GROUP_COMPONENT, json_text, False))
