"""Parse component metadata descriptors into row sequences.

Two descriptor shapes are supported:

- the grouped shape used by components, data formats, languages and models::

    {"component": {...}, "properties": {"timeout": {"type": "integer", ...}}}

- the flat main configuration shape::

    {"properties": [{"name": "stream-caching", "type": "boolean", ...}]}

Both parsers return a fresh list of rows. A row is an insertion-ordered
dict of string keys to string values; the row list order follows the
descriptor authoring order.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import TypeAdapter, ValidationError

from propcatalog.codes import LogicalType
from propcatalog.errors import SchemaParseError
from propcatalog.kernel.values import escape_control_sequences, stringify_value

logger = logging.getLogger(__name__)

Row = Dict[str, str]

_DOCUMENT = TypeAdapter(Dict[str, Any])
_MAIN_PROPERTIES = TypeAdapter(List[Dict[str, Any]])
_METADATA_MAP = TypeAdapter(Dict[str, Any])
_PROPERTY_GROUP = TypeAdapter(Dict[str, Dict[str, Any]])

# Host types of the main configuration and the logical type they map to.
# Matching is exact and case-sensitive; anything else is an object.
MAIN_TYPE_MAPPING: Dict[str, LogicalType] = {
    "boolean": LogicalType.BOOLEAN,
    "java.lang.Boolean": LogicalType.BOOLEAN,
    "int": LogicalType.INTEGER,
    "java.lang.Integer": LogicalType.INTEGER,
    "long": LogicalType.INTEGER,
    "java.lang.Long": LogicalType.INTEGER,
    "float": LogicalType.NUMBER,
    "java.lang.Float": LogicalType.NUMBER,
    "double": LogicalType.NUMBER,
    "java.lang.Double": LogicalType.NUMBER,
    "string": LogicalType.STRING,
    "java.lang.String": LogicalType.STRING,
}


def main_type_to_logical_type(java_type: Optional[str]) -> str:
    """Translate a main configuration host type into a logical type."""
    if java_type is None:
        return LogicalType.OBJECT.value
    return MAIN_TYPE_MAPPING.get(java_type, LogicalType.OBJECT).value


def dash_to_camel_case(text: str) -> str:
    """Convert dash format into camel case (hello-great-world -> helloGreatWorld).

    Text without a dash is returned unchanged. A trailing dash has no
    following character to upper-case and is dropped.
    """
    if not text or "-" not in text:
        return text

    out = []
    upper_next = False
    for c in text:
        if c == "-":
            upper_next = True
        elif upper_next:
            out.append(c.upper())
            upper_next = False
        else:
            out.append(c)
    return "".join(out)


def transform_map(mapping: Dict[str, Any]) -> Row:
    """Flatten a metadata map into string values.

    List values (enums) are joined with ``,`` and every value has its
    control sequences escaped.
    """
    answer: Row = {}
    for key, value in mapping.items():
        answer[str(key)] = escape_control_sequences(stringify_value(value))
    return answer


def _load_document(json_text: str) -> Dict[str, Any]:
    data = json.loads(json_text)
    return _DOCUMENT.validate_python(data)


def parse_main_json_schema(json_text: Optional[str]) -> List[Row]:
    """Parse the main configuration json schema into rows.

    Each entry of the top-level ``properties`` array becomes one row. The
    dash-form ``name`` is replaced by its camel case lookup key, the host
    type is kept under ``javaType`` and ``type`` is replaced by the
    logical type. Other top-level keys are ignored.

    Args:
        json_text: The main configuration json, or None

    Returns:
        List of rows (empty when json_text is None)

    Raises:
        SchemaParseError: If the json or its structure cannot be parsed
    """
    answer: List[Row] = []
    if json_text is None:
        return answer

    try:
        document = _load_document(json_text)
        if "properties" in document:
            for entry in _MAIN_PROPERTIES.validate_python(document["properties"]):
                row: Row = {str(k): stringify_value(v) for k, v in entry.items()}
                name = entry["name"]
                if name is None:
                    raise TypeError("property name must not be null")
                row["name"] = dash_to_camel_case(stringify_value(name))
                java_type = row.get("type")
                if java_type is not None:
                    row["javaType"] = java_type
                row["type"] = main_type_to_logical_type(java_type)
                answer.append(row)
    except (ValueError, KeyError, TypeError, RecursionError, ValidationError) as e:
        raise SchemaParseError(f"Cannot parse main json schema: {e}") from e

    logger.debug("Parsed %d rows from main json schema", len(answer))
    return answer


def parse_json_schema(group: str, json_text: Optional[str], flatten_properties: bool) -> List[Row]:
    """Parse one group of a grouped json schema into rows.

    Args:
        group: The group to parse, such as ``component``,
            ``componentProperties`` or ``properties``
        json_text: The descriptor json, or None
        flatten_properties: True to read the group as a map of property
            name to metadata map (one row per property); False to read it
            as a single metadata map exploded into one row per key

    Returns:
        List of rows (empty when json_text is None or the group is absent)

    Raises:
        SchemaParseError: If the json or the selected group cannot be parsed
    """
    answer: List[Row] = []
    if json_text is None:
        return answer

    try:
        document = _load_document(json_text)
        if group in document:
            if flatten_properties:
                properties = _PROPERTY_GROUP.validate_python(document[group])
                for name, metadata in properties.items():
                    row: Row = {"name": str(name)}
                    row.update(transform_map(metadata))
                    answer.append(row)
            else:
                for key, value in transform_map(_METADATA_MAP.validate_python(document[group])).items():
                    answer.append({key: value})
    except (ValueError, TypeError, RecursionError, ValidationError) as e:
        raise SchemaParseError(f"Cannot parse json schema group '{group}': {e}") from e

    logger.debug("Parsed %d rows from group '%s'", len(answer), group)
    return answer
