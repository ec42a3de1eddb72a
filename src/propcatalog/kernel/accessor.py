"""Typed queries over parsed descriptor rows.

All functions are pure: they never mutate the rows and never raise for
missing data. Property lookups match ``name`` case-insensitively and the
first matching row wins; when no row matches, the neutral default
(False or None) is returned.
"""

from typing import Dict, KeysView, Optional, Sequence

from propcatalog.codes import LogicalType

Row = Dict[str, str]

# Upper bound on optional prefix strip passes for a single name
MAX_PREFIX_STRIP_PASSES = 64


def _is_true(value: Optional[str]) -> bool:
    return value == "true"


def _component_flag(rows: Sequence[Row], key: str) -> bool:
    """Value of the first row carrying ``key``, as a boolean."""
    for row in rows:
        if key in row:
            return _is_true(row[key])
    return False


def find_property_row(rows: Sequence[Row], name: str) -> Optional[Row]:
    """Find the first row whose ``name`` equals ``name`` ignoring case."""
    wanted = name.lower()
    for row in rows:
        row_name = row.get("name")
        if row_name is not None and row_name.lower() == wanted:
            return row
    return None


def _property_attribute(rows: Sequence[Row], name: str, key: str) -> Optional[str]:
    row = find_property_row(rows, name)
    if row is None:
        return None
    return row.get(key)


def _property_has_type(rows: Sequence[Row], name: str, logical_type: LogicalType) -> bool:
    return _property_attribute(rows, name, "type") == logical_type.value


def _property_label_contains(rows: Sequence[Row], name: str, text: str) -> bool:
    label = _property_attribute(rows, name, "label")
    return label is not None and text in label


# Component level flags

def is_component_lenient_properties(rows: Sequence[Row]) -> bool:
    return _component_flag(rows, "lenientProperties")


def is_component_consumer_only(rows: Sequence[Row]) -> bool:
    return _component_flag(rows, "consumerOnly")


def is_component_producer_only(rows: Sequence[Row]) -> bool:
    return _component_flag(rows, "producerOnly")


# Property lookups

def is_property_consumer_only(rows: Sequence[Row], name: str) -> bool:
    """Whether the property's label marks it as a consumer option."""
    return _property_label_contains(rows, name, "consumer")


def is_property_producer_only(rows: Sequence[Row], name: str) -> bool:
    """Whether the property's label marks it as a producer option."""
    return _property_label_contains(rows, name, "producer")


def is_property_required(rows: Sequence[Row], name: str) -> bool:
    return _is_true(_property_attribute(rows, name, "required"))


def is_property_deprecated(rows: Sequence[Row], name: str) -> bool:
    return _is_true(_property_attribute(rows, name, "deprecated"))


def is_property_multi_value(rows: Sequence[Row], name: str) -> bool:
    return _is_true(_property_attribute(rows, name, "multiValue"))


def get_property_kind(rows: Sequence[Row], name: str) -> Optional[str]:
    return _property_attribute(rows, name, "kind")


def get_property_java_type(rows: Sequence[Row], name: str) -> Optional[str]:
    return _property_attribute(rows, name, "javaType")


def get_property_default_value(rows: Sequence[Row], name: str) -> Optional[str]:
    return _property_attribute(rows, name, "defaultValue")


def get_property_enum(rows: Sequence[Row], name: str) -> Optional[str]:
    """Enum values as stored: a single comma-joined string."""
    return _property_attribute(rows, name, "enum")


def get_property_prefix(rows: Sequence[Row], name: str) -> Optional[str]:
    return _property_attribute(rows, name, "prefix")


def is_property_boolean(rows: Sequence[Row], name: str) -> bool:
    return _property_has_type(rows, name, LogicalType.BOOLEAN)


def is_property_integer(rows: Sequence[Row], name: str) -> bool:
    return _property_has_type(rows, name, LogicalType.INTEGER)


def is_property_array(rows: Sequence[Row], name: str) -> bool:
    return _property_has_type(rows, name, LogicalType.ARRAY)


def is_property_number(rows: Sequence[Row], name: str) -> bool:
    return _property_has_type(rows, name, LogicalType.NUMBER)


def is_property_object(rows: Sequence[Row], name: str) -> bool:
    return _property_has_type(rows, name, LogicalType.OBJECT)


# Name resolution

def _strip_once(rows: Sequence[Row], name: str) -> Optional[str]:
    """Run one scan of the rows; return the stripped name or None.

    Rows are scanned in order. A named row whose ``optionalPrefix``
    prefixes ``name`` strips it. A named row matching ``name`` (ignoring
    case) ends the scan without stripping.
    """
    wanted = name.lower()
    for row in rows:
        row_name = row.get("name")
        if row_name is None:
            continue
        optional_prefix = row.get("optionalPrefix")
        if optional_prefix is not None and name.startswith(optional_prefix):
            return name[len(optional_prefix):]
        if row_name.lower() == wanted:
            return None
    return None


def strip_optional_prefix_from_name(rows: Sequence[Row], name: str) -> str:
    """Strip optional prefixes from ``name``, as many times as they apply.

    After each strip the scan restarts from the first row, so nested
    optional prefixes are all removed. Returns ``name`` unchanged when no
    optional prefix applies. Stripping stops when a name repeats (an empty
    optional prefix) or after ``MAX_PREFIX_STRIP_PASSES`` strips.
    """
    seen = {name}
    for _ in range(MAX_PREFIX_STRIP_PASSES):
        stripped = _strip_once(rows, name)
        if stripped is None or stripped in seen:
            return name
        seen.add(stripped)
        name = stripped
    return name


def get_property_name_from_name_with_prefix(rows: Sequence[Row], name: str) -> Optional[str]:
    """Resolve a prefixed key back to its declared property name.

    Returns the ``name`` of the first row whose ``prefix`` is a prefix of
    ``name`` (e.g. ``header.Foo`` -> ``header``), or None.
    """
    for row in rows:
        prefix = row.get("prefix")
        if prefix is not None and name.startswith(prefix):
            return row.get("name")
    return None


# Whole sequence helpers

def get_row(rows: Sequence[Row], name: str) -> Optional[Row]:
    """Get the first row whose ``name`` equals ``name`` exactly."""
    for row in rows:
        if row.get("name") == name:
            return row
    return None


def get_names(rows: Sequence[Row]) -> KeysView[str]:
    """Get the set of row names.

    The result is a set-like view that iterates in first-seen order.
    """
    return dict.fromkeys(row["name"] for row in rows if "name" in row).keys()
