"""Tests for kernel/accessor.py."""

import pytest

from propcatalog.kernel import accessor
from propcatalog.kernel.accessor import (
    get_names,
    get_property_default_value,
    get_property_enum,
    get_property_java_type,
    get_property_kind,
    get_property_name_from_name_with_prefix,
    get_property_prefix,
    get_row,
    is_component_consumer_only,
    is_component_lenient_properties,
    is_component_producer_only,
    is_property_array,
    is_property_boolean,
    is_property_consumer_only,
    is_property_deprecated,
    is_property_integer,
    is_property_multi_value,
    is_property_number,
    is_property_object,
    is_property_producer_only,
    is_property_required,
    strip_optional_prefix_from_name,
)
from propcatalog.kernel.parser import parse_json_schema, parse_main_json_schema


@pytest.fixture
def rows(component_json):
    return parse_json_schema("properties", component_json, True)


def test_component_flags(component_json):
    component_rows = parse_json_schema("component", component_json, False)
    assert is_component_producer_only(component_rows) is True
    assert is_component_consumer_only(component_rows) is False
    assert is_component_lenient_properties(component_rows) is False


def test_component_flags_first_row_wins():
    rows = [{"consumerOnly": "false"}, {"consumerOnly": "true"}]
    assert is_component_consumer_only(rows) is False


def test_component_flags_absent_key_is_false():
    assert is_component_lenient_properties([{"name": "a"}]) is False
    assert is_component_consumer_only([]) is False


def test_property_lookups(rows):
    assert get_property_kind(rows, "function") == "path"
    assert get_property_java_type(rows, "pollInterval") == "long"
    assert get_property_default_value(rows, "operation") == "invokeFunction"
    assert get_property_enum(rows, "operation") == "listFunctions,getFunction,createFunction,invokeFunction"
    assert get_property_prefix(rows, "header") == "header."
    assert get_property_prefix(rows, "function") is None


def test_property_lookup_is_case_insensitive(rows):
    assert is_property_required(rows, "FUNCTION") is True
    assert get_property_kind(rows, "PollInterval") == "parameter"


def test_end_to_end_required_case_insensitive():
    text = '{"properties": {"timeout": {"type":"integer","defaultValue":"30","required":"true"}}}'
    rows = parse_json_schema("properties", text, True)
    assert is_property_required(rows, "TIMEOUT") is True
    assert get_property_default_value(rows, "timeout") == "30"


def test_property_flags(rows):
    assert is_property_required(rows, "operation") is True
    assert is_property_required(rows, "header") is False
    assert is_property_deprecated(rows, "awsLambdaClient") is True
    assert is_property_deprecated(rows, "function") is False
    assert is_property_multi_value(rows, "header") is True
    assert is_property_multi_value(rows, "operation") is False


def test_property_types(rows):
    assert is_property_boolean(rows, "synchronous") is True
    assert is_property_integer(rows, "pollInterval") is True
    assert is_property_object(rows, "operation") is True
    assert is_property_number(rows, "pollInterval") is False
    assert is_property_array(rows, "header") is False


def test_property_types_from_main_schema(main_json):
    rows = parse_main_json_schema(main_json)
    assert is_property_boolean(rows, "camel.main.streamCachingEnabled") is True
    assert is_property_integer(rows, "camel.main.shutdownTimeout") is True
    assert is_property_object(rows, "camel.main.routeController") is True


def test_array_and_number_types():
    rows = [{"name": "ids", "type": "array"}, {"name": "ratio", "type": "number"}]
    assert is_property_array(rows, "ids") is True
    assert is_property_number(rows, "ratio") is True


def test_consumer_and_producer_by_label(rows):
    assert is_property_consumer_only(rows, "pollInterval") is True
    assert is_property_producer_only(rows, "pollInterval") is False
    assert is_property_producer_only(rows, "function") is True
    assert is_property_consumer_only(rows, "header") is False


def test_unknown_name_returns_neutral_defaults(rows):
    assert is_property_required(rows, "missing") is False
    assert is_property_deprecated(rows, "missing") is False
    assert is_property_boolean(rows, "missing") is False
    assert is_property_multi_value(rows, "missing") is False
    assert is_property_consumer_only(rows, "missing") is False
    assert get_property_kind(rows, "missing") is None
    assert get_property_default_value(rows, "missing") is None
    assert get_property_enum(rows, "missing") is None


def test_first_match_wins():
    rows = [
        {"name": "dup", "required": "false"},
        {"name": "DUP", "required": "true"},
    ]
    assert is_property_required(rows, "dup") is False


def test_rows_without_name_never_match():
    rows = [{"required": "true"}, {"name": "a"}]
    assert is_property_required(rows, "a") is False


def test_strip_optional_prefix_from_name():
    rows = [{"name": "foo", "optionalPrefix": "camel."}]
    assert strip_optional_prefix_from_name(rows, "camel.foo") == "foo"
    assert strip_optional_prefix_from_name(rows, "foo") == "foo"


def test_strip_optional_prefix_nested():
    rows = [
        {"name": "foo", "optionalPrefix": "camel."},
        {"name": "bar", "optionalPrefix": "component."},
    ]
    assert strip_optional_prefix_from_name(rows, "camel.component.bar") == "bar"
    assert strip_optional_prefix_from_name(rows, "component.camel.foo") == "foo"


def test_strip_optional_prefix_no_match_returns_name():
    rows = [{"name": "foo", "optionalPrefix": "camel."}]
    assert strip_optional_prefix_from_name(rows, "other.foo") == "other.foo"
    assert strip_optional_prefix_from_name([], "camel.foo") == "camel.foo"


def test_strip_optional_prefix_stops_at_matching_row():
    rows = [
        {"name": "camel.foo"},
        {"name": "foo", "optionalPrefix": "camel."},
    ]
    assert strip_optional_prefix_from_name(rows, "camel.foo") == "camel.foo"


def test_strip_optional_prefix_ignores_unnamed_rows():
    rows = [{"optionalPrefix": "camel."}]
    assert strip_optional_prefix_from_name(rows, "camel.foo") == "camel.foo"


def test_strip_optional_prefix_empty_prefix_terminates():
    rows = [{"name": "foo", "optionalPrefix": ""}]
    assert strip_optional_prefix_from_name(rows, "camel.foo") == "camel.foo"


def test_strip_optional_prefix_bounded():
    rows = [{"name": "x", "optionalPrefix": "a"}]
    name = "a" * (accessor.MAX_PREFIX_STRIP_PASSES + 10)
    assert strip_optional_prefix_from_name(rows, name) == "a" * 10


def test_get_property_name_from_name_with_prefix(rows):
    assert get_property_name_from_name_with_prefix(rows, "header.Foo") == "header"
    assert get_property_name_from_name_with_prefix(rows, "function") is None


def test_get_row(rows):
    row = get_row(rows, "header")
    assert row is not None
    assert row["prefix"] == "header."
    assert get_row(rows, "HEADER") is None
    assert get_row(rows, "missing") is None


def test_get_names():
    names = get_names([{"name": "a"}, {"name": "b"}, {"name": "a"}, {"kind": "x"}])
    assert names == {"a", "b"}
    assert list(names) == ["a", "b"]


def test_accessors_do_not_mutate_rows(rows):
    before = [dict(r) for r in rows]
    is_property_required(rows, "function")
    strip_optional_prefix_from_name(rows, "header.x")
    get_names(rows)
    assert rows == before
