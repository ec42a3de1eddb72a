"""Stringification rules for descriptor values.

Rows store every value as a string. JSON scalars are rendered using their
JSON spelling so that booleans read ``true``/``false`` (never Python's
``True``/``False``) and the accessor layer can compare against literals.
"""

import json
from typing import Any


def stringify_value(value: Any) -> str:
    """Render a decoded JSON value as a row string.

    Rules:
    - str is returned unchanged
    - bool becomes "true" / "false"
    - int and float use their JSON text form
    - None becomes ""
    - list is comma-joined after stringifying each element
    - dict is rendered as compact JSON text (key order preserved)
    """
    if isinstance(value, str):
        return value
    # bool before int: bool is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return json.dumps(value)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ",".join(stringify_value(v) for v in value)
    if isinstance(value, dict):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


def escape_control_sequences(value: str) -> str:
    """Double the backslash of literal ``\\r``, ``\\n`` and ``\\t`` sequences.

    A literal backslash followed by ``r``/``n``/``t`` becomes two
    backslashes followed by the letter, so consumers that re-embed the
    value into a single-line format do not read it as a line break or tab.

    Not idempotent: applying it twice doubles the backslash again.
    """
    return (
        value
        .replace("\\r", "\\\\r")
        .replace("\\n", "\\\\n")
        .replace("\\t", "\\\\t")
    )
