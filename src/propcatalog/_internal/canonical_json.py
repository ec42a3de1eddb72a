"""JSON serialization for command output.

Rows are written with their keys in row order so the output reflects the
descriptor authoring order. Models are written with sorted keys for
byte-stable output.
"""

import json
from typing import Any, Dict, Iterable


def canonical_dumps(obj: Any) -> str:
    """
    Canonical JSON serialization.

    Rules:
    - UTF-8 (no ASCII escaping)
    - Sorted keys
    - Stable separators (",", ":")
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False
    )


def row_dumps(row: Dict[str, str]) -> str:
    """Serialize a row preserving key order."""
    return json.dumps(row, separators=(",", ":"), ensure_ascii=False)


def rows_to_lines(rows: Iterable[Dict[str, str]]) -> str:
    """One serialized row per line, with a trailing newline when non-empty."""
    lines = [row_dumps(row) for row in rows]
    return "\n".join(lines) + "\n" if lines else ""
