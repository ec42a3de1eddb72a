"""Exceptions raised by propcatalog."""


class SchemaParseError(ValueError):
    """Raised when a descriptor cannot be parsed into rows.

    The original exception is always chained as ``__cause__``. Parsing is
    all-or-nothing: no partial rows are returned alongside this error.
    """
    pass
