"""Compiler utility functions.

Provides helpers for normalizing filter input and formatting OData literals.
"""

from datetime import date, datetime, time, timezone
from typing import Any, Optional

from ..filter import FilterExpression


def normalize_filter_input(where: Any) -> Optional[FilterExpression]:
    """Normalize a FilterExpression, dict or raw string to a FilterExpression.

    Args:
        where: FilterExpression, JSON-like dict, raw OData string or None

    Returns:
        FilterExpression ready for compilation, or None when no filter was given

    Raises:
        TypeError: If input is none of the accepted types
    """
    if where is None:
        return None
    if isinstance(where, FilterExpression):
        return where
    if isinstance(where, dict):
        return FilterExpression.model_validate(where)
    if isinstance(where, str):
        return FilterExpression.from_raw(where)
    raise TypeError(f"filter must be a FilterExpression, dict or str, got {type(where).__name__}")


def format_datetime(value: date) -> str:
    """Render a date/datetime as an ISO-8601 UTC timestamp, e.g. ``2023-01-01T00:00:00.000Z``.

    Naive datetimes are taken as UTC; plain dates as UTC midnight.
    """
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_value(v: Any) -> str:
    """Format a Python value as an OData literal."""
    if isinstance(v, str):
        return "'" + v.replace("'", "''") + "'"
    if isinstance(v, date):
        return format_datetime(v)
    # bool before numbers: bool is an int subclass
    if isinstance(v, bool):
        return "true" if v else "false"
    if v is None:
        return "null"
    return str(v)


def escape_field_name(name: str) -> str:
    """Return the field path unchanged.

    OData field paths are unquoted (``Address/City``); callers supply valid
    identifiers.
    """
    return name
