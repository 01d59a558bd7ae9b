"""ISO-8601 timestamp helpers.

Records keep timestamps exactly as the API sent them and expose a derived
epoch-milliseconds accessor next to each one. Parsing happens on access,
so a malformed date never prevents a record from being built; the
accessor reports it as ``-1`` instead.

Example:
    >>> class Artifact(GitHubResponse):
    ...     created_at: str | None = None
    ...     created_at_timestamp = timestamp_property("created_at")
    >>> Artifact(created_at="2023-01-01T00:00:00Z").created_at_timestamp
    1672531200000

"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

from pydantic import TypeAdapter, ValidationError

INVALID_TIMESTAMP = -1

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_DATETIME = TypeAdapter(datetime)


def parse_datetime(value: object) -> datetime | None:
    """Parse an ISO-8601 string into an aware datetime (UTC when unqualified).

    Parsing follows pydantic's ``datetime`` rules. Non-string values and
    strings pydantic rejects give ``None``.

    """
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = _DATETIME.validate_python(value.strip())
    except ValidationError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def to_timestamp(value: object) -> int:
    """Convert an ISO-8601 string to epoch milliseconds.

    Returns:
        Milliseconds since the epoch, or ``-1`` if ``value`` is missing
        or cannot be parsed.

    """
    parsed = parse_datetime(value)
    if parsed is None:
        return INVALID_TIMESTAMP
    return (parsed - _EPOCH) // timedelta(milliseconds=1)


def timestamp_property(field_name: str) -> property:
    """Build a read-only property exposing ``field_name`` as epoch milliseconds."""

    def getter(self: Any) -> int:
        return to_timestamp(getattr(self, field_name))

    getter.__doc__ = f"``{field_name}`` as epoch milliseconds, or -1 if unparseable."
    return property(getter)
