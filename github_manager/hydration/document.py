"""Typed, non-throwing accessors over JSON documents.

Every accessor takes a document (a mapping decoded from JSON, or None) and
a key, and returns either a value of the requested type or the supplied
default. Absent keys, explicit nulls and values of the wrong type all
resolve to the default; none of these functions raise.

Numeric accessors accept any numeric representation the API might use:
ints, floats and numeric strings. Booleans are never treated as numbers.

Example:
    >>> doc = {"id": "42", "name": "demo", "expired": True}
    >>> get_long(doc, "id")
    42
    >>> get_int(doc, "size_in_bytes")
    0
    >>> get_string(doc, "node_id", "n/a")
    'n/a'

"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

_MISSING = object()


def _raw(doc: Mapping[str, Any] | None, key: str) -> Any:
    if not isinstance(doc, Mapping):
        return _MISSING
    value = doc.get(key, _MISSING)
    return _MISSING if value is None else value


def _mismatch(key: str, value: Any, expected: str) -> None:
    logger.debug(
        "Field %r holds %s where %s was expected, using default",
        key,
        type(value).__name__,
        expected,
    )


def has_key(doc: Mapping[str, Any] | None, key: str) -> bool:
    """Return True if ``key`` is present in ``doc`` with a non-null value."""
    return _raw(doc, key) is not _MISSING


def get_string(doc: Mapping[str, Any] | None, key: str, default: str | None = None) -> str | None:
    """Return the string stored under ``key``, or ``default``."""
    value = _raw(doc, key)
    if value is _MISSING:
        return default
    if isinstance(value, str):
        return value
    _mismatch(key, value, "a string")
    return default


def to_integer(value: Any) -> int | None:
    """Coerce a JSON scalar to an int, or return None when it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if math.isfinite(number) else None
    return None


def to_double(value: Any) -> float | None:
    """Coerce a JSON scalar to a float, or return None when it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def to_boolean(value: Any) -> bool | None:
    """Coerce a JSON scalar to a bool, or return None when it is not boolean."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    return None


def get_long(doc: Mapping[str, Any] | None, key: str, default: int = 0) -> int:
    """Return the integer stored under ``key``, or ``default``."""
    value = _raw(doc, key)
    if value is _MISSING:
        return default
    number = to_integer(value)
    if number is None:
        _mismatch(key, value, "an integer")
        return default
    return number


def get_int(doc: Mapping[str, Any] | None, key: str, default: int = 0) -> int:
    """Return the integer stored under ``key``, or ``default``.

    Python ints are unbounded, so this is the same as :func:`get_long`;
    both names exist because the API documents some counters as 32-bit.

    """
    return get_long(doc, key, default)


def get_double(doc: Mapping[str, Any] | None, key: str, default: float = 0.0) -> float:
    """Return the float stored under ``key``, or ``default``."""
    value = _raw(doc, key)
    if value is _MISSING:
        return default
    number = to_double(value)
    if number is None:
        _mismatch(key, value, "a number")
        return default
    return number


def get_boolean(doc: Mapping[str, Any] | None, key: str, default: bool = False) -> bool:
    """Return the boolean stored under ``key``, or ``default``."""
    value = _raw(doc, key)
    if value is _MISSING:
        return default
    flag = to_boolean(value)
    if flag is None:
        _mismatch(key, value, "a boolean")
        return default
    return flag


def get_document(
    doc: Mapping[str, Any] | None,
    key: str,
    default: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Return the sub-document stored under ``key``, or ``default`` (``{}``)."""
    value = _raw(doc, key)
    if isinstance(value, Mapping):
        return dict(value)
    if value is not _MISSING:
        _mismatch(key, value, "an object")
    return dict(default) if default is not None else {}


def get_array(
    doc: Mapping[str, Any] | None,
    key: str,
    default: list[Any] | None = None,
) -> list[Any]:
    """Return the array stored under ``key``, or ``default`` (``[]``)."""
    value = _raw(doc, key)
    if isinstance(value, (list, tuple)):
        return list(value)
    if value is not _MISSING:
        _mismatch(key, value, "an array")
    return list(default) if default is not None else []
