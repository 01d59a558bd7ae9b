"""Strict coercion of raw strings into enum members.

Enum fields are the one place where hydration refuses to degrade: a value
outside the declared symbol set aborts construction of the record.

"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from github_manager.exceptions import MalformedEnumError

E = TypeVar("E", bound=Enum)


class GitHubEnum(str, Enum):
    """Base for enums whose values are the API's wire strings.

    Members compare equal to their wire string and render as it, so
    ``str(LockReason.OFF_TOPIC) == "off-topic"``.

    """

    def __str__(self) -> str:
        return str(self.value)


def enum_values(enum_cls: type[Enum]) -> tuple[str, ...]:
    """Return the wire strings of ``enum_cls`` in declaration order."""
    return tuple(str(member.value) for member in enum_cls)


def coerce_enum(
    enum_cls: type[E],
    raw: object,
    *,
    field: str,
    default: E | None = None,
    record: str | None = None,
) -> E | None:
    """Map ``raw`` onto a member of ``enum_cls``.

    Args:
        enum_cls: The target enum.
        raw: The value found in the document.
        field: JSON key being hydrated (for error reporting).
        default: Member substituted when ``raw`` is None.
        record: Name of the record being hydrated (for error reporting).

    Returns:
        The matching member, ``raw`` itself if it already is one, or
        ``default`` when the value is absent.

    Raises:
        MalformedEnumError: If ``raw`` is not an exact, case-sensitive
            match for one of the enum's values.

    """
    if raw is None:
        return default
    if isinstance(raw, enum_cls):
        return raw
    if isinstance(raw, str):
        for member in enum_cls:
            if member.value == raw:
                return member
    raise MalformedEnumError(field, raw, enum_values(enum_cls), record=record)
