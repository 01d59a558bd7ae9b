"""Base classes for hydratable, immutable GitHub records.

A record is a frozen pydantic model whose fields double as its hydration
schema. Before pydantic validates anything, ``GitHubRecord`` walks its own
field table and normalises the incoming document:

- absent keys and explicit nulls take the field's declared default;
- values of the wrong type fall back to the default instead of failing;
- enum fields must match one of their symbols exactly, otherwise
  ``MalformedEnumError`` aborts construction;
- a nested record field annotated ``X`` is hydrated from ``{}`` when its
  sub-document is missing, while ``X | None`` stays ``None``;
- list fields always come out as tuples, one entry per source element;
- object-valued fields are read-only mappings, so a built record cannot
  be changed through any of its attributes.

The field table is derived once per class from the annotations, so the
JSON key → attribute mapping is explicit and auditable: it is exactly the
list of declared fields (``record_schema(Artifact)``).

Example:
    >>> artifact = Artifact.from_document({"id": 42, "name": "demo"})
    >>> artifact.size_in_bytes
    0
    >>> artifact.workflow_run.head_branch is None
    True

"""

from __future__ import annotations

import inspect
import json
import logging
import types
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, PlainSerializer, SkipValidation, model_validator
from pydantic_core import PydanticUndefined

from github_manager.exceptions import DocumentShapeError
from github_manager.hydration.document import to_boolean, to_double, to_integer
from github_manager.hydration.enums import coerce_enum

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="GitHubRecord")


def freeze(value: Any) -> Any:
    """Return a read-only copy of a decoded JSON value.

    Objects become ``MappingProxyType`` views and arrays become tuples,
    recursively. Scalars are returned unchanged.

    """
    if isinstance(value, Mapping):
        return types.MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of ``freeze``: plain dicts and lists, ready for ``json.dumps``."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(item) for item in value]
    return value


# A JSON object kept verbatim but read-only. Hydration already normalised
# the value, so pydantic must not rebuild it as a mutable dict.
FrozenDocument = Annotated[Mapping[str, Any], SkipValidation(), PlainSerializer(thaw)]


class FieldKind(Enum):
    """How a declared field is read out of a document."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    ENUM = "enum"
    RECORD = "record"
    LIST = "list"
    MAPPING = "mapping"
    ANY = "any"


@dataclass(frozen=True)
class FieldSpec:
    """One entry of a record's hydration table.

    Attributes:
        name: Attribute name on the record.
        key: JSON key read from the document.
        kind: How the raw value is coerced.
        target: Enum class, record class or scalar type behind ``kind``.
        element: Element spec for list fields.
        nullable: Whether the annotation admits ``None``.
        default: Declared default, or ``PydanticUndefined`` if none.

    """

    name: str
    key: str
    kind: FieldKind
    target: Any = None
    element: FieldSpec | None = None
    nullable: bool = False
    default: Any = PydanticUndefined

    def resolve_default(self) -> Any:
        """Return a fresh copy of the default value for this field."""
        if self.kind is FieldKind.LIST:
            return () if self.default is PydanticUndefined else tuple(self.default or ())
        if self.kind is FieldKind.MAPPING and isinstance(self.default, Mapping):
            return freeze(self.default)
        if self.default is not PydanticUndefined:
            return self.default
        if self.nullable:
            return None
        return _ZERO_VALUES.get(self.kind)


_ZERO_VALUES: dict[FieldKind, Any] = {
    FieldKind.INTEGER: 0,
    FieldKind.FLOAT: 0.0,
    FieldKind.BOOLEAN: False,
    FieldKind.MAPPING: types.MappingProxyType({}),
}

_SCHEMA_CACHE: dict[type, tuple[FieldSpec, ...]] = {}


def _unwrap_optional(annotation: Any) -> tuple[Any, bool]:
    """Strip ``None`` from a union annotation, reporting whether it was there."""
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        nullable = len(args) != len(get_args(annotation))
        if len(args) == 1:
            return args[0], nullable
        return Any, nullable
    return annotation, False


def _classify(annotation: Any) -> tuple[FieldKind, Any, FieldSpec | None]:
    origin = get_origin(annotation)
    if origin is Annotated:
        return _classify(get_args(annotation)[0])
    if origin in (list, Sequence, tuple):
        args = get_args(annotation)
        element_type, element_nullable = _unwrap_optional(args[0] if args else Any)
        kind, target, _ = _classify(element_type)
        element = FieldSpec(
            name="[]",
            key="[]",
            kind=kind,
            target=target,
            nullable=element_nullable,
        )
        return FieldKind.LIST, tuple, element
    if origin in (dict, Mapping) or annotation is dict:
        return FieldKind.MAPPING, dict, None
    if not inspect.isclass(annotation):
        return FieldKind.ANY, None, None
    if issubclass(annotation, Enum):
        return FieldKind.ENUM, annotation, None
    if issubclass(annotation, GitHubRecord):
        return FieldKind.RECORD, annotation, None
    if issubclass(annotation, bool):
        return FieldKind.BOOLEAN, bool, None
    if issubclass(annotation, int):
        return FieldKind.INTEGER, int, None
    if issubclass(annotation, float):
        return FieldKind.FLOAT, float, None
    if issubclass(annotation, str):
        return FieldKind.STRING, str, None
    return FieldKind.ANY, annotation, None


def record_schema(record_cls: type[GitHubRecord]) -> tuple[FieldSpec, ...]:
    """Return the hydration table of ``record_cls``, building it on first use."""
    schema = _SCHEMA_CACHE.get(record_cls)
    if schema is None:
        specs = []
        for name, info in record_cls.model_fields.items():
            annotation, nullable = _unwrap_optional(info.annotation)
            kind, target, element = _classify(annotation)
            default = info.get_default(call_default_factory=True)
            specs.append(
                FieldSpec(
                    name=name,
                    key=info.alias or name,
                    kind=kind,
                    target=target,
                    element=element,
                    nullable=nullable,
                    default=default,
                )
            )
        schema = tuple(specs)
        _SCHEMA_CACHE[record_cls] = schema
    return schema


def _coerce_scalar(spec: FieldSpec, raw: Any) -> Any:
    if spec.kind is FieldKind.STRING:
        return raw if isinstance(raw, str) else None
    if spec.kind is FieldKind.INTEGER:
        return to_integer(raw)
    if spec.kind is FieldKind.FLOAT:
        return to_double(raw)
    if spec.kind is FieldKind.BOOLEAN:
        return to_boolean(raw)
    return raw


def hydrate_record(
    record_cls: type[R],
    value: Any,
    *,
    nullable: bool = False,
) -> R | None:
    """Hydrate ``value`` into ``record_cls``.

    Args:
        record_cls: The nested record type.
        value: A mapping, an existing instance, or anything else.
        nullable: When True, a missing value yields ``None`` instead of an
            all-default record.

    Returns:
        The hydrated record, or ``None`` for a missing nullable value.

    """
    if isinstance(value, record_cls):
        return value
    if isinstance(value, Mapping):
        return record_cls.from_document(value)
    if value is not None:
        logger.debug("Expected an object for %s, got %s", record_cls.__name__, type(value).__name__)
    if nullable:
        return None
    return record_cls.from_document({})


def _hydrate_element(spec: FieldSpec, raw: Any, record: str) -> Any:
    if spec.kind is FieldKind.RECORD:
        return hydrate_record(spec.target, raw, nullable=spec.nullable)
    if spec.kind is FieldKind.ENUM:
        return coerce_enum(spec.target, raw, field=spec.key, record=record)
    if spec.kind is FieldKind.MAPPING:
        return freeze(raw) if isinstance(raw, Mapping) else None
    if raw is None:
        return None
    return freeze(_coerce_scalar(spec, raw))


def hydrate_list(element: type | FieldSpec, values: Any, *, record: str = "") -> tuple[Any, ...]:
    """Hydrate an array into a tuple of ``element``, preserving order and length.

    Args:
        element: The element type (scalar, enum or record class) or its spec.
        values: The raw array. Anything that is not a list yields ``()``.
        record: Name of the enclosing record (for error reporting).

    Returns:
        One entry per source element. Record elements of the wrong shape
        become all-default records; null or uncoercible scalars become
        ``None``.

    """
    if not isinstance(element, FieldSpec):
        element_type, nullable = _unwrap_optional(element)
        kind, target, _ = _classify(element_type)
        element = FieldSpec(name="[]", key="[]", kind=kind, target=target, nullable=nullable)
    if not isinstance(values, (list, tuple)):
        return ()
    return tuple(_hydrate_element(element, raw, record) for raw in values)


def _hydrate_field(spec: FieldSpec, raw: Any, record: str) -> Any:
    if spec.kind is FieldKind.LIST:
        if raw is None:
            return spec.resolve_default()
        return hydrate_list(spec.element, raw, record=record)

    if spec.kind is FieldKind.RECORD:
        if raw is None and not spec.nullable and spec.default is not PydanticUndefined:
            return spec.resolve_default()
        return hydrate_record(spec.target, raw, nullable=spec.nullable)

    default = spec.resolve_default()
    if raw is None:
        return default

    if spec.kind is FieldKind.ENUM:
        return coerce_enum(spec.target, raw, field=spec.key, default=default, record=record)

    if spec.kind is FieldKind.MAPPING:
        if isinstance(raw, Mapping):
            return freeze(raw)
        logger.debug("Field %r of %s is not an object, using default", spec.key, record)
        return default

    if spec.kind is FieldKind.ANY:
        return freeze(raw)

    value = _coerce_scalar(spec, raw)
    if value is None:
        logger.debug("Field %r of %s has an unusable value, using default", spec.key, record)
        return default
    return value


class GitHubRecord(BaseModel):
    """Immutable value object hydrated from a GitHub JSON document.

    Subclasses only declare fields. Every field is optional at the
    document level and carries its own default; see the module docstring
    for the full contract.

    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    @model_validator(mode="before")
    @classmethod
    def hydrate_document(cls, data: Any) -> Any:
        """Normalise a raw document (or keyword arguments) against the field table."""
        if isinstance(data, GitHubRecord):
            return data
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise DocumentShapeError(
                f"{cls.__name__} expects a JSON object, got {type(data).__name__}",
                record=cls.__name__,
            )
        hydrated = {}
        for spec in record_schema(cls):
            raw = data.get(spec.key)
            if raw is None and spec.key != spec.name:
                raw = data.get(spec.name)
            hydrated[spec.name] = _hydrate_field(spec, raw, cls.__name__)
        return hydrated

    @classmethod
    def from_document(cls: type[R], document: Mapping[str, Any] | None) -> R:
        """Hydrate a record from a decoded JSON object.

        Args:
            document: The JSON object. ``None`` is treated as ``{}``.

        Raises:
            MalformedEnumError: If an enum field holds an unknown value.
            DocumentShapeError: If ``document`` is not a mapping.

        """
        return cls.model_validate(document)

    @classmethod
    def from_json(cls: type[R], text: str | bytes) -> R:
        """Hydrate a record from raw JSON text.

        Raises:
            DocumentShapeError: If ``text`` is not valid JSON or not an object.

        """
        try:
            document = json.loads(text)
        except ValueError as e:
            raise DocumentShapeError(f"{cls.__name__} received invalid JSON: {e}", record=cls.__name__) from e
        return cls.from_document(document)

    @classmethod
    def list_from_documents(cls: type[R], documents: Any) -> list[R]:
        """Hydrate every object of a JSON array into ``cls``, in order."""
        return list(hydrate_list(cls, documents, record=cls.__name__))

    def to_document(self) -> dict[str, Any]:
        """Serialise the record back to a JSON-compatible dictionary."""
        return self.model_dump(mode="json", by_alias=True)


class GitHubResponse(GitHubRecord):
    """A record that may carry GitHub's error envelope.

    When the API answers with ``{"message": ..., "documentation_url": ...}``
    instead of the expected resource, hydration still succeeds and
    ``instantiated_with_error`` reports it.

    """

    message: str | None = None
    documentation_url: str | None = None

    @property
    def instantiated_with_error(self) -> bool:
        """Whether the source document was an API error envelope."""
        return self.message is not None


class GitHubList(GitHubResponse):
    """A paginated list envelope with a ``total_count``."""

    total_count: int = 0
