"""Tolerant JSON → record hydration.

- document: Non-throwing typed accessors over decoded JSON
- enums: Strict enum coercion
- timestamps: ISO-8601 → epoch milliseconds
- record: The GitHubRecord base and its field table

"""

from github_manager.hydration.document import (
    get_array,
    get_boolean,
    get_document,
    get_double,
    get_int,
    get_long,
    get_string,
    has_key,
)
from github_manager.hydration.enums import GitHubEnum, coerce_enum, enum_values
from github_manager.hydration.record import (
    FieldKind,
    FieldSpec,
    FrozenDocument,
    GitHubList,
    GitHubRecord,
    GitHubResponse,
    freeze,
    hydrate_list,
    hydrate_record,
    record_schema,
    thaw,
)
from github_manager.hydration.timestamps import (
    INVALID_TIMESTAMP,
    parse_datetime,
    timestamp_property,
    to_timestamp,
)

__all__ = [
    "INVALID_TIMESTAMP",
    "FieldKind",
    "FieldSpec",
    "FrozenDocument",
    "GitHubEnum",
    "GitHubList",
    "GitHubRecord",
    "GitHubResponse",
    "coerce_enum",
    "enum_values",
    "freeze",
    "get_array",
    "get_boolean",
    "get_document",
    "get_double",
    "get_int",
    "get_long",
    "get_string",
    "has_key",
    "hydrate_list",
    "hydrate_record",
    "parse_datetime",
    "record_schema",
    "thaw",
    "timestamp_property",
    "to_timestamp",
]
