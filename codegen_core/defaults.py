"""
Default configuration for the graphql-codegen-core library.

Every setting the library consumes is listed here. Projects running under
Django can override any key through the ``GRAPHQL_CODEGEN_CORE`` setting.
"""

from __future__ import annotations

from typing import Any

LIBRARY_VERSION = "0.1.0"

SETTINGS_NAME = "GRAPHQL_CODEGEN_CORE"

# Scalars every GraphQL schema carries; templates know them already.
GRAPHQL_PRIMITIVES: tuple[str, ...] = ("String", "Int", "Boolean", "ID", "Float")

# Names starting with this prefix are reserved for the introspection system.
RESERVED_PREFIX = "__"

LIBRARY_DEFAULTS: dict[str, Any] = {
    "include_specified_directives": True,
    "forced_types": [],
    "emit_events": True,
}
