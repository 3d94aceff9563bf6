"""
Schema normalization: registry, introspection discovery, filtering,
classification and context assembly.
"""

from .assembler import ContextAssembler, schema_uses_directives
from .builder import schema_to_template_context
from .classifier import ROUTES, TypeDispatcher, TypeKind, classify_type
from .filtering import filter_types, is_primitive_name, is_reserved_name
from .introspection import IntrospectionCollector, is_introspection_enum
from .registry import DocumentFile, TypeRegistry, unwrap_schema

__all__ = [
    "schema_to_template_context",
    "ContextAssembler",
    "schema_uses_directives",
    "ROUTES",
    "TypeDispatcher",
    "TypeKind",
    "classify_type",
    "filter_types",
    "is_primitive_name",
    "is_reserved_name",
    "IntrospectionCollector",
    "is_introspection_enum",
    "DocumentFile",
    "TypeRegistry",
    "unwrap_schema",
]
