"""
graphql-codegen-core

Turns a GraphQL schema into a template context: flat, ordered lists of
object, input, enum, union, interface and scalar records plus the schema's
directives, ready for code generation templates.
"""

from .context import TemplateContext
from .defaults import LIBRARY_VERSION
from .exceptions import CodegenError, UnclassifiableTypeError
from .schema import DocumentFile, TypeKind, schema_to_template_context
from .settings import ContextSettings
from .transformers import TransformerSet

__version__ = LIBRARY_VERSION

__all__ = [
    "schema_to_template_context",
    "TemplateContext",
    "DocumentFile",
    "TypeKind",
    "TransformerSet",
    "ContextSettings",
    "CodegenError",
    "UnclassifiableTypeError",
]
