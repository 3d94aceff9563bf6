"""
Per-kind transformers.

A transformer is a pure function ``(schema, type_def) -> record``. The
defaults below cover every named type kind plus directive declarations;
callers swap individual ones through :class:`TransformerSet`.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from graphql import GraphQLDirective, GraphQLNamedType, GraphQLSchema

from .applied import get_directives
from .directives import transform_directive, transform_directives
from .enums import transform_enum
from .fields import resolve_type, transform_arguments, transform_fields
from .interfaces import get_implementing_types, transform_interface
from .objects import transform_object
from .scalars import transform_scalar
from .types import (
    Argument,
    Directive,
    Enum,
    EnumValue,
    Field,
    Interface,
    ResolvedType,
    Scalar,
    Type,
    Union,
)
from .unions import transform_union

Transformer = Callable[[GraphQLSchema, GraphQLNamedType], Any]
DirectivesTransformer = Callable[[GraphQLSchema, Iterable[GraphQLDirective]], Iterable[Any]]


@dataclass(frozen=True)
class TransformerSet:
    """The collaborators invoked for each type kind and for directives."""

    object_type: Transformer = transform_object
    input_object_type: Transformer = transform_object
    enum_type: Transformer = transform_enum
    union_type: Transformer = transform_union
    interface_type: Transformer = transform_interface
    scalar_type: Transformer = transform_scalar
    directives: DirectivesTransformer = transform_directives

    def replace(self, **changes: Any) -> "TransformerSet":
        return dataclasses.replace(self, **changes)


__all__ = [
    "TransformerSet",
    "Transformer",
    "DirectivesTransformer",
    "get_directives",
    "get_implementing_types",
    "resolve_type",
    "transform_arguments",
    "transform_directive",
    "transform_directives",
    "transform_enum",
    "transform_fields",
    "transform_interface",
    "transform_object",
    "transform_scalar",
    "transform_union",
    "Argument",
    "Directive",
    "Enum",
    "EnumValue",
    "Field",
    "Interface",
    "ResolvedType",
    "Scalar",
    "Type",
    "Union",
]
