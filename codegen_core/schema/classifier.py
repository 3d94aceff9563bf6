"""
Classification of named types into the six GraphQL kinds.

Every kind in :class:`TypeKind` has exactly one route: the transformer to call
and the context list that receives its result. The route table is checked
against the enum when this module is imported, so a kind added without a
route fails at import time instead of being skipped at runtime.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from graphql import (
    GraphQLEnumType,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLUnionType,
)

from ..exceptions import UnclassifiableTypeError
from ..transformers import TransformerSet


class TypeKind(Enum):
    """The closed set of named type kinds."""
    OBJECT = "OBJECT"
    INPUT_OBJECT = "INPUT_OBJECT"
    ENUM = "ENUM"
    UNION = "UNION"
    INTERFACE = "INTERFACE"
    SCALAR = "SCALAR"


_KIND_CLASSES = (
    (GraphQLObjectType, TypeKind.OBJECT),
    (GraphQLInputObjectType, TypeKind.INPUT_OBJECT),
    (GraphQLEnumType, TypeKind.ENUM),
    (GraphQLUnionType, TypeKind.UNION),
    (GraphQLInterfaceType, TypeKind.INTERFACE),
    (GraphQLScalarType, TypeKind.SCALAR),
)


@dataclass(frozen=True)
class Route:
    """Where a kind goes: a ``TransformerSet`` attribute and a context list."""
    transformer: str
    target: str


ROUTES: dict[TypeKind, Route] = {
    TypeKind.OBJECT: Route(transformer="object_type", target="types"),
    TypeKind.INPUT_OBJECT: Route(transformer="input_object_type", target="input_types"),
    TypeKind.ENUM: Route(transformer="enum_type", target="enums"),
    TypeKind.UNION: Route(transformer="union_type", target="unions"),
    TypeKind.INTERFACE: Route(transformer="interface_type", target="interfaces"),
    TypeKind.SCALAR: Route(transformer="scalar_type", target="scalars"),
}


def _check_exhaustive() -> None:
    missing_routes = set(TypeKind) - set(ROUTES)
    missing_classes = set(TypeKind) - {kind for _, kind in _KIND_CLASSES}
    if missing_routes or missing_classes:
        raise RuntimeError(
            f"Type kinds without a route: {sorted(k.value for k in missing_routes)}; "
            f"without a class: {sorted(k.value for k in missing_classes)}"
        )


_check_exhaustive()


def classify_type(type_def: Any, name: Optional[str] = None) -> TypeKind:
    """
    Return the kind of ``type_def``.

    Raises:
        UnclassifiableTypeError: the object is none of the graphql-core named
            type classes, typically because it was created by another load of
            the ``graphql`` package.
    """
    for type_class, kind in _KIND_CLASSES:
        if isinstance(type_def, type_class):
            return kind
    raise UnclassifiableTypeError(name or getattr(type_def, "name", repr(type_def)), type_def)


class TypeDispatcher:
    """Routes each type to the transformer for its kind."""

    def __init__(self, transformers: Optional[TransformerSet] = None):
        self.transformers = transformers or TransformerSet()

    def transformer_for(self, kind: TypeKind) -> Callable[[GraphQLSchema, Any], Any]:
        return getattr(self.transformers, ROUTES[kind].transformer)

    def dispatch(self, schema: GraphQLSchema, name: str, type_def: Any) -> tuple[str, Any]:
        """Transform ``type_def`` and return ``(target list name, record)``."""
        kind = classify_type(type_def, name)
        record = self.transformer_for(kind)(schema, type_def)
        return ROUTES[kind].target, record
