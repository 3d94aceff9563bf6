"""
Discovery of the introspection enums used by operation documents.

Templates render every introspection enum that a query can return (for
example ``__TypeKind`` from ``{ __type(name: "X") { kind } }``) as a regular
output enum. Introspection object types are never needed and are skipped.

Types are deduplicated by identity. This requires the schema and the
documents' schema references to come from a single load of ``graphql``.
"""

import logging
from typing import Iterable, Optional, Union

from graphql import (
    DocumentNode,
    FieldNode,
    GraphQLNamedType,
    GraphQLSchema,
    TypeInfo,
    TypeInfoVisitor,
    Visitor,
    get_named_type,
    is_enum_type,
    is_introspection_type,
    visit,
)

from .filtering import is_reserved_name
from .registry import DocumentFile, document_content

logger = logging.getLogger(__name__)


def is_introspection_enum(type_def: Optional[GraphQLNamedType]) -> bool:
    if type_def is None or not is_enum_type(type_def):
        return False
    return is_introspection_type(type_def) or is_reserved_name(type_def.name)


class _IntrospectionEnumVisitor(Visitor):
    def __init__(self, type_info: TypeInfo, collected: list[GraphQLNamedType]):
        super().__init__()
        self.type_info = type_info
        self.collected = collected

    def enter_field(self, node: FieldNode, *_args):
        type_def = get_named_type(self.type_info.get_type())
        if is_introspection_enum(type_def) and not any(t is type_def for t in self.collected):
            self.collected.append(type_def)


class IntrospectionCollector:
    """Walks documents with schema type information to find introspection enums."""

    def __init__(self, schema: GraphQLSchema):
        self.schema = schema

    def collect(
        self, documents: Optional[Iterable[Union[DocumentFile, DocumentNode]]] = None
    ) -> list[GraphQLNamedType]:
        collected: list[GraphQLNamedType] = []
        if not documents:
            return collected

        for document in documents:
            type_info = TypeInfo(self.schema)
            visitor = _IntrospectionEnumVisitor(type_info, collected)
            visit(document_content(document), TypeInfoVisitor(type_info, visitor))

        if collected:
            logger.debug(
                f"Introspection enums used by documents: {[t.name for t in collected]}"
            )
        return collected
