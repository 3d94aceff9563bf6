"""
Access to the named types of a schema.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

import graphene
from graphql import DocumentNode, GraphQLNamedType, GraphQLSchema

logger = logging.getLogger(__name__)

SchemaLike = Union[GraphQLSchema, graphene.Schema]


@dataclass(frozen=True)
class DocumentFile:
    """A parsed operation document and the file it came from."""
    file_path: str
    content: DocumentNode


def unwrap_schema(schema: SchemaLike) -> GraphQLSchema:
    """Return the graphql-core schema behind ``schema``."""
    if isinstance(schema, graphene.Schema):
        return schema.graphql_schema
    if isinstance(schema, GraphQLSchema):
        return schema
    raise TypeError(
        f"Expected a GraphQLSchema or graphene.Schema, got {type(schema).__name__}"
    )


def document_content(document: Union[DocumentFile, DocumentNode]) -> DocumentNode:
    if isinstance(document, DocumentFile):
        return document.content
    return document


class TypeRegistry:
    """
    Read-only name -> type map of a schema.

    The map is captured once at construction and exposed as a mapping proxy,
    in the schema's own iteration order.
    """

    def __init__(self, schema: SchemaLike):
        self.schema = unwrap_schema(schema)
        self._type_map: Mapping[str, GraphQLNamedType] = MappingProxyType(
            dict(self.schema.type_map)
        )
        logger.debug(f"Registered {len(self._type_map)} schema types")

    @property
    def type_map(self) -> Mapping[str, GraphQLNamedType]:
        return self._type_map

    def get_type(self, name: str) -> Optional[GraphQLNamedType]:
        return self._type_map.get(name)

    def __contains__(self, name: Any) -> bool:
        return name in self._type_map

    def __len__(self) -> int:
        return len(self._type_map)
