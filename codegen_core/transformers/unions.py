from graphql import GraphQLSchema, GraphQLUnionType

from .applied import get_directives
from .types import Union


def transform_union(schema: GraphQLSchema, union: GraphQLUnionType) -> Union:
    return Union(
        name=union.name,
        description=union.description,
        possible_types=tuple(t.name for t in union.types),
        directives=get_directives(schema, union),
    )
