from graphql import GraphQLScalarType, GraphQLSchema

from .applied import get_directives
from .types import Scalar


def transform_scalar(schema: GraphQLSchema, scalar: GraphQLScalarType) -> Scalar:
    return Scalar(
        name=scalar.name,
        description=scalar.description,
        directives=get_directives(schema, scalar),
    )
