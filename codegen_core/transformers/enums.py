from graphql import GraphQLEnumType, GraphQLSchema

from .applied import get_directives
from .types import Enum, EnumValue


def transform_enum(schema: GraphQLSchema, enum: GraphQLEnumType) -> Enum:
    values = tuple(
        EnumValue(
            name=name,
            value=value.value,
            description=value.description,
            is_deprecated=value.deprecation_reason is not None,
            deprecation_reason=value.deprecation_reason,
            directives=get_directives(schema, value),
        )
        for name, value in enum.values.items()
    )
    return Enum(
        name=enum.name,
        description=enum.description,
        values=values,
        directives=get_directives(schema, enum),
    )
