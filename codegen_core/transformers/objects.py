"""
Object and input object type transformation.
"""

from typing import Union

from graphql import GraphQLInputObjectType, GraphQLObjectType, GraphQLSchema

from .applied import get_directives
from .fields import transform_fields
from .types import Type


def transform_object(
    schema: GraphQLSchema, type_def: Union[GraphQLObjectType, GraphQLInputObjectType]
) -> Type:
    """
    Build a :class:`Type` record for an object or input object type.

    Both kinds share one record shape; ``is_input_type`` tells them apart and
    input objects never list interfaces.
    """
    is_input = isinstance(type_def, GraphQLInputObjectType)
    interfaces = () if is_input else tuple(i.name for i in type_def.interfaces)
    return Type(
        name=type_def.name,
        description=type_def.description,
        fields=transform_fields(schema, type_def.fields),
        interfaces=interfaces,
        is_input_type=is_input,
        directives=get_directives(schema, type_def),
    )
