from graphql import GraphQLInterfaceType, GraphQLSchema, is_object_type

from .applied import get_directives
from .fields import transform_fields
from .types import Interface


def get_implementing_types(schema: GraphQLSchema, interface: GraphQLInterfaceType) -> tuple[str, ...]:
    """Names of the object types declaring ``interface``, in type map order."""
    return tuple(
        type_def.name
        for type_def in schema.type_map.values()
        if is_object_type(type_def)
        and any(i.name == interface.name for i in type_def.interfaces)
    )


def transform_interface(schema: GraphQLSchema, interface: GraphQLInterfaceType) -> Interface:
    return Interface(
        name=interface.name,
        description=interface.description,
        fields=transform_fields(schema, interface.fields),
        implementing_types=get_implementing_types(schema, interface),
        directives=get_directives(schema, interface),
    )
