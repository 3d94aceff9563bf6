"""
Field and argument transformation, plus wrapper-type resolution.
"""

from typing import Any, Mapping

from graphql import (
    GraphQLSchema,
    GraphQLType,
    Undefined,
    get_named_type,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
    is_scalar_type,
    is_union_type,
)

from .applied import get_directives
from .types import Argument, Field, ResolvedType


def resolve_type(type_: GraphQLType) -> ResolvedType:
    """
    Describe the wrappers around a field or argument type.

    ``[[String!]]!`` resolves to name ``String``, required, an array of
    dimension 2 whose items are not nullable.
    """
    is_required = is_non_null_type(type_)
    dimension = 0
    items_non_null = False
    current = type_
    while is_list_type(current) or is_non_null_type(current):
        if is_list_type(current):
            dimension += 1
            if is_non_null_type(current.of_type):
                items_non_null = True
        current = current.of_type

    return ResolvedType(
        name=current.name,
        is_required=is_required,
        is_array=dimension > 0,
        is_nullable_array=dimension > 0 and not items_non_null,
        dimension_of_array=dimension,
    )


def _default_value(value: Any) -> Any:
    return None if value is Undefined else value


def transform_argument(schema: GraphQLSchema, name: str, argument: Any) -> Argument:
    resolved = resolve_type(argument.type)
    named = get_named_type(argument.type)
    return Argument(
        name=name,
        type=resolved.name,
        description=argument.description,
        default_value=_default_value(argument.default_value),
        is_required=resolved.is_required,
        is_array=resolved.is_array,
        is_nullable_array=resolved.is_nullable_array,
        dimension_of_array=resolved.dimension_of_array,
        is_scalar=is_scalar_type(named),
        is_enum=is_enum_type(named),
        is_input_type=is_input_object_type(named),
        directives=get_directives(schema, argument),
    )


def transform_arguments(schema: GraphQLSchema, args: Mapping[str, Any]) -> tuple[Argument, ...]:
    return tuple(transform_argument(schema, name, arg) for name, arg in (args or {}).items())


def transform_field(schema: GraphQLSchema, name: str, field: Any) -> Field:
    resolved = resolve_type(field.type)
    named = get_named_type(field.type)
    deprecation_reason = getattr(field, "deprecation_reason", None)
    return Field(
        name=name,
        type=resolved.name,
        description=field.description,
        # Input fields carry no arguments
        arguments=transform_arguments(schema, getattr(field, "args", None)),
        is_required=resolved.is_required,
        is_array=resolved.is_array,
        is_nullable_array=resolved.is_nullable_array,
        dimension_of_array=resolved.dimension_of_array,
        is_type=is_object_type(named),
        is_scalar=is_scalar_type(named),
        is_interface=is_interface_type(named),
        is_union=is_union_type(named),
        is_input_type=is_input_object_type(named),
        is_enum=is_enum_type(named),
        is_deprecated=deprecation_reason is not None,
        deprecation_reason=deprecation_reason,
        directives=get_directives(schema, field),
    )


def transform_fields(schema: GraphQLSchema, fields: Mapping[str, Any]) -> tuple[Field, ...]:
    return tuple(transform_field(schema, name, f) for name, f in fields.items())
