"""
Transformation of the directives declared by a schema.
"""

from typing import Iterable

from graphql import GraphQLDirective, GraphQLSchema

from .fields import transform_arguments
from .types import Directive


def transform_directive(schema: GraphQLSchema, directive: GraphQLDirective) -> Directive:
    return Directive(
        name=directive.name,
        description=directive.description,
        locations=tuple(location.name for location in directive.locations),
        arguments=transform_arguments(schema, directive.args),
        is_repeatable=bool(directive.is_repeatable),
    )


def transform_directives(
    schema: GraphQLSchema, directives: Iterable[GraphQLDirective]
) -> tuple[Directive, ...]:
    return tuple(transform_directive(schema, d) for d in directives)
