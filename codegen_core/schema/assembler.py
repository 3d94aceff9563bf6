"""
Assembly of the template context from the filtered schema types.
"""

import logging
from typing import Any, Iterable, Mapping, Optional

from graphql import (
    GraphQLDirective,
    GraphQLSchema,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_object_type,
)

from ..context import TemplateContext
from ..transformers import TransformerSet, get_directives
from .classifier import ROUTES, TypeDispatcher

logger = logging.getLogger(__name__)


def _directive_carriers(type_def: Any) -> Iterable[Any]:
    """Yield a type and every element inside it that can carry directives."""
    yield type_def
    if is_object_type(type_def) or is_interface_type(type_def):
        for field in type_def.fields.values():
            yield field
            yield from field.args.values()
    elif is_input_object_type(type_def):
        yield from type_def.fields.values()
    elif is_enum_type(type_def):
        yield from type_def.values.values()


def schema_uses_directives(schema: GraphQLSchema, type_defs: Iterable[Any]) -> bool:
    """
    True when a directive is applied anywhere in the schema.

    Looks at the schema definition, the arguments of every declared directive
    and every element inside ``type_defs``.
    """
    if get_directives(schema, schema):
        return True
    if any(
        get_directives(schema, arg)
        for directive in schema.directives
        for arg in directive.args.values()
    ):
        return True
    return any(
        get_directives(schema, element)
        for type_def in type_defs
        for element in _directive_carriers(type_def)
    )


class ContextAssembler:
    """
    Builds a :class:`TemplateContext` in one pass over the filtered types.

    Results are collected into local lists and frozen into the context at the
    end, so a failure part way through leaves nothing behind.
    """

    def __init__(self, transformers: Optional[TransformerSet] = None):
        self.transformers = transformers or TransformerSet()
        self.dispatcher = TypeDispatcher(self.transformers)

    def assemble(
        self,
        schema: GraphQLSchema,
        filtered_types: Mapping[str, Any],
        directives: Iterable[GraphQLDirective],
    ) -> TemplateContext:
        lists: dict[str, list[Any]] = {route.target: [] for route in ROUTES.values()}
        for name, type_def in filtered_types.items():
            target, record = self.dispatcher.dispatch(schema, name, type_def)
            lists[target].append(record)

        defined_directives = tuple(self.transformers.directives(schema, directives))
        uses_directives = schema_uses_directives(schema, filtered_types.values())

        logger.debug(
            "Assembled context: "
            + ", ".join(f"{target}={len(items)}" for target, items in lists.items())
        )

        return TemplateContext(
            raw_schema=schema,
            defined_directives=defined_directives,
            directives=get_directives(schema, schema),
            uses_directives=uses_directives,
            **{target: tuple(items) for target, items in lists.items()},
        )
