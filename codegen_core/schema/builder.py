"""
Entry point turning a schema into a template context.

Deployment precondition: the schema, any documents and this library must all
use one load of the ``graphql`` package. Kind classification relies on
``isinstance`` and introspection enum deduplication relies on object
identity; types created by a second copy of ``graphql`` are rejected with
:class:`~codegen_core.exceptions.UnclassifiableTypeError`.

The function holds no state between calls. Concurrent callers may share one
schema; each call builds its own context.
"""

import logging
from typing import Any, Iterable, Optional, Union

from graphql import DocumentNode, is_specified_directive

from ..exceptions import UnclassifiableTypeError
from ..observability import (
    ContextEvent,
    EventSink,
    EventType,
    LoggingEventSink,
    NullEventSink,
    emit,
)
from ..context import TemplateContext
from ..settings import ContextSettings
from ..transformers import TransformerSet
from .assembler import ContextAssembler
from .filtering import filter_types
from .introspection import IntrospectionCollector
from .registry import DocumentFile, SchemaLike, TypeRegistry

logger = logging.getLogger(__name__)


def _resolve_sink(event_sink: Optional[EventSink], settings: ContextSettings) -> EventSink:
    if event_sink is not None:
        return event_sink
    if not settings.emit_events:
        return NullEventSink()
    return LoggingEventSink()


def schema_to_template_context(
    schema: SchemaLike,
    documents: Optional[Iterable[Union[DocumentFile, DocumentNode]]] = None,
    *,
    transformers: Optional[TransformerSet] = None,
    event_sink: Optional[EventSink] = None,
    settings: Optional[Union[ContextSettings, dict[str, Any]]] = None,
) -> TemplateContext:
    """
    Build the template context for ``schema``.

    Args:
        schema: A ``GraphQLSchema`` or a ``graphene.Schema``.
        documents: Parsed operation documents. Introspection enums they
            select are added to the context.
        transformers: Per-kind transformers; defaults to :class:`TransformerSet`.
        event_sink: Receives progress events; defaults to logging.
        settings: A :class:`ContextSettings` or a dict of overrides.

    Raises:
        UnclassifiableTypeError: a surviving type matches no known kind.
    """
    if not isinstance(settings, ContextSettings):
        settings = ContextSettings.load(settings)
    sink = _resolve_sink(event_sink, settings)
    documents = list(documents or ())

    registry = TypeRegistry(schema)
    graphql_schema = registry.schema
    emit(sink, ContextEvent(
        event_type=EventType.CONTEXT_STARTED,
        message="Building template context",
        context={"total_types": len(registry), "documents": len(documents)},
    ))

    introspection_types = IntrospectionCollector(graphql_schema).collect(documents)
    emit(sink, ContextEvent(
        event_type=EventType.INTROSPECTION_TYPES_COLLECTED,
        context={"types": [t.name for t in introspection_types]},
    ))

    allow_list = [t.name for t in introspection_types] + list(settings.forced_types)
    filtered = filter_types(registry.type_map, allow_list)
    emit(sink, ContextEvent(
        event_type=EventType.TYPES_FILTERED,
        message=f"Got total of {len(filtered)} types in the GraphQL schema",
        context={"kept": len(filtered), "dropped": len(registry) - len(filtered)},
    ))

    directives = [
        d for d in graphql_schema.directives
        if settings.include_specified_directives or not is_specified_directive(d)
    ]

    assembler = ContextAssembler(transformers)
    try:
        context = assembler.assemble(graphql_schema, filtered, directives)
    except UnclassifiableTypeError as e:
        emit(sink, ContextEvent(
            event_type=EventType.CLASSIFICATION_FAILED,
            message=str(e),
            type_name=e.type_name,
        ))
        raise

    emit(sink, ContextEvent(
        event_type=EventType.CONTEXT_COMPLETED,
        message="Template context built",
        context={
            "types": len(context.types),
            "input_types": len(context.input_types),
            "enums": len(context.enums),
            "unions": len(context.unions),
            "scalars": len(context.scalars),
            "interfaces": len(context.interfaces),
            "defined_directives": len(context.defined_directives),
            "uses_directives": context.uses_directives,
        },
    ))
    return context
