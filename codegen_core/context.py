"""
The template context handed to the rendering stage.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from graphql import GraphQLSchema

from .transformers.applied import NO_DIRECTIVES, freeze_directives
from .transformers.types import to_plain


@dataclass(frozen=True)
class TemplateContext:
    """
    Canonical representation of a schema for code templates.

    Each kind list keeps the schema's type map order. Presence flags are
    derived from the lists and cannot be set. ``raw_schema`` gives templates
    read access to the source schema; it plays no part in equality.
    """

    raw_schema: GraphQLSchema = field(compare=False, repr=False)
    types: tuple[Any, ...] = ()
    input_types: tuple[Any, ...] = ()
    enums: tuple[Any, ...] = ()
    unions: tuple[Any, ...] = ()
    scalars: tuple[Any, ...] = ()
    interfaces: tuple[Any, ...] = ()
    defined_directives: tuple[Any, ...] = ()
    # Directives applied on the schema definition itself
    directives: Mapping[str, Mapping[str, Any]] = field(default_factory=lambda: NO_DIRECTIVES)
    uses_directives: bool = False

    def __post_init__(self):
        object.__setattr__(self, "directives", freeze_directives(self.directives))

    @property
    def has_types(self) -> bool:
        return len(self.types) > 0

    @property
    def has_input_types(self) -> bool:
        return len(self.input_types) > 0

    @property
    def has_enums(self) -> bool:
        return len(self.enums) > 0

    @property
    def has_unions(self) -> bool:
        return len(self.unions) > 0

    @property
    def has_scalars(self) -> bool:
        return len(self.scalars) > 0

    @property
    def has_interfaces(self) -> bool:
        return len(self.interfaces) > 0

    @property
    def has_defined_directives(self) -> bool:
        return len(self.defined_directives) > 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain data for template engines. ``raw_schema`` is kept as is."""

        def _dump(items):
            return [to_plain(item) for item in items]

        return {
            'types': _dump(self.types),
            'input_types': _dump(self.input_types),
            'enums': _dump(self.enums),
            'unions': _dump(self.unions),
            'scalars': _dump(self.scalars),
            'interfaces': _dump(self.interfaces),
            'defined_directives': _dump(self.defined_directives),
            'has_types': self.has_types,
            'has_input_types': self.has_input_types,
            'has_enums': self.has_enums,
            'has_unions': self.has_unions,
            'has_scalars': self.has_scalars,
            'has_interfaces': self.has_interfaces,
            'has_defined_directives': self.has_defined_directives,
            'directives': to_plain(self.directives),
            'uses_directives': self.uses_directives,
            'raw_schema': self.raw_schema,
        }
