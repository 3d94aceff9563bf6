"""
Data classes produced by the per-kind transformers.

Each record describes one schema element in the shape templates consume.
Cross-references to other types are kept by name so that the flattened lists
stay independent of each other. Records are frozen and their directive maps
are read-only.
"""

from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Mapping, Optional

from .applied import NO_DIRECTIVES


def to_plain(value: Any) -> Any:
    """Turn records, read-only mappings and tuples into dicts and lists."""
    if isinstance(value, _Record):
        return value.to_dict()
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_plain(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Mapping):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    return value


class _Record:
    """Adds ``to_dict`` to the record dataclasses."""

    # Properties included in ``to_dict`` next to the fields
    _derived: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        data = {f.name: to_plain(getattr(self, f.name)) for f in fields(self)}
        for name in self._derived:
            data[name] = getattr(self, name)
        return data


def _directives_field():
    return field(default_factory=lambda: NO_DIRECTIVES)


@dataclass(frozen=True)
class ResolvedType(_Record):
    """Named type of a field or argument plus its wrapper information."""
    name: str
    is_required: bool = False
    is_array: bool = False
    is_nullable_array: bool = False
    dimension_of_array: int = 0


@dataclass(frozen=True)
class Argument(_Record):
    """A field or directive argument."""
    name: str
    type: str
    description: Optional[str] = None
    default_value: Any = None
    is_required: bool = False
    is_array: bool = False
    is_nullable_array: bool = False
    dimension_of_array: int = 0
    is_scalar: bool = False
    is_enum: bool = False
    is_input_type: bool = False
    directives: Mapping[str, Mapping[str, Any]] = _directives_field()


@dataclass(frozen=True)
class Field(_Record):
    """A field of an object, interface or input object type."""
    name: str
    type: str
    description: Optional[str] = None
    arguments: tuple[Argument, ...] = ()
    is_required: bool = False
    is_array: bool = False
    is_nullable_array: bool = False
    dimension_of_array: int = 0
    # Kind of the named type behind the wrappers
    is_type: bool = False
    is_scalar: bool = False
    is_interface: bool = False
    is_union: bool = False
    is_input_type: bool = False
    is_enum: bool = False
    is_deprecated: bool = False
    deprecation_reason: Optional[str] = None
    directives: Mapping[str, Mapping[str, Any]] = _directives_field()

    _derived = ("has_arguments", "uses_directives")

    @property
    def has_arguments(self) -> bool:
        return len(self.arguments) > 0

    @property
    def uses_directives(self) -> bool:
        return len(self.directives) > 0


@dataclass(frozen=True)
class Type(_Record):
    """An object type or an input object type."""
    name: str
    description: Optional[str] = None
    fields: tuple[Field, ...] = ()
    interfaces: tuple[str, ...] = ()
    is_input_type: bool = False
    directives: Mapping[str, Mapping[str, Any]] = _directives_field()

    _derived = ("has_fields", "has_interfaces", "uses_directives")

    @property
    def has_fields(self) -> bool:
        return len(self.fields) > 0

    @property
    def has_interfaces(self) -> bool:
        return len(self.interfaces) > 0

    @property
    def uses_directives(self) -> bool:
        return len(self.directives) > 0


@dataclass(frozen=True)
class EnumValue(_Record):
    name: str
    value: Any = None
    description: Optional[str] = None
    is_deprecated: bool = False
    deprecation_reason: Optional[str] = None
    directives: Mapping[str, Mapping[str, Any]] = _directives_field()


@dataclass(frozen=True)
class Enum(_Record):
    name: str
    description: Optional[str] = None
    values: tuple[EnumValue, ...] = ()
    directives: Mapping[str, Mapping[str, Any]] = _directives_field()

    _derived = ("uses_directives",)

    @property
    def uses_directives(self) -> bool:
        return len(self.directives) > 0


@dataclass(frozen=True)
class Union(_Record):
    name: str
    description: Optional[str] = None
    possible_types: tuple[str, ...] = ()
    directives: Mapping[str, Mapping[str, Any]] = _directives_field()

    _derived = ("has_possible_types",)

    @property
    def has_possible_types(self) -> bool:
        return len(self.possible_types) > 0


@dataclass(frozen=True)
class Interface(_Record):
    name: str
    description: Optional[str] = None
    fields: tuple[Field, ...] = ()
    implementing_types: tuple[str, ...] = ()
    directives: Mapping[str, Mapping[str, Any]] = _directives_field()

    _derived = ("has_fields", "has_implementing_types")

    @property
    def has_fields(self) -> bool:
        return len(self.fields) > 0

    @property
    def has_implementing_types(self) -> bool:
        return len(self.implementing_types) > 0


@dataclass(frozen=True)
class Scalar(_Record):
    name: str
    description: Optional[str] = None
    directives: Mapping[str, Mapping[str, Any]] = _directives_field()


@dataclass(frozen=True)
class Directive(_Record):
    """A directive declared by the schema."""
    name: str
    description: Optional[str] = None
    locations: tuple[str, ...] = ()
    arguments: tuple[Argument, ...] = ()
    is_repeatable: bool = False

    _derived = ("has_arguments",)

    @property
    def has_arguments(self) -> bool:
        return len(self.arguments) > 0
