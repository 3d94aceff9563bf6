"""
Selection of the schema types that reach the template context.
"""

from typing import Iterable, Mapping, TypeVar

from ..defaults import GRAPHQL_PRIMITIVES, RESERVED_PREFIX

T = TypeVar("T")


def is_reserved_name(name: str) -> bool:
    return name.startswith(RESERVED_PREFIX)


def is_primitive_name(name: str) -> bool:
    return name in GRAPHQL_PRIMITIVES


def filter_types(type_map: Mapping[str, T], allow_list: Iterable[str] = ()) -> dict[str, T]:
    """
    Drop primitive scalars and reserved ``__`` names unless allow-listed.

    The result keeps the iteration order of ``type_map``.
    """
    allowed = set(allow_list)
    return {
        name: type_def
        for name, type_def in type_map.items()
        if name in allowed or (not is_primitive_name(name) and not is_reserved_name(name))
    }
