"""
Directives applied to schema elements.

Results are read-only mappings so records and the template context built from
them cannot be altered by templates.
"""

from types import MappingProxyType
from typing import Any, Mapping

from graphql import GraphQLSchema, get_directive_values

AppliedDirectives = Mapping[str, Mapping[str, Any]]

NO_DIRECTIVES: AppliedDirectives = MappingProxyType({})


def _ast_nodes(element: Any) -> list[Any]:
    nodes = []
    ast_node = getattr(element, "ast_node", None)
    if ast_node is not None:
        nodes.append(ast_node)
    nodes.extend(getattr(element, "extension_ast_nodes", None) or ())
    return nodes


def freeze_directives(directives: Mapping[str, Mapping[str, Any]]) -> AppliedDirectives:
    """Return ``directives`` with the outer map and every argument map read-only."""
    if not directives:
        return NO_DIRECTIVES
    return MappingProxyType(
        {name: MappingProxyType(dict(args)) for name, args in directives.items()}
    )


def get_directives(schema: GraphQLSchema, element: Any) -> AppliedDirectives:
    """
    Map directive name to argument values for every directive applied to ``element``.

    ``element`` is the schema itself, a named type, a field, an argument, an
    input field or an enum value. Directives are read from the element's SDL
    AST nodes. Elements built in code (graphene, ``GraphQLField(...)``) have
    no AST nodes; for those a ``deprecation_reason`` is reported as an applied
    ``@deprecated``, the way ``print_schema`` renders it.
    """
    all_nodes = _ast_nodes(element)
    if not all_nodes:
        reason = getattr(element, "deprecation_reason", None)
        if reason is not None:
            return freeze_directives({"deprecated": {"reason": reason}})
        return NO_DIRECTIVES

    nodes = [node for node in all_nodes if getattr(node, "directives", None)]
    applied: dict[str, dict[str, Any]] = {}
    for directive_def in schema.directives:
        for node in nodes:
            values = get_directive_values(directive_def, node)
            if values is not None:
                applied[directive_def.name] = values
                break
    return freeze_directives(applied)
