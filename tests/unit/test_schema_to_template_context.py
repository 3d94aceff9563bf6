"""
Unit tests for building the template context from a schema.
"""

import graphene
import pytest
from graphql import build_schema, parse

from codegen_core import TemplateContext, TransformerSet, schema_to_template_context
from codegen_core.exceptions import UnclassifiableTypeError
from codegen_core.observability import EventType, MemoryEventSink
from codegen_core.schema.filtering import filter_types
from codegen_core.schema.registry import TypeRegistry

pytestmark = pytest.mark.unit

KIND_LISTS = ("types", "input_types", "enums", "unions", "scalars", "interfaces")


def _names(records):
    return [record.name for record in records]


def test_every_surviving_type_lands_in_exactly_one_list(library_schema):
    context = schema_to_template_context(library_schema)
    filtered = filter_types(TypeRegistry(library_schema).type_map)

    for name in library_schema.type_map:
        hits = [kind for kind in KIND_LISTS if name in _names(getattr(context, kind))]
        if name in filtered:
            assert len(hits) == 1, name
        else:
            assert hits == [], name


def test_kind_lists(library_schema):
    context = schema_to_template_context(library_schema)

    assert _names(context.types) == ["Query", "Book", "Author"]
    assert _names(context.interfaces) == ["Node"]
    assert _names(context.unions) == ["SearchResult"]
    assert _names(context.enums) == ["Genre"]
    assert _names(context.input_types) == ["BookFilter"]
    assert _names(context.scalars) == ["Date"]
    assert context.raw_schema is library_schema


def test_list_order_follows_declaration_not_alphabet():
    schema = build_schema(
        """
        type Query { ok: Boolean }
        enum Zeta { Z }
        enum Alpha { A }
        enum Mid { M }
        """
    )

    context = schema_to_template_context(schema)

    assert _names(context.enums) == ["Zeta", "Alpha", "Mid"]


def test_introspection_enum_used_by_document_is_included(library_schema):
    documents = [parse('{ __type(name: "Book") { kind } }')]

    context = schema_to_template_context(library_schema, documents)

    assert _names(context.enums) == ["Genre", "__TypeKind"]
    assert "__Type" not in _names(context.types)


def test_introspection_object_in_document_adds_nothing(library_schema):
    documents = [parse("{ __schema { queryType { name } } }")]

    with_docs = schema_to_template_context(library_schema, documents)
    without_docs = schema_to_template_context(library_schema)

    assert with_docs == without_docs


def test_presence_flags_follow_list_length():
    schema = build_schema("type Query { ok: Boolean }")

    context = schema_to_template_context(schema)

    assert context.enums == ()
    assert context.has_enums is False
    assert context.has_types is True
    assert context.has_unions is False
    assert context.has_input_types is False
    assert context.has_scalars is False
    assert context.has_interfaces is False
    assert context.has_defined_directives is True

    schema = build_schema("type Query { ok: Boolean } enum Level { LOW HIGH }")
    assert schema_to_template_context(schema).has_enums is True


def test_context_is_immutable(library_schema):
    context = schema_to_template_context(library_schema)

    assert isinstance(context, TemplateContext)
    with pytest.raises(AttributeError):
        context.has_enums = False
    with pytest.raises(AttributeError):
        context.enums = ()
    with pytest.raises(TypeError):
        context.directives["extra"] = {}


def test_nested_directive_values_are_read_only():
    schema = build_schema(
        """
        directive @link(url: String!) on SCHEMA
        schema @link(url: "https://example.com/spec") { query: Query }
        type Query { old: String @deprecated(reason: "gone") }
        """
    )
    context = schema_to_template_context(schema)
    old_field = context.types[0].fields[0]

    with pytest.raises(TypeError):
        context.directives["link"]["url"] = "changed"
    with pytest.raises(TypeError):
        old_field.directives["deprecated"]["reason"] = "changed"
    with pytest.raises(TypeError):
        old_field.directives["cache"] = {}
    assert context.directives["link"]["url"] == "https://example.com/spec"
    assert old_field.directives["deprecated"]["reason"] == "gone"
    assert context.to_dict()["directives"] == {"link": {"url": "https://example.com/spec"}}


def test_declared_but_unused_directive_does_not_count():
    schema = build_schema(
        """
        directive @cache(ttl: Int) on OBJECT
        type Query { ok: Boolean }
        """
    )

    context = schema_to_template_context(schema)

    assert context.uses_directives is False
    assert "cache" in _names(context.defined_directives)


@pytest.mark.parametrize(
    "sdl",
    [
        "type Query @cache(ttl: 30) { ok: Boolean }",
        "type Query { ok: Boolean @cache(ttl: 30) }",
        "type Query { ok(flag: Boolean @cache(ttl: 1)): Boolean }",
        "type Query { ok: Boolean } enum Level { LOW @cache(ttl: 1) }",
        "type Query { ok: Boolean } input Filter { q: String @cache(ttl: 1) }",
        "type Query { ok: Boolean } extend type Query @cache(ttl: 30)",
        'directive @limit(max: Int @deprecated(reason: "x")) on OBJECT type Query { ok: Boolean }',
    ],
)
def test_applied_directive_sets_uses_directives(sdl):
    declaration = (
        "directive @cache(ttl: Int) on OBJECT | FIELD_DEFINITION | ARGUMENT_DEFINITION"
        " | ENUM_VALUE | INPUT_FIELD_DEFINITION\n"
    )
    schema = build_schema(declaration + sdl)

    assert schema_to_template_context(schema).uses_directives is True


def test_schema_level_directives_are_exposed():
    schema = build_schema(
        """
        directive @link(url: String!) on SCHEMA
        schema @link(url: "https://example.com/spec") { query: Query }
        type Query { ok: Boolean }
        """
    )

    context = schema_to_template_context(schema)

    assert dict(context.directives) == {"link": {"url": "https://example.com/spec"}}
    assert context.uses_directives is True


def test_foreign_type_aborts_construction(library_schema):
    class ForeignEnumType:
        name = "Legacy"

    library_schema.type_map["Legacy"] = ForeignEnumType()
    sink = MemoryEventSink()

    with pytest.raises(UnclassifiableTypeError) as exc_info:
        schema_to_template_context(library_schema, event_sink=sink)

    assert exc_info.value.type_name == "Legacy"
    assert sink.events[-1].event_type == EventType.CLASSIFICATION_FAILED
    assert sink.of_type(EventType.CONTEXT_COMPLETED) == []


def test_transformers_are_called_in_filtered_order(library_schema):
    calls = []

    def record_object(schema, type_def):
        calls.append(type_def.name)
        return type_def.name

    transformers = TransformerSet().replace(object_type=record_object)
    context = schema_to_template_context(library_schema, transformers=transformers)

    assert calls == ["Query", "Book", "Author"]
    assert context.types == ("Query", "Book", "Author")


def test_forced_types_setting_extends_allow_list(library_schema):
    context = schema_to_template_context(
        library_schema, settings={"forced_types": ["__DirectiveLocation", "ID"]}
    )

    assert _names(context.enums) == ["Genre", "__DirectiveLocation"]
    assert "ID" in _names(context.scalars)


def test_specified_directives_can_be_left_out(library_schema):
    context = schema_to_template_context(
        library_schema, settings={"include_specified_directives": False}
    )

    assert _names(context.defined_directives) == ["cache"]


def test_graphene_schema_is_accepted():
    class Episode(graphene.Enum):
        NEWHOPE = 4
        EMPIRE = 5

    class Query(graphene.ObjectType):
        hero = graphene.String(episode=graphene.Argument(Episode))

    context = schema_to_template_context(graphene.Schema(query=Query))

    assert _names(context.types) == ["Query"]
    assert _names(context.enums) == ["Episode"]
    assert context.types[0].fields[0].directives == {}
    assert context.uses_directives is False


def test_graphene_deprecation_counts_as_applied_directive():
    class Query(graphene.ObjectType):
        current = graphene.String()
        old = graphene.String(deprecation_reason="gone")

    graphene_context = schema_to_template_context(graphene.Schema(query=Query))
    sdl_context = schema_to_template_context(
        build_schema('type Query { current: String old: String @deprecated(reason: "gone") }')
    )

    fields = {f.name: f for f in graphene_context.types[0].fields}
    assert fields["old"].directives == {"deprecated": {"reason": "gone"}}
    assert fields["old"].is_deprecated
    assert fields["current"].directives == {}
    assert graphene_context.uses_directives is True
    assert graphene_context.uses_directives == sdl_context.uses_directives


def test_to_dict_for_templates(library_schema):
    data = schema_to_template_context(library_schema).to_dict()

    assert data["has_enums"] is True
    assert data["enums"][0]["name"] == "Genre"
    assert [v["name"] for v in data["enums"][0]["values"]] == ["FANTASY", "HISTORY", "POETRY"]
    assert data["types"][1]["fields"][0]["name"] == "id"
    assert data["raw_schema"] is library_schema
