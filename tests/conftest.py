import django
import pytest
from django.conf import settings
from graphql import build_schema


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")
    if not settings.configured:
        settings.configure(
            GRAPHQL_CODEGEN_CORE={},
            LOGGING_CONFIG=None,
        )
        django.setup()


LIBRARY_SDL = """
directive @cache(ttl: Int) on OBJECT | FIELD_DEFINITION

type Query {
  node(id: ID!): Node
  books(first: Int = 10, genre: Genre): [Book!]!
  search(term: String!): [SearchResult]
}

interface Node {
  id: ID!
}

type Book implements Node {
  id: ID!
  title: String!
  isbn: String @deprecated(reason: "Use identifiers")
  tags: [[String!]]
  genre: Genre
  published: Date
}

type Author implements Node {
  id: ID!
  name: String
  books: [Book!]
}

union SearchResult = Book | Author

enum Genre {
  FANTASY
  HISTORY
  POETRY
}

input BookFilter {
  title: String
  genres: [Genre!]
}

scalar Date
"""


@pytest.fixture
def library_schema():
    return build_schema(LIBRARY_SDL)
