"""
Shared test fixtures for the code block validation test suite.
"""
import pytest
from graphql import build_schema, introspection_from_schema

from codecheck.config.constants import FACTORY_CALLEE_NAMES, GENERIC_HTML_ELEMENTS, NUMERIC_ATTRIBUTE_NAMES
from codecheck.models.component import WalkerConfig
from codecheck.validations.schema_provider import StaticSchemaProvider


# ==========================================================================
# GraphQL schema
# ==========================================================================

SHOP_SDL = """
type Query {
  shop: Shop!
  product(id: ID!): Product
  products(first: Int!): [Product!]!
}

type Mutation {
  productCreate(title: String!): Product
}

type Shop {
  name: String!
  currencyCode: String!
}

type Product {
  id: ID!
  title: String!
  handle: String!
}
"""


@pytest.fixture(scope="session")
def introspection_document():
    return introspection_from_schema(build_schema(SHOP_SDL))


@pytest.fixture
def schema_provider(introspection_document):
    return StaticSchemaProvider({
        "admin": introspection_document,
        "storefront": {"data": introspection_document},
    })


# ==========================================================================
# Component schemas
# ==========================================================================

@pytest.fixture
def button_schemas():
    return {
        "s-button": {
            "type": "object",
            "properties": {
                "variant": {"type": "string", "enum": ["primary", "secondary"]},
                "disabled": {"type": "boolean"},
            },
        },
        "s-text": {
            "type": "object",
            "properties": {"tone": {"type": "string"}},
        },
    }


@pytest.fixture
def walker_config():
    return WalkerConfig(
        ignored_elements=GENERIC_HTML_ELEMENTS,
        factory_callees=FACTORY_CALLEE_NAMES,
        numeric_attributes=NUMERIC_ATTRIBUTE_NAMES,
    )


# ==========================================================================
# Markdown payloads
# ==========================================================================

@pytest.fixture
def mixed_markdown():
    return (
        "Here is the handler:\n\n"
        "```javascript\n"
        "function f() { return 1; }\n"
        "```\n\n"
        "And the service:\n\n"
        "```rust\n"
        "fn main() {\n"
        "    println!(\"hi\");\n"
        "}\n"
        "```\n\n"
        "And the query:\n\n"
        "```graphql\n"
        "query { shop { name } }\n"
        "```\n"
    )
