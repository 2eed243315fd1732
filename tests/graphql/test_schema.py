from precisely import assert_that, contains_exactly, equal_to, has_attrs
import pytest

import graphwalk as g
from graphwalk.graphql.schema import parse_schema


def test_object_types_are_converted_with_fields_and_arguments():
    schema_document = parse_schema("""
        type Person {
            id: ID!
            name: String
            friends(limit: Int = 10): [Person!]!
        }
    """)

    Person, = schema_document.types
    assert_that(Person, has_attrs(name="Person", kind=g.TypeKind.OBJECT))
    assert_that([field.name for field in Person.fields], contains_exactly("id", "name", "friends"))
    assert_that(Person.fields.id.type, equal_to(g.NonNullType(g.ID)))
    assert_that(Person.fields.friends.type, equal_to(g.NonNullType(g.ListType(g.NonNullType("Person")))))
    assert_that(Person.fields.friends.params.limit, has_attrs(type=g.NamedType("Int"), default=10))


def test_input_types_are_converted():
    schema_document = parse_schema("""
        input ProductInput {
            name: String!
            price: Float = 0
        }
    """)

    ProductInput, = schema_document.types
    assert_that(ProductInput, has_attrs(name="ProductInput", kind=g.TypeKind.INPUT))
    assert_that(ProductInput.fields.name, has_attrs(type=g.NonNullType(g.String), has_default=False))
    assert_that(ProductInput.fields.price, has_attrs(type=g.NamedType("Float"), default=0))


def test_custom_scalars_are_converted():
    schema_document = parse_schema("""
        scalar Date
    """)

    Date, = schema_document.types
    assert_that(Date, has_attrs(name="Date", kind=g.TypeKind.SCALAR))
    assert_that(Date.coerce("2020-01-01"), equal_to("2020-01-01"))


def test_enums_are_converted_to_scalars_accepting_their_values():
    schema_document = parse_schema("""
        enum Colour { RED GREEN }
    """)

    Colour, = schema_document.types
    assert_that(Colour.coerce("RED"), equal_to("RED"))
    pytest.raises(g.InvalidValueError, lambda: Colour.coerce("BLUE"))


def test_root_types_default_to_query_and_mutation():
    schema_document = parse_schema("""
        type Query { value: String }
    """)

    assert_that(schema_document, has_attrs(query_type_name="Query", mutation_type_name="Mutation"))


def test_schema_definition_sets_root_type_names():
    schema_document = parse_schema("""
        schema {
            query: Root
            mutation: Writes
        }

        type Root { value: String }
        type Writes { write: String }
    """)

    assert_that(schema_document, has_attrs(query_type_name="Root", mutation_type_name="Writes"))


def test_schema_document_creates_engine():
    schema_document = parse_schema("""
        schema { query: Root }
        type Root { value: String }
    """)

    engine = schema_document.create_engine({"Root": {"value": lambda root, args: "resolved"}})
    result = engine.create_executor().execute(g.query(g.select("value")))

    assert_that(result.data, equal_to({"value": "resolved"}))


def test_unsupported_definitions_raise_error():
    error = pytest.raises(g.GraphError, lambda: parse_schema("""
        union SearchResult = Person | Product
    """))

    assert_that(str(error.value), equal_to("unsupported definition: UnionTypeDefinitionNode"))
