from precisely import assert_that, contains_exactly, equal_to, has_attrs
import pytest

import graphwalk as g
from graphwalk.graphql.parser import document_text_to_request


def test_simple_query_is_converted_to_request():
    request = document_text_to_request("""
        query {
            one
        }
    """)

    assert_that(request, has_attrs(
        operation="query",
        selection=contains_exactly(g.select("one")),
    ))


def test_simple_mutation_is_converted_to_request():
    request = document_text_to_request("""
        mutation {
            createProduct(product: {name: "example"}) { id }
        }
    """)

    assert_that(request, has_attrs(
        operation="mutation",
        selection=contains_exactly(
            g.select("createProduct", g.select("id"), args={"product": {"name": "example"}}),
        ),
    ))


def test_nested_fields_are_converted_to_children():
    request = document_text_to_request("""
        {
            person(id: 1) {
                name
                friend { name }
            }
        }
    """)

    assert_that(request.selection, contains_exactly(
        g.select(
            "person",
            g.select("name"),
            g.select("friend", g.select("name")),
            args={"id": 1},
        ),
    ))


def test_aliases_are_read():
    request = document_text_to_request("""
        {
            jen: person(id: 1) { fullName: name }
        }
    """)

    assert_that(request.selection, contains_exactly(
        g.select("person", g.select("name", alias="fullName"), args={"id": 1}, alias="jen"),
    ))


def test_literal_values_are_read():
    request = document_text_to_request("""
        {
            value(int: 1, float: 1.5, string: "one", boolean: true, null: null, enum: RED, list: [1, 2], object: {a: {b: 1}})
        }
    """)

    assert_that(request.selection[0].arguments, equal_to({
        "int": 1,
        "float": 1.5,
        "string": "one",
        "boolean": True,
        "null": None,
        "enum": "RED",
        "list": [1, 2],
        "object": {"a": {"b": 1}},
    }))


def test_variables_are_kept_as_references_and_defaults_are_applied():
    request = document_text_to_request(
        """
            query ($id: ID!, $limit: Int = 10) {
                person(id: $id) { name }
                people(limit: $limit) { name }
            }
        """,
        variables={"id": 2},
    )

    assert_that(request.selection[0].arguments, equal_to({"id": g.Variable("id")}))
    assert_that(request.variables, equal_to({"id": 2, "limit": 10}))


def test_supplied_variables_override_defaults():
    request = document_text_to_request(
        """
            query ($limit: Int = 10) {
                people(limit: $limit) { name }
            }
        """,
        variables={"limit": 5},
    )

    assert_that(request.variables, equal_to({"limit": 5}))


def test_fragments_are_flattened_into_selection():
    request = document_text_to_request("""
        {
            person(id: 1) {
                ...PersonName
                ... on Person { id }
            }
        }

        fragment PersonName on Person {
            name
        }
    """)

    assert_that(request.selection, contains_exactly(
        g.select("person", g.select("name"), g.select("id"), args={"id": 1}),
    ))


def test_unknown_fragment_is_malformed_request():
    pytest.raises(g.MalformedRequestError, lambda: document_text_to_request("""
        {
            person(id: 1) { ...PersonName }
        }
    """))


def test_recursive_fragments_are_malformed_request():
    error = pytest.raises(g.MalformedRequestError, lambda: document_text_to_request("""
        {
            person(id: 1) { ...PersonFriend }
        }

        fragment PersonFriend on Person {
            friend { ...PersonFriend }
        }
    """))

    assert_that(str(error.value), equal_to("fragment PersonFriend spreads itself"))


def test_skip_and_include_directives_are_evaluated():
    request = document_text_to_request(
        """
            query ($yes: Boolean!, $no: Boolean!) {
                included: value @include(if: $yes)
                excluded: value @include(if: $no)
                skipped: value @skip(if: true)
                kept: value @skip(if: false)
            }
        """,
        variables={"yes": True, "no": False},
    )

    assert_that(request.selection, contains_exactly(
        g.select("value", alias="included"),
        g.select("value", alias="kept"),
    ))


def test_unknown_directive_is_malformed_request():
    error = pytest.raises(g.MalformedRequestError, lambda: document_text_to_request("""
        {
            value @cached
        }
    """))

    assert_that(str(error.value), equal_to("unknown directive: cached"))


def test_unknown_directive_with_condition_is_malformed_request():
    error = pytest.raises(g.MalformedRequestError, lambda: document_text_to_request("""
        {
            value @cached(if: true)
        }
    """))

    assert_that(str(error.value), equal_to("unknown directive: cached"))


def test_include_directive_without_condition_is_malformed_request():
    error = pytest.raises(g.MalformedRequestError, lambda: document_text_to_request("""
        {
            value @include
        }
    """))

    assert_that(str(error.value), equal_to("directive include requires argument if"))


def test_operation_is_selected_by_name():
    document_text = """
        query First { one }
        query Second { two }
    """

    request = document_text_to_request(document_text, operation_name="Second")

    assert_that(request.selection, contains_exactly(g.select("two")))


def test_when_document_has_multiple_operations_then_operation_name_is_required():
    document_text = """
        query First { one }
        query Second { two }
    """

    pytest.raises(g.MalformedRequestError, lambda: document_text_to_request(document_text))


def test_subscriptions_are_unsupported():
    error = pytest.raises(g.MalformedRequestError, lambda: document_text_to_request("""
        subscription { events { id } }
    """))

    assert_that(str(error.value), equal_to("unsupported operation: subscription"))
