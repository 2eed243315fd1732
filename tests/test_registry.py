from precisely import assert_that, equal_to, has_attrs
import pytest

import graphwalk as g
from graphwalk.registry import TypeRegistry


def test_builtin_scalars_are_registered():
    registry = TypeRegistry()

    for name in ("ID", "String", "Int", "Float", "Boolean"):
        assert_that(registry.lookup(name).kind, equal_to(g.TypeKind.SCALAR))


def test_registered_type_can_be_looked_up():
    registry = TypeRegistry()
    Book = g.ObjectType("Book", fields=(g.field("title", g.String), ))

    registry.register(Book)

    assert_that(registry.lookup("Book"), equal_to(Book))


def test_when_type_is_registered_twice_then_error_is_raised():
    registry = TypeRegistry()
    registry.register(g.ObjectType("Book", fields=()))

    error = pytest.raises(g.DuplicateTypeError, lambda: registry.register(g.ObjectType("Book", fields=())))

    assert_that(str(error.value), equal_to("type is already registered: Book"))


def test_when_type_is_unknown_then_lookup_raises_error():
    registry = TypeRegistry()

    error = pytest.raises(g.UnknownTypeError, lambda: registry.lookup("Book"))

    assert_that(error.value, has_attrs(type_name="Book"))


def test_resolve_field_type_returns_field_definition():
    registry = TypeRegistry()
    registry.register(g.ObjectType("Book", fields=(
        g.field("title", g.NonNullType(g.String)),
    )))

    field = registry.resolve_field_type("Book", "title")

    assert_that(field, has_attrs(name="title", type=g.NonNullType(g.String)))


def test_when_field_is_unknown_then_resolve_field_type_raises_error():
    registry = TypeRegistry()
    registry.register(g.ObjectType("Book", fields=()))

    error = pytest.raises(g.UnknownFieldError, lambda: registry.resolve_field_type("Book", "title"))

    assert_that(error.value, has_attrs(type_name="Book", field_name="title"))


def test_register_all_allows_types_to_refer_to_each_other():
    registry = TypeRegistry()

    registry.register_all([
        g.ObjectType("Book", fields=(g.field("author", "Author"), )),
        g.ObjectType("Author", fields=(g.field("books", g.ListType("Book")), )),
    ])

    assert_that(registry.lookup_ref(registry.resolve_field_type("Author", "books").type).name, equal_to("Book"))


def test_when_field_refers_to_undeclared_type_then_register_all_raises_error():
    registry = TypeRegistry()

    pytest.raises(g.UnknownTypeError, lambda: registry.register_all([
        g.ObjectType("Book", fields=(g.field("author", "Author"), )),
    ]))


def test_input_type_cannot_be_used_as_field_type():
    registry = TypeRegistry()

    error = pytest.raises(g.InvalidTypeReferenceError, lambda: registry.register_all([
        g.InputObjectType("BookInput", fields=(g.input_field("title", g.String), )),
        g.ObjectType("Query", fields=(g.field("book", "BookInput"), )),
    ]))

    assert_that(str(error.value), equal_to("Query.book cannot have type BookInput of kind INPUT"))


def test_object_type_cannot_be_used_as_argument_type():
    registry = TypeRegistry()

    error = pytest.raises(g.InvalidTypeReferenceError, lambda: registry.register_all([
        g.ObjectType("Book", fields=(g.field("title", g.String), )),
        g.ObjectType("Mutation", fields=(
            g.field("createBook", "Book", params=(g.param("book", g.NonNullType("Book")), )),
        )),
    ]))

    assert_that(str(error.value), equal_to("Mutation.createBook(book) cannot have type Book! of kind OBJECT"))


def test_object_type_cannot_be_used_as_input_field_type():
    registry = TypeRegistry()

    pytest.raises(g.InvalidTypeReferenceError, lambda: registry.register_all([
        g.ObjectType("Book", fields=(g.field("title", g.String), )),
        g.InputObjectType("BookInput", fields=(g.input_field("book", "Book"), )),
    ]))


def test_root_type_names_default_to_query_and_mutation():
    registry = TypeRegistry()

    assert_that(registry.root_type_name("query"), equal_to("Query"))
    assert_that(registry.root_type_name("mutation"), equal_to("Mutation"))


def test_root_type_names_can_be_configured():
    registry = TypeRegistry(query_type_name="Root", mutation_type_name="Writes")

    assert_that(registry.root_type_name("query"), equal_to("Root"))
    assert_that(registry.root_type_name("mutation"), equal_to("Writes"))
