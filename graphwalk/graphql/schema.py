from graphql.language import ast as graphql_ast, parser as graphql_parser

from .. import schema
from ..core import define_engine
from ..errors import GraphError, InvalidValueError
from .parser import read_value


class SchemaDocument(object):
    def __init__(self, types, query_type_name, mutation_type_name):
        self.types = types
        self.query_type_name = query_type_name
        self.mutation_type_name = mutation_type_name

    def create_engine(self, resolvers=None):
        return define_engine(
            self.types,
            resolvers,
            query_type_name=self.query_type_name,
            mutation_type_name=self.mutation_type_name,
        )


def parse_schema(document_text):
    return document_to_schema(graphql_parser.parse(document_text))


def document_to_schema(document):
    types = []
    query_type_name = "Query"
    mutation_type_name = "Mutation"

    for definition in document.definitions:
        if isinstance(definition, graphql_ast.ObjectTypeDefinitionNode):
            types.append(schema.ObjectType(
                definition.name.value,
                fields=[_read_field(field) for field in definition.fields or ()],
            ))

        elif isinstance(definition, graphql_ast.InputObjectTypeDefinitionNode):
            types.append(schema.InputObjectType(
                definition.name.value,
                fields=[_read_input_field(field) for field in definition.fields or ()],
            ))

        elif isinstance(definition, graphql_ast.ScalarTypeDefinitionNode):
            types.append(schema.ScalarType(definition.name.value))

        elif isinstance(definition, graphql_ast.EnumTypeDefinitionNode):
            types.append(_enum_scalar_type(
                definition.name.value,
                [value.name.value for value in definition.values or ()],
            ))

        elif isinstance(definition, graphql_ast.SchemaDefinitionNode):
            for operation_type in definition.operation_types:
                if operation_type.operation == graphql_ast.OperationType.QUERY:
                    query_type_name = operation_type.type.name.value
                elif operation_type.operation == graphql_ast.OperationType.MUTATION:
                    mutation_type_name = operation_type.type.name.value

        else:
            raise GraphError("unsupported definition: {}".format(type(definition).__name__))

    return SchemaDocument(
        types=types,
        query_type_name=query_type_name,
        mutation_type_name=mutation_type_name,
    )


def _read_field(graphql_field):
    return schema.field(
        graphql_field.name.value,
        type=read_type(graphql_field.type),
        params=[
            schema.param(argument.name.value, type=read_type(argument.type), **_read_default(argument))
            for argument in graphql_field.arguments or ()
        ],
    )


def _read_input_field(graphql_field):
    return schema.input_field(
        graphql_field.name.value,
        type=read_type(graphql_field.type),
        **_read_default(graphql_field),
    )


def _read_default(input_value):
    if input_value.default_value is None:
        return {}
    else:
        return {"default": read_value(input_value.default_value)}


def read_type(type_node):
    if isinstance(type_node, graphql_ast.NonNullTypeNode):
        return schema.NonNullType(read_type(type_node.type))
    elif isinstance(type_node, graphql_ast.ListTypeNode):
        return schema.ListType(read_type(type_node.type))
    elif isinstance(type_node, graphql_ast.NamedTypeNode):
        return schema.NamedType(type_node.name.value)
    else:
        raise GraphError("unhandled type: {}".format(type(type_node).__name__))


def _enum_scalar_type(name, values):
    allowed_values = frozenset(values)

    def coerce(value):
        if value in allowed_values:
            return value
        else:
            raise InvalidValueError("{!r} is not a value of {}".format(value, name))

    return schema.ScalarType(name, coerce=coerce)
