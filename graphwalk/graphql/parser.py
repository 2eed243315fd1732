from graphql.language import ast as graphql_ast, parser as graphql_parser

from ..errors import MalformedRequestError
from ..query import Request, SelectionNode, Variable


def document_text_to_request(document_text, variables=None, operation_name=None):
    document = graphql_parser.parse(document_text)
    return document_to_request(document, variables=variables, operation_name=operation_name)


def document_to_request(document, variables=None, operation_name=None):
    if variables is None:
        variables = {}

    operation = _find_operation(document, operation_name)

    if operation.operation == graphql_ast.OperationType.SUBSCRIPTION:
        raise MalformedRequestError("unsupported operation: {}".format(operation.operation.value))

    variables = _read_variables(operation, variables)

    fragments = {}
    for definition in document.definitions:
        if isinstance(definition, graphql_ast.FragmentDefinitionNode):
            fragments[definition.name.value] = definition

    parser = Parser(fragments=fragments, variables=variables)
    selection = parser.read_selection_set(operation.selection_set)

    return Request(operation.operation.value, selection, variables=variables)


def _find_operation(document, operation_name):
    operations = [
        definition
        for definition in document.definitions
        if isinstance(definition, graphql_ast.OperationDefinitionNode)
    ]

    if operation_name is None:
        if len(operations) == 1:
            return operations[0]
        elif operations:
            raise MalformedRequestError("operation name is required when document has multiple operations")
        else:
            raise MalformedRequestError("document has no operations")

    for operation in operations:
        if operation.name is not None and operation.name.value == operation_name:
            return operation

    raise MalformedRequestError("unknown operation: {}".format(operation_name))


def _read_variables(operation, variables):
    result = {}

    for variable_definition in operation.variable_definitions or ():
        name = variable_definition.variable.name.value
        if variable_definition.default_value is not None:
            result[name] = read_value(variable_definition.default_value)

    result.update(variables)
    return result


class Parser(object):
    def __init__(self, fragments, variables):
        self._fragments = fragments
        self._variables = variables

    def read_selection_set(self, selection_set, visited_fragments=frozenset()):
        if selection_set is None:
            return []

        nodes = []

        for selection in selection_set.selections:
            if not self._should_include_selection(selection):
                continue

            elif isinstance(selection, graphql_ast.FieldNode):
                nodes.append(self._read_field(selection, visited_fragments))

            elif isinstance(selection, graphql_ast.InlineFragmentNode):
                nodes.extend(self.read_selection_set(selection.selection_set, visited_fragments))

            elif isinstance(selection, graphql_ast.FragmentSpreadNode):
                name = selection.name.value
                if name in visited_fragments:
                    raise MalformedRequestError("fragment {} spreads itself".format(name))

                fragment = self._fragments.get(name)
                if fragment is None:
                    raise MalformedRequestError("unknown fragment: {}".format(name))

                nodes.extend(self.read_selection_set(fragment.selection_set, visited_fragments | {name}))

            else:
                raise MalformedRequestError("unhandled selection type: {}".format(type(selection).__name__))

        return nodes

    def _read_field(self, graphql_field, visited_fragments):
        arguments = {
            argument.name.value: read_value(argument.value)
            for argument in graphql_field.arguments or ()
        }

        return SelectionNode(
            graphql_field.name.value,
            arguments=arguments,
            children=self.read_selection_set(graphql_field.selection_set, visited_fragments),
            alias=None if graphql_field.alias is None else graphql_field.alias.value,
        )

    def _should_include_selection(self, selection):
        for directive in selection.directives or ():
            name = directive.name.value

            if name == "include":
                if self._read_condition(directive) is False:
                    return False

            elif name == "skip":
                if self._read_condition(directive) is True:
                    return False

            else:
                raise MalformedRequestError("unknown directive: {}".format(name))

        return True

    def _read_condition(self, directive):
        for argument in directive.arguments or ():
            if argument.name.value == "if":
                value = read_value(argument.value)
                if isinstance(value, Variable):
                    value = self._variables.get(value.name)
                return value

        raise MalformedRequestError("directive {} requires argument if".format(directive.name.value))


def read_value(value):
    if isinstance(value, graphql_ast.BooleanValueNode):
        return value.value
    elif isinstance(value, graphql_ast.EnumValueNode):
        return value.value
    elif isinstance(value, graphql_ast.FloatValueNode):
        return float(value.value)
    elif isinstance(value, graphql_ast.IntValueNode):
        return int(value.value)
    elif isinstance(value, graphql_ast.NullValueNode):
        return None
    elif isinstance(value, graphql_ast.ListValueNode):
        return [
            read_value(element)
            for element in value.values
        ]
    elif isinstance(value, graphql_ast.ObjectValueNode):
        return {
            field_input.name.value: read_value(field_input.value)
            for field_input in value.fields
        }
    elif isinstance(value, graphql_ast.StringValueNode):
        return value.value
    elif isinstance(value, graphql_ast.VariableNode):
        return Variable(value.name.value)
    else:
        raise MalformedRequestError("unhandled value: {}".format(type(value).__name__))
