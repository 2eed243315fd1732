from .errors import MalformedRequestError


class SelectionNode(object):
    def __init__(self, name, arguments=None, children=None, alias=None):
        if arguments is None:
            arguments = {}
        if children is None:
            children = ()

        self.name = name
        self.arguments = arguments
        self.children = tuple(children)
        self.alias = alias

    @property
    def key(self):
        if self.alias is None:
            return self.name
        else:
            return self.alias

    def __eq__(self, other):
        if isinstance(other, SelectionNode):
            return (
                self.name == other.name and
                self.arguments == other.arguments and
                self.children == other.children and
                self.alias == other.alias
            )
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __repr__(self):
        return "SelectionNode(name={!r}, arguments={!r}, children={!r}, alias={!r})".format(
            self.name,
            self.arguments,
            self.children,
            self.alias,
        )


def select(name, *children, args=None, alias=None):
    return SelectionNode(name, arguments=args, children=children, alias=alias)


class Variable(object):
    def __init__(self, name):
        self.name = name

    def __eq__(self, other):
        if isinstance(other, Variable):
            return self.name == other.name
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.name)

    def __repr__(self):
        return "Variable(name={!r})".format(self.name)


_operations = ("query", "mutation")


class Request(object):
    def __init__(self, operation, selection, variables=None, operation_type_name=None):
        if variables is None:
            variables = {}

        self.operation = operation
        self.selection = selection
        self.variables = variables
        self.operation_type_name = operation_type_name

    def validate(self):
        if self.operation not in _operations:
            raise MalformedRequestError("unsupported operation: {!r}".format(self.operation))

        if isinstance(self.selection, (str, bytes)) or not _is_iterable(self.selection):
            raise MalformedRequestError("selection must be a sequence of selection nodes")

        self.selection = tuple(self.selection)
        for node in self.selection:
            _validate_node(node)

        if not isinstance(self.variables, dict):
            raise MalformedRequestError("variables must be a mapping")

    def __repr__(self):
        return "Request(operation={!r}, selection={!r}, variables={!r})".format(
            self.operation,
            self.selection,
            self.variables,
        )


def query(*selection, variables=None):
    return Request("query", selection, variables=variables)


def mutation(*selection, variables=None):
    return Request("mutation", selection, variables=variables)


def _validate_node(node):
    if not isinstance(node, SelectionNode):
        raise MalformedRequestError("expected selection node but was {!r}".format(node))

    if not isinstance(node.name, str) or not node.name:
        raise MalformedRequestError("selection node has invalid name: {!r}".format(node.name))

    if not isinstance(node.arguments, dict):
        raise MalformedRequestError("arguments of {} must be a mapping".format(node.name))

    for child in node.children:
        _validate_node(child)


def _is_iterable(value):
    try:
        iter(value)
    except TypeError:
        return False
    else:
        return True
