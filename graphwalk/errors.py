class GraphError(Exception):
    pass


class UnknownTypeError(GraphError):
    def __init__(self, type_name):
        super().__init__("unknown type: {}".format(type_name))
        self.type_name = type_name


class UnknownFieldError(GraphError):
    def __init__(self, type_name, field_name):
        super().__init__("{} has no field {}".format(type_name, field_name))
        self.type_name = type_name
        self.field_name = field_name


class DuplicateTypeError(GraphError):
    def __init__(self, type_name):
        super().__init__("type is already registered: {}".format(type_name))
        self.type_name = type_name


class InvalidTypeReferenceError(GraphError):
    pass


class MissingArgumentError(GraphError):
    def __init__(self, field_name, argument_name):
        super().__init__("field {} is missing required argument {}".format(field_name, argument_name))
        self.field_name = field_name
        self.argument_name = argument_name


class InvalidValueError(GraphError):
    pass


class SelectionShapeError(GraphError):
    pass


class NonNullViolationError(GraphError):
    pass


class UnresolvedReferenceError(GraphError):
    pass


class ResolverExecutionError(GraphError):
    def __init__(self, type_name, field_name, original_error):
        super().__init__("error resolving {}.{}: {}".format(type_name, field_name, original_error))
        self.type_name = type_name
        self.field_name = field_name
        self.original_error = original_error


class MissingResolverError(GraphError):
    def __init__(self, type_name, field_name):
        super().__init__("Resolver missing for field {}.{}".format(type_name, field_name))
        self.type_name = type_name
        self.field_name = field_name


class MalformedRequestError(GraphError):
    pass


class EntityNotFoundError(GraphError):
    def __init__(self, collection_name, identifier):
        super().__init__("{} has no entity with identifier {!r}".format(collection_name, identifier))
        self.collection_name = collection_name
        self.identifier = identifier
