from . import schema
from .errors import (
    DuplicateTypeError,
    InvalidTypeReferenceError,
    MalformedRequestError,
    UnknownFieldError,
    UnknownTypeError,
)


class TypeRegistry(object):
    def __init__(self, query_type_name="Query", mutation_type_name="Mutation"):
        self.query_type_name = query_type_name
        self.mutation_type_name = mutation_type_name
        self._types = {}

        for scalar_type in schema.builtin_scalars:
            self.register(scalar_type)

    def register(self, type_def):
        if type_def.name in self._types:
            raise DuplicateTypeError(type_def.name)

        self._types[type_def.name] = type_def

    def register_all(self, type_defs):
        for type_def in type_defs:
            self.register(type_def)

        self.validate()

    def lookup(self, type_name):
        type_def = self._types.get(type_name)
        if type_def is None:
            raise UnknownTypeError(type_name)
        else:
            return type_def

    def resolve_field_type(self, type_name, field_name):
        field = self.lookup(type_name).fields.get(field_name)
        if field is None:
            raise UnknownFieldError(type_name, field_name)
        else:
            return field

    def lookup_ref(self, type_ref):
        return self.lookup(schema.to_element_type(type_ref).name)

    def root_type_name(self, operation):
        if operation == "query":
            return self.query_type_name
        elif operation == "mutation":
            return self.mutation_type_name
        else:
            raise MalformedRequestError("unsupported operation: {}".format(operation))

    def validate(self):
        for type_def in self._types.values():
            if type_def.kind == schema.TypeKind.OBJECT:
                for field in type_def.fields:
                    self._check_ref(
                        "{}.{}".format(type_def.name, field.name),
                        field.type,
                        allowed_kinds=(schema.TypeKind.OBJECT, schema.TypeKind.SCALAR),
                    )
                    for param in field.params:
                        self._check_ref(
                            "{}.{}({})".format(type_def.name, field.name, param.name),
                            param.type,
                            allowed_kinds=(schema.TypeKind.INPUT, schema.TypeKind.SCALAR),
                        )

            elif type_def.kind == schema.TypeKind.INPUT:
                for field in type_def.fields:
                    self._check_ref(
                        "{}.{}".format(type_def.name, field.name),
                        field.type,
                        allowed_kinds=(schema.TypeKind.INPUT, schema.TypeKind.SCALAR),
                    )

    def _check_ref(self, location, type_ref, allowed_kinds):
        referenced_type = self.lookup_ref(type_ref)
        if referenced_type.kind not in allowed_kinds:
            raise InvalidTypeReferenceError("{} cannot have type {} of kind {}".format(
                location,
                type_ref,
                referenced_type.kind.value,
            ))

    def __contains__(self, type_name):
        return type_name in self._types

    def __iter__(self):
        return iter(self._types.values())
