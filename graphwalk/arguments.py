from collections.abc import Mapping

from . import schema
from .errors import InvalidValueError, MissingArgumentError
from .query import Variable


_absent = object()


class ArgumentBinder(object):
    def __init__(self, registry):
        self._registry = registry

    def bind(self, field, supplied_arguments, variables=None):
        if variables is None:
            variables = {}

        bound = {}

        for param in field.params:
            value = self._supplied_value(supplied_arguments, param.name, variables)

            if value is _absent:
                if param.has_default:
                    value = param.default
                elif schema.is_non_null(param.type):
                    raise MissingArgumentError(field.name, param.name)
                else:
                    value = None

            if value is None and schema.is_non_null(param.type):
                raise MissingArgumentError(field.name, param.name)

            bound[param.name] = self.coerce(
                value,
                param.type,
                variables=variables,
                location="argument {} of field {}".format(param.name, field.name),
            )

        return bound

    def _supplied_value(self, supplied_arguments, name, variables):
        if name not in supplied_arguments:
            return _absent

        value = supplied_arguments[name]
        if isinstance(value, Variable):
            return variables.get(value.name, _absent)
        else:
            return value

    def coerce(self, value, type_ref, variables, location):
        if isinstance(value, Variable):
            value = variables.get(value.name)

        if value is None:
            if schema.is_non_null(type_ref):
                raise InvalidValueError("{} cannot be null".format(location))
            return None

        type_ref = schema.strip_non_null(type_ref)

        if isinstance(type_ref, schema.ListType):
            if isinstance(value, (list, tuple)):
                return [
                    self.coerce(element, type_ref.element_type, variables=variables, location=location)
                    for element in value
                ]
            else:
                return [self.coerce(value, type_ref.element_type, variables=variables, location=location)]

        type_def = self._registry.lookup(type_ref.name)

        if type_def.kind == schema.TypeKind.INPUT:
            return self._coerce_input_object(value, type_def, variables=variables, location=location)
        else:
            try:
                return type_def.coerce(value)
            except InvalidValueError as error:
                raise InvalidValueError("{}: {}".format(location, error))

    # Nested input values are not validated beyond substituting variables and
    # filling in declared defaults.
    def _coerce_input_object(self, value, type_def, variables, location):
        if not isinstance(value, Mapping):
            raise InvalidValueError("{}: expected {} but was {!r}".format(location, type_def.name, value))

        result = {
            key: _substitute_variables(field_value, variables)
            for key, field_value in value.items()
        }

        for field in type_def.fields:
            if field.name not in result and field.has_default:
                result[field.name] = field.default

        return result


def _substitute_variables(value, variables):
    if isinstance(value, Variable):
        return variables.get(value.name)
    elif isinstance(value, Mapping):
        return {
            key: _substitute_variables(element, variables)
            for key, element in value.items()
        }
    elif isinstance(value, (list, tuple)):
        return [
            _substitute_variables(element, variables)
            for element in value
        ]
    else:
        return value
