import enum

from .errors import GraphError, InvalidValueError, UnknownFieldError


_undefined = object()


class TypeKind(enum.Enum):
    OBJECT = "OBJECT"
    INPUT = "INPUT"
    SCALAR = "SCALAR"


class ScalarType(object):
    kind = TypeKind.SCALAR
    fields = ()

    def __init__(self, name, coerce=None, serialize=None):
        if coerce is None:
            coerce = _identity
        if serialize is None:
            serialize = coerce

        self.name = name
        self._coerce = coerce
        self._serialize = serialize

    def __repr__(self):
        return "ScalarType(name={!r})".format(self.name)

    def __str__(self):
        return self.name

    def coerce(self, value):
        return self._coerce(value)

    def serialize(self, value):
        return self._serialize(value)


def _identity(value):
    return value


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _coerce_boolean(value):
    if isinstance(value, bool):
        return value
    else:
        raise _coercion_error(value, "Boolean")


Boolean = ScalarType("Boolean", coerce=_coerce_boolean)


def _coerce_float(value):
    if isinstance(value, float):
        return value
    elif _is_int(value):
        coerced = float(value)
        if coerced == value:
            return coerced

    raise _coercion_error(value, "Float")


Float = ScalarType("Float", coerce=_coerce_float)


def _coerce_int(value):
    if _is_int(value):
        return value
    else:
        raise _coercion_error(value, "Int")


Int = ScalarType("Int", coerce=_coerce_int)


def _coerce_string(value):
    if isinstance(value, str):
        return value
    else:
        raise _coercion_error(value, "String")


String = ScalarType("String", coerce=_coerce_string)


# Identifiers keep their original representation so that stored integer
# identifiers compare equal to integer arguments.
def _coerce_id(value):
    if isinstance(value, str) or _is_int(value):
        return value
    else:
        raise _coercion_error(value, "ID")


ID = ScalarType("ID", coerce=_coerce_id)


builtin_scalars = (ID, String, Int, Float, Boolean)


class ObjectType(object):
    kind = TypeKind.OBJECT

    def __init__(self, name, fields):
        self.name = name
        self.fields = Fields(name, fields)

    def __repr__(self):
        return "ObjectType(name={!r})".format(self.name)

    def __str__(self):
        return self.name


class InputObjectType(object):
    kind = TypeKind.INPUT

    def __init__(self, name, fields):
        self.name = name
        self.fields = Fields(name, fields)

    def __repr__(self):
        return "InputObjectType(name={!r})".format(self.name)

    def __str__(self):
        return self.name


class Fields(object):
    def __init__(self, type_name, fields):
        self._type_name = type_name
        self._fields = tuple(fields)
        self._fields_by_name = {}

        for field in self._fields:
            if field.name in self._fields_by_name:
                raise GraphError("{} has duplicate field {}".format(type_name, field.name))
            self._fields_by_name[field.name] = field

    def __iter__(self):
        return iter(self._fields)

    def __len__(self):
        return len(self._fields)

    def __contains__(self, field_name):
        return field_name in self._fields_by_name

    def __getattr__(self, field_name):
        field = self.get(field_name)

        if field is None and field_name.endswith("_"):
            field = self.get(field_name[:-1])

        if field is None:
            raise UnknownFieldError(self._type_name, field_name)
        else:
            return field

    def get(self, field_name):
        return self._fields_by_name.get(field_name)


def field(name, type, params=None):
    if params is None:
        params = ()
    return Field(name=name, type=to_type_ref(type), params=params)


class Field(object):
    def __init__(self, name, type, params):
        self.name = name
        self.type = type
        self.params = Params(name, params)

    def __repr__(self):
        return "Field(name={!r}, type={})".format(self.name, self.type)


class Params(object):
    def __init__(self, field_name, params):
        self._field_name = field_name
        self._params = tuple(params)

    def __iter__(self):
        return iter(self._params)

    def __len__(self):
        return len(self._params)

    def __getattr__(self, param_name):
        param = self._find_param(param_name)

        if param is None and param_name.endswith("_"):
            param = self._find_param(param_name[:-1])

        if param is None:
            raise GraphError("{} has no param {}".format(self._field_name, param_name))
        else:
            return param

    def _find_param(self, param_name):
        for param in self._params:
            if param.name == param_name:
                return param
        return None


def param(name, type, default=_undefined):
    return Parameter(name=name, type=to_type_ref(type), default=default)


class Parameter(object):
    def __init__(self, name, type, default):
        self.name = name
        self.type = type
        self.default = default

    @property
    def has_default(self):
        return self.default is not _undefined

    def __repr__(self):
        return "Parameter(name={!r}, type={})".format(self.name, self.type)


def input_field(name, type, default=_undefined):
    return InputField(name, to_type_ref(type), default)


class InputField(object):
    def __init__(self, name, type, default):
        self.name = name
        self.type = type
        self.default = default

    @property
    def has_default(self):
        return self.default is not _undefined

    def __repr__(self):
        return "InputField(name={!r}, type={})".format(self.name, self.type)


class NamedType(object):
    def __init__(self, name):
        self.name = name

    def __eq__(self, other):
        if isinstance(other, NamedType):
            return self.name == other.name
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.name)

    def __repr__(self):
        return "NamedType(name={!r})".format(self.name)

    def __str__(self):
        return self.name


class ListType(object):
    def __init__(self, element_type):
        self.element_type = to_type_ref(element_type)

    def __eq__(self, other):
        if isinstance(other, ListType):
            return self.element_type == other.element_type
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(("list", self.element_type))

    def __repr__(self):
        return "ListType(element_type={!r})".format(self.element_type)

    def __str__(self):
        return "[{}]".format(self.element_type)


class NonNullType(object):
    def __init__(self, element_type):
        element_type = to_type_ref(element_type)
        if isinstance(element_type, NonNullType):
            raise GraphError("cannot wrap non-null type in non-null: {}".format(element_type))
        self.element_type = element_type

    def __eq__(self, other):
        if isinstance(other, NonNullType):
            return self.element_type == other.element_type
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(("non_null", self.element_type))

    def __repr__(self):
        return "NonNullType(element_type={!r})".format(self.element_type)

    def __str__(self):
        return "{}!".format(self.element_type)


def to_type_ref(value):
    if isinstance(value, (NamedType, ListType, NonNullType)):
        return value
    elif isinstance(value, str):
        return NamedType(value)
    elif isinstance(value, (ScalarType, ObjectType, InputObjectType)):
        return NamedType(value.name)
    else:
        raise GraphError("not a type reference: {!r}".format(value))


def to_element_type(type_ref):
    if isinstance(type_ref, (ListType, NonNullType)):
        return to_element_type(type_ref.element_type)
    else:
        return type_ref


def is_non_null(type_ref):
    return isinstance(type_ref, NonNullType)


def strip_non_null(type_ref):
    if isinstance(type_ref, NonNullType):
        return type_ref.element_type
    else:
        return type_ref


typename_field = field("__typename", type=NonNullType(String))


def _coercion_error(value, type_name):
    return InvalidValueError("cannot coerce {!r} to {}".format(value, type_name))
