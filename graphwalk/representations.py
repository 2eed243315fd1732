class EntityRef(object):
    """
    A stored relation to another entity, identified by ``identifier``.

    Wherever the schema expects an object, the executor dereferences an
    ``EntityRef`` (or a bare scalar identifier) through the reference resolver
    of the expected type before selecting any of its fields.
    """

    def __init__(self, identifier, type_name=None):
        self.identifier = identifier
        self.type_name = type_name

    def __eq__(self, other):
        if isinstance(other, EntityRef):
            return (self.identifier, self.type_name) == (other.identifier, other.type_name)
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash((self.identifier, self.type_name))

    def __repr__(self):
        return "EntityRef(identifier={!r}, type_name={!r})".format(self.identifier, self.type_name)


def ref(identifier, type_name=None):
    return EntityRef(identifier, type_name=type_name)


def is_reference(value):
    return isinstance(value, (EntityRef, str, int, float)) and not isinstance(value, bool)


def reference_identifier(value):
    if isinstance(value, EntityRef):
        return value.identifier
    else:
        return value
