from collections.abc import Mapping
import re

from .errors import GraphError


RESOLVE_REFERENCE = "__resolve_reference"


class ResolverTable(object):
    def __init__(self):
        self._field_resolvers = {}
        self._reference_resolvers = {}

    def register(self, type_name, field_name, resolver):
        if not callable(resolver):
            raise GraphError("resolver for {}.{} is not callable: {!r}".format(type_name, field_name, resolver))

        if field_name == RESOLVE_REFERENCE:
            self._reference_resolvers[type_name] = resolver
        else:
            self._field_resolvers.setdefault(type_name, {})[field_name] = resolver

    def register_reference(self, type_name, resolver):
        self.register(type_name, RESOLVE_REFERENCE, resolver)

    def load(self, table):
        for type_name, field_resolvers in table.items():
            for field_name, resolver in field_resolvers.items():
                self.register(type_name, field_name, resolver)

    def lookup(self, type_name, field_name):
        return self._field_resolvers.get(type_name, {}).get(field_name)

    def lookup_reference(self, type_name):
        return self._reference_resolvers.get(type_name)

    def field(self, type_name, field_name):
        def add_resolver(resolve):
            self.register(type_name, field_name, resolve)
            return resolve

        return add_resolver

    def reference(self, type_name):
        def add_resolver(resolve):
            self.register_reference(type_name, resolve)
            return resolve

        return add_resolver


def create_resolver_table(table=None):
    resolvers = ResolverTable()
    if table is not None:
        resolvers.load(table)
    return resolvers


def default_resolver(field_name):
    attr_name = camel_case_to_snake_case(field_name)

    def resolve(parent, args):
        if isinstance(parent, Mapping):
            return parent.get(field_name)
        elif hasattr(parent, field_name):
            return getattr(parent, field_name)
        else:
            return getattr(parent, attr_name, None)

    return resolve


def camel_case_to_snake_case(value):
    return re.sub(r"(?<=[a-z0-9])([A-Z])", lambda match: "_" + match.group(1).lower(), value)
