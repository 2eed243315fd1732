from .execution import Executor
from .registry import TypeRegistry
from .resolvers import ResolverTable


def define_engine(types, resolvers=None, *, query_type_name="Query", mutation_type_name="Mutation"):
    engine = Engine(query_type_name=query_type_name, mutation_type_name=mutation_type_name)
    engine.load_schema(types)
    if resolvers is not None:
        engine.load_resolvers(resolvers)
    return engine


class Engine(object):
    def __init__(self, query_type_name="Query", mutation_type_name="Mutation"):
        self.types = TypeRegistry(query_type_name=query_type_name, mutation_type_name=mutation_type_name)
        self.resolvers = ResolverTable()

    def load_schema(self, type_defs):
        self.types.register_all(type_defs)

    def load_resolvers(self, table):
        if isinstance(table, ResolverTable):
            self.resolvers = table
        else:
            self.resolvers.load(table)

    def create_executor(self, dependencies=None, *, concurrent=True):
        if dependencies is None:
            dependencies = {}

        return Executor(
            registry=self.types,
            resolvers=self.resolvers,
            injector=Injector(dependencies),
            concurrent=concurrent,
        )


class Injector(object):
    def __init__(self, dependencies):
        self._dependencies = dict(dependencies)
        self._dependencies[Injector] = self

    def get(self, key):
        return self._dependencies[key]

    def call_with_dependencies(self, func, *args, **kwargs):
        dependencies = getattr(func, "dependencies", dict())
        dependency_kwargs = {
            arg_name: self.get(dependency_key)
            for arg_name, dependency_key in dependencies.items()
        }
        return func(*args, **kwargs, **dependency_kwargs)


def dependencies(**kwargs):
    def register_dependency(func):
        func.dependencies = kwargs
        return func

    return register_dependency
