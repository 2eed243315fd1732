from .core import define_engine, dependencies, Engine, Injector
from .errors import (
    DuplicateTypeError,
    EntityNotFoundError,
    GraphError,
    InvalidTypeReferenceError,
    InvalidValueError,
    MalformedRequestError,
    MissingArgumentError,
    MissingResolverError,
    NonNullViolationError,
    ResolverExecutionError,
    SelectionShapeError,
    UnknownFieldError,
    UnknownTypeError,
    UnresolvedReferenceError,
)
from .execution import ErrorEntry, ExecutionResult
from .query import mutation, query, Request, select, SelectionNode, Variable
from .representations import EntityRef, ref
from .resolvers import create_resolver_table, ResolverTable
from .schema import (
    Boolean,
    field,
    Float,
    ID,
    input_field,
    InputObjectType,
    Int,
    ListType,
    NamedType,
    NonNullType,
    ObjectType,
    param,
    ScalarType,
    String,
    TypeKind,
)
from .store import Collection, Store


__all__ = [
    "define_engine",
    "dependencies",
    "Engine",
    "Injector",

    "DuplicateTypeError",
    "EntityNotFoundError",
    "GraphError",
    "InvalidTypeReferenceError",
    "InvalidValueError",
    "MalformedRequestError",
    "MissingArgumentError",
    "MissingResolverError",
    "NonNullViolationError",
    "ResolverExecutionError",
    "SelectionShapeError",
    "UnknownFieldError",
    "UnknownTypeError",
    "UnresolvedReferenceError",

    "ErrorEntry",
    "ExecutionResult",

    "mutation",
    "query",
    "Request",
    "select",
    "SelectionNode",
    "Variable",

    "EntityRef",
    "ref",

    "create_resolver_table",
    "ResolverTable",

    "Boolean",
    "field",
    "Float",
    "ID",
    "input_field",
    "InputObjectType",
    "Int",
    "ListType",
    "NamedType",
    "NonNullType",
    "ObjectType",
    "param",
    "ScalarType",
    "String",
    "TypeKind",

    "Collection",
    "Store",
]
