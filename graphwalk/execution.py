import asyncio
from collections.abc import Mapping
import inspect
import logging

from . import schema
from .arguments import ArgumentBinder
from .errors import (
    GraphError,
    InvalidTypeReferenceError,
    InvalidValueError,
    MalformedRequestError,
    MissingResolverError,
    NonNullViolationError,
    ResolverExecutionError,
    SelectionShapeError,
    UnknownFieldError,
    UnresolvedReferenceError,
)
from .representations import EntityRef, is_reference, reference_identifier
from .resolvers import default_resolver


_logger = logging.getLogger(__name__)


class ExecutionResult(object):
    def __init__(self, data, errors):
        self.data = data
        self.errors = errors

    def to_dict(self):
        result = {"data": self.data}
        if self.errors:
            result["errors"] = [error.to_dict() for error in self.errors]
        return result

    def __repr__(self):
        return "ExecutionResult(data={!r}, errors={!r})".format(self.data, self.errors)


class ErrorEntry(object):
    def __init__(self, message, path, error=None):
        self.message = message
        self.path = list(path)
        self.error = error

    def to_dict(self):
        result = {"message": self.message}
        if self.path:
            result["path"] = list(self.path)
        return result

    def __repr__(self):
        return "ErrorEntry(message={!r}, path={!r})".format(self.message, self.path)


def format_path(path):
    result = ""
    for key in path:
        if isinstance(key, int):
            result += "[{}]".format(key)
        elif result:
            result += "." + key
        else:
            result = key
    return result


# Raised once an error has been recorded, to null out the nearest nullable
# ancestor.
class _NullBubble(Exception):
    pass


class _RequestContext(object):
    def __init__(self, variables):
        self.variables = variables
        self.errors = []

    def record(self, error, path):
        _logger.debug("error at %s: %s", format_path(path), error)
        self.errors.append(ErrorEntry(str(error), path=path, error=error))


class Executor(object):
    def __init__(self, registry, resolvers, injector, concurrent=True):
        self._registry = registry
        self._resolvers = resolvers
        self._injector = injector
        self._binder = ArgumentBinder(registry)
        self._concurrent = concurrent

    def execute(self, request, root_value=None):
        return asyncio.run(self.execute_async(request, root_value=root_value))

    async def execute_async(self, request, root_value=None):
        _logger.debug("executing %r", request)

        try:
            root_type = self._prepare(request)
        except GraphError as error:
            _logger.warning("request aborted: %s", error)
            return ExecutionResult(data=None, errors=[ErrorEntry(str(error), path=(), error=error)])

        context = _RequestContext(variables=request.variables)

        try:
            data = await self._execute_fields(
                context,
                root_type,
                root_value,
                request.selection,
                path=(),
                serial=request.operation == "mutation",
            )
        except _NullBubble:
            data = None

        return ExecutionResult(data=data, errors=context.errors)

    def _prepare(self, request):
        if not hasattr(request, "validate"):
            raise MalformedRequestError("expected request but was {!r}".format(request))

        request.validate()

        type_name = request.operation_type_name
        if type_name is None:
            type_name = self._registry.root_type_name(request.operation)

        root_type = self._registry.lookup(type_name)
        if root_type.kind != schema.TypeKind.OBJECT:
            raise MalformedRequestError("operation type {} is not an object type".format(type_name))

        for node in request.selection:
            if node.name in root_type.fields and self._resolvers.lookup(type_name, node.name) is None:
                raise MissingResolverError(type_name, node.name)

        return root_type

    async def _execute_fields(self, context, type_def, parent, selection, path, serial):
        if serial or not self._concurrent:
            values = []
            for node in selection:
                values.append(await self._execute_field(context, type_def, parent, node, path))
        else:
            outcomes = await asyncio.gather(
                *(
                    self._execute_field(context, type_def, parent, node, path)
                    for node in selection
                ),
                return_exceptions=True,
            )
            for outcome in outcomes:
                if isinstance(outcome, BaseException):
                    raise outcome
            values = outcomes

        return {
            node.key: value
            for node, value in zip(selection, values)
        }

    async def _execute_field(self, context, type_def, parent, node, path):
        field_path = path + (node.key, )

        if node.name == schema.typename_field.name:
            return type_def.name

        try:
            field = self._registry.resolve_field_type(type_def.name, node.name)
        except UnknownFieldError as error:
            context.record(error, field_path)
            return None

        return await self._guard(
            context,
            field.type,
            field_path,
            self._resolve_field(context, type_def, field, parent, node, field_path),
        )

    async def _resolve_field(self, context, type_def, field, parent, node, path):
        self._check_selection_shape(type_def, field, node)

        args = self._binder.bind(field, node.arguments, variables=context.variables)

        resolver = self._resolvers.lookup(type_def.name, field.name)
        if resolver is None:
            resolver = default_resolver(field.name)

        value = await self._call(resolver, type_def.name, field.name, parent, args)

        return await self._complete_value(
            context,
            field.type,
            node,
            value,
            path,
            field_label="{}.{}".format(type_def.name, field.name),
        )

    def _check_selection_shape(self, type_def, field, node):
        result_type = self._registry.lookup_ref(field.type)

        if result_type.kind == schema.TypeKind.OBJECT and not node.children:
            raise SelectionShapeError("field {}.{} of type {} must have a selection of subfields".format(
                type_def.name,
                field.name,
                field.type,
            ))
        elif result_type.kind != schema.TypeKind.OBJECT and node.children:
            raise SelectionShapeError("field {}.{} of type {} must not have a selection of subfields".format(
                type_def.name,
                field.name,
                field.type,
            ))

    async def _call(self, func, type_name, field_name, *args):
        try:
            result = self._injector.call_with_dependencies(func, *args)
            if inspect.isawaitable(result):
                result = await result
            return result
        except GraphError:
            raise
        except Exception as error:
            _logger.debug("resolver for %s.%s raised", type_name, field_name, exc_info=True)
            raise ResolverExecutionError(type_name, field_name, error) from error

    async def _guard(self, context, type_ref, path, completion):
        try:
            return await completion
        except _NullBubble:
            if schema.is_non_null(type_ref):
                raise
            else:
                return None
        except Exception as error:
            context.record(error, path)
            if schema.is_non_null(type_ref):
                raise _NullBubble()
            else:
                return None

    async def _complete_value(self, context, type_ref, node, value, path, field_label):
        if isinstance(type_ref, schema.NonNullType):
            completed = await self._complete_value(
                context,
                type_ref.element_type,
                node,
                value,
                path,
                field_label=field_label,
            )
            if completed is None:
                raise NonNullViolationError("Cannot return null for non-nullable field {}".format(field_label))
            else:
                return completed

        if value is None:
            return None

        if isinstance(type_ref, schema.ListType):
            return await self._complete_list(context, type_ref, node, value, path, field_label=field_label)

        type_def = self._registry.lookup(type_ref.name)

        if type_def.kind == schema.TypeKind.SCALAR:
            return type_def.serialize(value)

        elif type_def.kind == schema.TypeKind.OBJECT:
            if isinstance(value, bool):
                raise InvalidValueError("expected {} for field {} but was {!r}".format(type_def.name, field_label, value))

            if is_reference(value):
                value = await self._dereference(type_def, value, field_label)
                if value is None:
                    return None

            return await self._execute_fields(context, type_def, value, node.children, path, serial=False)

        else:
            raise InvalidTypeReferenceError("{} cannot be used as an output type".format(type_def.name))

    async def _complete_list(self, context, type_ref, node, value, path, field_label):
        if isinstance(value, (str, bytes, Mapping)) or not hasattr(value, "__iter__"):
            raise InvalidValueError("expected list for field {} but was {!r}".format(field_label, value))

        element_type = type_ref.element_type

        def complete_element(index, element):
            element_path = path + (index, )
            return self._guard(
                context,
                element_type,
                element_path,
                self._complete_value(context, element_type, node, element, element_path, field_label=field_label),
            )

        elements = list(value)

        if self._concurrent:
            outcomes = await asyncio.gather(
                *(
                    complete_element(index, element)
                    for index, element in enumerate(elements)
                ),
                return_exceptions=True,
            )
            for outcome in outcomes:
                if isinstance(outcome, BaseException):
                    raise outcome
            return list(outcomes)
        else:
            completed = []
            for index, element in enumerate(elements):
                completed.append(await complete_element(index, element))
            return completed

    async def _dereference(self, type_def, value, field_label):
        if isinstance(value, EntityRef) and value.type_name not in (None, type_def.name):
            raise UnresolvedReferenceError("field {} expected reference to {} but was {!r}".format(
                field_label,
                type_def.name,
                value,
            ))

        resolve_reference = self._resolvers.lookup_reference(type_def.name)
        if resolve_reference is None:
            raise UnresolvedReferenceError("cannot resolve reference {!r} to {} for field {}".format(
                reference_identifier(value),
                type_def.name,
                field_label,
            ))

        return await self._call(resolve_reference, type_def.name, "__resolve_reference", reference_identifier(value))
