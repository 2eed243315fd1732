from graphql import GraphQLError

from ..errors import GraphError
from ..execution import ErrorEntry, ExecutionResult
from .parser import document_text_to_request
from .schema import parse_schema


def execute(document_text, *, executor, variables=None, operation_name=None, root_value=None):
    request = _read_request(document_text, variables=variables, operation_name=operation_name)
    if isinstance(request, ExecutionResult):
        return request
    else:
        return executor.execute(request, root_value=root_value)


async def execute_async(document_text, *, executor, variables=None, operation_name=None, root_value=None):
    request = _read_request(document_text, variables=variables, operation_name=operation_name)
    if isinstance(request, ExecutionResult):
        return request
    else:
        return await executor.execute_async(request, root_value=root_value)


def _read_request(document_text, variables, operation_name):
    try:
        return document_text_to_request(document_text, variables=variables, operation_name=operation_name)
    except GraphQLError as error:
        return ExecutionResult(data=None, errors=[ErrorEntry(error.message, path=(), error=error)])
    except GraphError as error:
        return ExecutionResult(data=None, errors=[ErrorEntry(str(error), path=(), error=error)])


__all__ = [
    "execute",
    "execute_async",
    "parse_schema",
]
