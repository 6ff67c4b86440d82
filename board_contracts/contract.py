"""Contract test procedures.

A contract case drives one remote operation and checks its outcome:

* success: the response satisfies the operation's declared response schema;
* not found: a well-formed identifier that matches no record makes the
  operation raise instead of answering;
* rejected: the backend refuses the call outright, as with bad credentials;
* omitted: a required-field omission that the typed request model refuses to
  build. Such cases are no-ops and never bypass the model.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel

from board_contracts.observability import log_case_event
from board_contracts.sdk import Connection, HttpError, Operation
from board_contracts.synthesis import NIL_UUID, random_uuid, random_value
from board_contracts.validation import SchemaAssertionError, SchemaViolation, assert_conforms

logger = logging.getLogger(__name__)

Context = Mapping[str, Any]


class Expectation(str, Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    REJECTED = "rejected"
    OMITTED = "omitted"


class ExpectedErrorNotRaised(AssertionError):
    """A call that should have failed returned normally."""

    def __init__(self, operation: Operation, response: Any) -> None:
        super().__init__(f"{operation.name} was expected to fail but returned {response!r}")
        self.operation = operation
        self.response = response


class ContractMismatchError(AssertionError):
    """Two responses that should describe the same record differ."""

    def __init__(self, message: str, differences: dict[str, tuple[Any, Any]]) -> None:
        lines = [message]
        lines.extend(f"  - {field}: {left!r} != {right!r}" for field, (left, right) in sorted(differences.items()))
        super().__init__("\n".join(lines))
        self.differences = differences


@dataclass(frozen=True)
class ContractCase:
    """One row of the contract table.

    ``prepare`` creates whatever the call depends on and returns a context;
    ``path`` and ``body`` turn that context into path parameters and a request
    payload. Without a ``body`` factory the payload is synthesised from the
    operation's request model.
    """

    name: str
    operation: Operation
    expect: Expectation = Expectation.SUCCESS
    prepare: Callable[[Connection], Awaitable[Context]] | None = None
    path: Callable[[Context], Mapping[str, Any]] | None = None
    body: Callable[[Context], BaseModel] | None = None
    reason: str | None = None


async def verify_success(
    operation: Operation,
    connection: Connection,
    *,
    body: BaseModel | dict[str, Any] | None = None,
    **path_params: Any,
) -> Any:
    """Call ``operation`` once and assert the response conforms to its declared schema."""
    if body is None and operation.request is not None:
        body = random_value(operation.request)
    response = await operation(connection, body=body, **path_params)
    assert_conforms(response, operation.response)
    return response


async def verify_not_found(
    operation: Operation,
    connection: Connection,
    *,
    body: BaseModel | dict[str, Any] | None = None,
    strict: bool = False,
    **path_params: Any,
) -> None:
    """Call ``operation`` with identifiers matching no record and assert it raises.

    Path parameters that are not supplied are filled with fresh random UUIDs.
    With ``strict`` the error must also be classified as 404.
    """
    for name in operation.path_parameters:
        path_params.setdefault(name, random_uuid())
    error = await verify_rejected(operation, connection, body=body, **path_params)
    if strict and not error.is_not_found:
        raise AssertionError(f"{operation.name} failed with {error.status_code}, expected 404") from error


async def verify_rejected(
    operation: Operation,
    connection: Connection,
    *,
    body: BaseModel | dict[str, Any] | None = None,
    **path_params: Any,
) -> HttpError:
    """Call ``operation`` and assert the backend answers with an error; returns that error."""
    if body is None and operation.request is not None:
        body = random_value(operation.request)
    try:
        response = await operation(connection, body=body, **path_params)
    except HttpError as exc:
        return exc
    raise ExpectedErrorNotRaised(operation, response)


def omit(operation: Operation, reason: str) -> None:
    """Record a scenario the typed request model cannot express; performs no call."""
    log_case_event(
        logger,
        level=logging.INFO,
        message="contract case omitted",
        operation=operation,
        expectation=Expectation.OMITTED.value,
        reason=reason,
    )


def _shared_fields(payload: dict[str, Any], response: dict[str, Any]) -> dict[str, tuple[Any, Any]]:
    return {
        key: (value, response[key])
        for key, value in payload.items()
        if key in response and response[key] != value
    }


def _echo_mismatches(payload: dict[str, Any], response: dict[str, Any]) -> dict[str, tuple[Any, Any]]:
    # Only scalar fields count as echoes; containers may come back expanded
    # (e.g. poll option labels become option records). Fields of differing
    # types are not compared; the schema check already enforces response types.
    return {
        key: pair
        for key, pair in _shared_fields(payload, response).items()
        if not isinstance(pair[0], (dict, list)) and type(pair[0]) is type(pair[1])
    }


async def verify_round_trip(
    create: Operation,
    fetch: Operation,
    connection: Connection,
    *,
    id_parameter: str,
    body: BaseModel | None = None,
    **path_params: Any,
) -> tuple[Any, Any]:
    """Create a record, fetch it back by its new identifier, and compare both.

    ``path_params`` the create route does not take are passed to the fetch
    only; the new identifier always replaces any ``id_parameter`` given.
    """
    if body is None:
        body = random_value(create.request)
    create_params = {name: value for name, value in path_params.items() if name in create.path_parameters}
    created = await verify_success(create, connection, body=body, **create_params)
    fetched = await verify_success(fetch, connection, **{**path_params, id_parameter: created["id"]})

    normalized_created = assert_conforms(created, create.response).model_dump(mode="json")
    normalized_fetched = assert_conforms(fetched, fetch.response).model_dump(mode="json")
    differences = _shared_fields(normalized_created, normalized_fetched)
    if differences:
        raise ContractMismatchError(f"{fetch.name} does not return what {create.name} created", differences)

    payload = create.encode(body) or {}
    echoed = _echo_mismatches(payload, normalized_created)
    if echoed:
        raise ContractMismatchError(f"{create.name} does not echo the submitted payload", echoed)
    return created, fetched


async def verify_idempotent_read(fetch: Operation, connection: Connection, **path_params: Any) -> Any:
    """Read the same record twice and assert both answers are structurally equal."""
    first = await verify_success(fetch, connection, **path_params)
    second = await verify_success(fetch, connection, **path_params)
    if first != second:
        differences = _shared_fields(first, second) if isinstance(first, dict) else {"$": (first, second)}
        raise ContractMismatchError(f"{fetch.name} is not idempotent", differences)
    return first


async def _record_count(index: Operation, connection: Connection, body: BaseModel | None) -> int:
    if body is None:
        body = index.request()
    page = await verify_success(index, connection, body=body)
    return page["pagination"]["records"]


async def verify_erase_without_effect(
    erase: Operation,
    index: Operation,
    connection: Connection,
    *,
    index_body: BaseModel | None = None,
    **path_params: Any,
) -> None:
    """Erase by the nil UUID, expect a failure, and expect the record count to stay put."""
    for name in erase.path_parameters:
        path_params.setdefault(name, NIL_UUID)
    before = await _record_count(index, connection, index_body)
    await verify_not_found(erase, connection, **path_params)
    after = await _record_count(index, connection, index_body)
    if before != after:
        raise ContractMismatchError(f"{erase.name} changed the record count", {"records": (before, after)})


def connection_for(operation: Operation, context: Context, connection: Connection) -> Connection:
    """The connection to call ``operation`` with.

    Routes reserved for members or moderators go out with the session a
    prepare hook stored as ``<role>_connection``; everything else keeps
    ``connection``.
    """
    if operation.role is None:
        return connection
    return context.get(f"{operation.role}_connection", connection)


async def execute(case: ContractCase, connection: Connection, *, strict_not_found: bool = False) -> Any:
    """Run one contract case, raising on failure."""
    if case.expect is Expectation.OMITTED:
        omit(case.operation, case.reason or "payload cannot be expressed through the request model")
        return None

    context: Context = await case.prepare(connection) if case.prepare is not None else {}
    path_params = dict(case.path(context)) if case.path is not None else {}
    body = case.body(context) if case.body is not None else None
    caller = connection_for(case.operation, context, connection)

    if case.expect is Expectation.NOT_FOUND:
        await verify_not_found(case.operation, caller, body=body, strict=strict_not_found, **path_params)
        return None
    if case.expect is Expectation.REJECTED:
        await verify_rejected(case.operation, caller, body=body, **path_params)
        return None
    return await verify_success(case.operation, caller, body=body, **path_params)


__all__ = [
    "ContractCase",
    "ContractMismatchError",
    "Expectation",
    "ExpectedErrorNotRaised",
    "SchemaAssertionError",
    "SchemaViolation",
    "connection_for",
    "execute",
    "omit",
    "verify_erase_without_effect",
    "verify_idempotent_read",
    "verify_not_found",
    "verify_rejected",
    "verify_round_trip",
    "verify_success",
]
