"""Structured logging helpers for contract runs."""

from __future__ import annotations

import logging

from board_contracts.sdk import Operation


def case_log_fields(
    *,
    operation: Operation,
    component: str = "contract",
    case: str | None = None,
    expectation: str | None = None,
    outcome: str | None = None,
    status_code: int | None = None,
    **details: object,
) -> dict[str, object]:
    fields: dict[str, object] = {
        "component": component,
        "operation": operation.name,
        "resourceType": operation.resource,
        "method": operation.method,
        "route": operation.path,
    }
    if case is not None:
        fields["case"] = case
    if expectation is not None:
        fields["expectation"] = expectation
    if outcome is not None:
        fields["outcome"] = outcome
    if status_code is not None:
        fields["statusCode"] = status_code
    for key, value in details.items():
        if value is None:
            continue
        fields[key] = value
    return fields


def log_case_event(
    logger: logging.Logger,
    *,
    level: int,
    message: str,
    operation: Operation,
    component: str = "contract",
    case: str | None = None,
    expectation: str | None = None,
    outcome: str | None = None,
    status_code: int | None = None,
    **details: object,
) -> None:
    logger.log(
        level,
        message,
        extra=case_log_fields(
            operation=operation,
            component=component,
            case=case,
            expectation=expectation,
            outcome=outcome,
            status_code=status_code,
            **details,
        ),
    )
