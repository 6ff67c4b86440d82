"""Sequential execution of contract cases with per-case reporting."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum

from board_contracts.config import Settings, get_settings
from board_contracts.contract import ContractCase, Expectation, execute
from board_contracts.observability import log_case_event
from board_contracts.sdk import Connection, HttpError
from board_contracts.sdk.functional import auth
from board_contracts.sdk.structures import AdministratorJoin, AuthorizedAdministrator
from board_contracts.synthesis import random_value, unique_email
from board_contracts.validation import assert_conforms

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    OMITTED = "omitted"


@dataclass(frozen=True)
class CaseResult:
    name: str
    operation: str
    expectation: Expectation
    outcome: Outcome
    duration_ms: float
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.outcome is Outcome.FAILED


@dataclass
class SuiteReport:
    """Results of one suite run, in execution order."""

    results: list[CaseResult] = field(default_factory=list)

    def count(self, outcome: Outcome) -> int:
        return sum(1 for result in self.results if result.outcome is outcome)

    @property
    def passed(self) -> int:
        return self.count(Outcome.PASSED)

    @property
    def failed(self) -> int:
        return self.count(Outcome.FAILED)

    @property
    def omitted(self) -> int:
        return self.count(Outcome.OMITTED)

    @property
    def ok(self) -> bool:
        return self.failed == 0

    def failures(self) -> list[CaseResult]:
        return [result for result in self.results if result.failed]


def _describe(exc: Exception) -> str:
    message = str(exc).strip()
    return f"{type(exc).__name__}: {message}" if message else type(exc).__name__


async def run_case(case: ContractCase, connection: Connection, *, strict_not_found: bool = False) -> CaseResult:
    """Run one case and record its outcome. A failing case never raises."""
    started = time.perf_counter()
    error: str | None = None
    status_code: int | None = None
    try:
        await execute(case, connection, strict_not_found=strict_not_found)
    except Exception as exc:
        error = _describe(exc)
        if isinstance(exc, HttpError):
            status_code = exc.status_code
    duration_ms = round((time.perf_counter() - started) * 1000, 2)

    if error is not None:
        outcome = Outcome.FAILED
    elif case.expect is Expectation.OMITTED:
        outcome = Outcome.OMITTED
    else:
        outcome = Outcome.PASSED

    log_case_event(
        logger,
        level=logging.WARNING if error else logging.INFO,
        message="contract case failed" if error else "contract case finished",
        operation=case.operation,
        case=case.name,
        expectation=case.expect.value,
        outcome=outcome.value,
        status_code=status_code,
        durationMs=duration_ms,
        error=error,
    )
    return CaseResult(
        name=case.name,
        operation=case.operation.name,
        expectation=case.expect,
        outcome=outcome,
        duration_ms=duration_ms,
        error=error,
    )


async def run_suite(
    cases: Iterable[ContractCase],
    connection: Connection,
    *,
    fail_fast: bool = False,
    strict_not_found: bool = False,
    on_result: Callable[[CaseResult], None] | None = None,
) -> SuiteReport:
    """Run ``cases`` one after another; with ``fail_fast`` stop at the first failure."""
    report = SuiteReport()
    for case in cases:
        result = await run_case(case, connection, strict_not_found=strict_not_found)
        report.results.append(result)
        if on_result is not None:
            on_result(result)
        if fail_fast and result.failed:
            logger.info("Stopping suite after first failure", extra={"component": "runner", "case": case.name})
            break
    return report


def build_connection(settings: Settings | None = None) -> Connection:
    """Connection to the configured host, carrying the configured token if any."""
    settings = settings or get_settings()
    connection = Connection(host=settings.host, timeout_seconds=settings.timeout_seconds)
    if settings.api_token:
        connection = connection.with_token(settings.api_token)
    return connection


async def authorize(connection: Connection) -> Connection:
    """Join as a fresh administrator and return a connection bearing its access token."""
    administrator: AuthorizedAdministrator = assert_conforms(
        await auth.administrator_join(
            connection, body=random_value(AdministratorJoin).model_copy(update={"email": unique_email()})
        ),
        auth.administrator_join.response,
    )
    logger.info(
        "Authorized as administrator",
        extra={"component": "runner", "administratorId": str(administrator.id)},
    )
    return connection.with_token(administrator.token.access)
