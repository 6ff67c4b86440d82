"""Contract tests for suite execution, reporting and connection setup."""

from __future__ import annotations

import asyncio
import logging

from board_contracts.catalog import CATALOG, select
from board_contracts.config import Settings
from board_contracts.contract import Expectation
from board_contracts.runner import Outcome, authorize, build_connection, run_case, run_suite
from board_contracts.sdk import Connection
from stub_backend import create_stub_app, stub_connection


def test_run_suite_reports_counts_per_outcome(connection: Connection) -> None:
    cases = select(CATALOG, "tags.")
    report = asyncio.run(run_suite(cases, connection))

    assert report.ok
    assert len(report.results) == len(cases)
    assert report.failed == 0
    assert report.omitted == sum(1 for case in cases if case.expect is Expectation.OMITTED)
    assert report.passed == len(cases) - report.omitted
    assert all(result.duration_ms >= 0 for result in report.results)


def test_failing_case_is_recorded_not_raised(caplog) -> None:  # type: ignore[no-untyped-def]
    connection = stub_connection(create_stub_app(corrupt={"tags.create"}))
    case = next(case for case in CATALOG if case.name == "test_api_tags_create_success")

    with caplog.at_level(logging.INFO, logger="board_contracts.runner"):
        result = asyncio.run(run_case(case, connection))

    assert result.outcome is Outcome.FAILED
    assert result.failed
    assert result.error is not None
    assert result.error.startswith("SchemaAssertionError")
    assert "$.id" in result.error

    failures = [record for record in caplog.records if getattr(record, "outcome", None) == "failed"]
    assert len(failures) == 1
    assert failures[0].levelno == logging.WARNING
    assert getattr(failures[0], "case", None) == "test_api_tags_create_success"
    assert getattr(failures[0], "operation", None) == "tags.create"


def test_strict_not_found_rejects_other_statuses() -> None:
    connection = stub_connection(create_stub_app(not_found_status=410))
    case = next(case for case in CATALOG if case.name == "test_api_tags_at_not_found")

    lenient = asyncio.run(run_case(case, connection))
    strict = asyncio.run(run_case(case, connection, strict_not_found=True))

    assert lenient.outcome is Outcome.PASSED
    assert strict.outcome is Outcome.FAILED
    assert "expected 404" in (strict.error or "")


def test_fail_fast_stops_after_first_failure() -> None:
    connection = stub_connection(create_stub_app(corrupt={"tags.create", "tags.at"}))
    cases = select(CATALOG, "tags.")

    full = asyncio.run(run_suite(cases, connection))
    stopped = asyncio.run(run_suite(cases, connection, fail_fast=True))

    assert full.failed > 1
    assert stopped.failed == 1
    assert stopped.results[-1].failed
    assert len(stopped.results) < len(full.results)


def test_on_result_sees_every_case(connection: Connection) -> None:
    seen: list[str] = []
    cases = select(CATALOG, "settings.")
    asyncio.run(run_suite(cases, connection, on_result=lambda result: seen.append(result.name)))
    assert seen == [case.name for case in cases]


def test_build_connection_applies_settings() -> None:
    anonymous = build_connection(Settings(host="http://board.example", timeout_seconds=5))
    assert anonymous.host == "http://board.example"
    assert anonymous.timeout_seconds == 5
    assert "Authorization" not in anonymous.headers

    bearer = build_connection(Settings(host="http://board.example", api_token="abc"))
    assert bearer.headers["Authorization"] == "Bearer abc"


def test_authorize_joins_as_administrator(stub_app, connection: Connection) -> None:  # type: ignore[no-untyped-def]
    authorized = asyncio.run(authorize(connection))

    administrators = list(stub_app.state.board.records("auth.administrator").values())
    assert len(administrators) == 1
    assert authorized.headers["Authorization"] == f"Bearer {administrators[0]['token']['access']}"
    assert "Authorization" not in connection.headers
