"""Contract tests for structured log fields on contract events."""

from __future__ import annotations

import logging

from board_contracts.observability import case_log_fields, log_case_event
from board_contracts.sdk.functional import threads


def test_case_log_fields_describe_the_operation() -> None:
    fields = case_log_fields(
        operation=threads.at_post,
        case="test_api_posts_at_success",
        expectation="success",
        outcome="passed",
        status_code=None,
        durationMs=1.5,
        error=None,
    )
    assert fields == {
        "component": "contract",
        "operation": "posts.at",
        "resourceType": "posts",
        "method": "GET",
        "route": "/discussionBoard/threads/{threadId}/posts/{postId}",
        "case": "test_api_posts_at_success",
        "expectation": "success",
        "outcome": "passed",
        "durationMs": 1.5,
    }


def test_log_case_event_attaches_fields_to_record(caplog) -> None:  # type: ignore[no-untyped-def]
    logger = logging.getLogger("board_contracts.tests.observability")

    with caplog.at_level(logging.INFO, logger=logger.name):
        log_case_event(
            logger,
            level=logging.WARNING,
            message="contract case failed",
            operation=threads.erase,
            component="runner",
            outcome="failed",
            status_code=500,
        )

    record = caplog.records[-1]
    assert record.getMessage() == "contract case failed"
    assert record.levelno == logging.WARNING
    assert getattr(record, "component", None) == "runner"
    assert getattr(record, "operation", None) == "threads.erase"
    assert getattr(record, "statusCode", None) == 500
    assert getattr(record, "route", None) == "/discussionBoard/member/threads/{threadId}"
    assert not hasattr(record, "case")
