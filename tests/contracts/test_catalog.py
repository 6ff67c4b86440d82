"""Contract tests for the case catalog, executed against the in-process stub backend."""

from __future__ import annotations

import asyncio
import re
from datetime import datetime, timezone
from types import SimpleNamespace
from uuid import uuid4

import pytest

from board_contracts.catalog import CATALOG, OPERATIONS, select
from board_contracts.contract import ContractCase, Expectation, execute
from board_contracts.runner import authorize
from board_contracts.sdk import HttpError
from board_contracts.sdk.functional import engagement
from board_contracts.sdk.structures import CommentCreate
from board_contracts.validation import assert_conforms
from stub_backend import create_stub_app, stub_connection

_SNAKE_CASE = re.compile(r"^[a-z][a-z0-9_]*$")


def _case(name: str) -> ContractCase:
    return next(case for case in CATALOG if case.name == name)


def test_case_names_are_unique_snake_case() -> None:
    names = [case.name for case in CATALOG]
    assert len(names) == len(set(names))
    assert all(_SNAKE_CASE.match(name) for name in names)


def test_every_operation_has_a_success_case() -> None:
    covered = {case.operation.name for case in CATALOG if case.expect is Expectation.SUCCESS}
    assert covered == {operation.name for operation in OPERATIONS}


def test_every_identifier_addressed_operation_has_a_not_found_case() -> None:
    addressed = {operation.name for operation in OPERATIONS if operation.path_parameters}
    covered = {case.operation.name for case in CATALOG if case.expect is Expectation.NOT_FOUND}
    assert covered == addressed


def test_omitted_cases_explain_themselves_and_target_creates() -> None:
    omitted = [case for case in CATALOG if case.expect is Expectation.OMITTED]
    assert omitted
    for case in omitted:
        assert case.operation.action in ("create", "join")
        assert case.reason
        field = case.name.rsplit("_without_", 1)[1]
        assert field in case.operation.request.model_fields
        assert case.operation.request.model_fields[field].is_required()


def test_select_filters_by_case_name_or_operation() -> None:
    assert select(CATALOG, None) == CATALOG
    assert select(CATALOG, "") == CATALOG
    by_operation = select(CATALOG, "poll_votes.")
    assert by_operation
    assert all(case.operation.resource == "poll_votes" for case in by_operation)
    by_name = select(CATALOG, "_not_found")
    assert all(case.expect is Expectation.NOT_FOUND for case in by_name)
    assert select(CATALOG, "no-such-case") == ()



def test_every_credential_operation_has_a_rejected_case() -> None:
    credential = {operation.name for operation in OPERATIONS if operation.resource.startswith("auth.")}
    covered = {case.operation.name for case in CATALOG if case.expect is Expectation.REJECTED}
    assert len(credential) == 9
    assert covered == credential


def test_comment_cases_create_top_level_comments() -> None:
    for name in ("test_api_comments_create_success", "test_api_comments_create_not_found"):
        body = _case(name).body({})
        assert isinstance(body, CommentCreate)
        assert body.parent_id is None


def test_poll_and_ban_bodies_are_dated_in_the_future() -> None:
    context = {"member": SimpleNamespace(id=uuid4())}
    now = datetime.now(timezone.utc)

    assert _case("test_api_polls_create_success").body(context).closes_at > now
    assert _case("test_api_polls_update_success").body(context).closes_at > now
    assert _case("test_api_bans_create_success").body(context).expires_at > now
    assert _case("test_api_bans_update_success").body(context).expires_at > now


def test_role_routes_refuse_calls_without_a_session() -> None:
    app = create_stub_app(enforce_roles=True)

    async def _run() -> None:
        administrator = await authorize(stub_connection(app))
        with pytest.raises(HttpError) as raised:
            await engagement.at_vote(administrator, voteId=uuid4())
        assert raised.value.status_code == 403

    asyncio.run(_run())


def test_prepared_sessions_authorize_each_call() -> None:
    app = create_stub_app(enforce_roles=True)
    board = app.state.board

    async def _run() -> str:
        administrator = await authorize(stub_connection(app))
        await execute(_case("test_api_moderation_actions_create_success"), administrator)
        return administrator.headers["Authorization"]

    administrator = asyncio.run(_run())
    (member,) = board.records("auth.member").values()
    (moderator,) = board.records("auth.moderator").values()
    sent = {(method, path): authorization for method, path, authorization in board.requests}

    assert sent[("POST", "/discussionBoard/administrator/categories")] == administrator
    assert sent[("POST", "/discussionBoard/member/threads")] == f"Bearer {member['token']['access']}"
    assert sent[("POST", "/discussionBoard/moderator/moderationActions")] == f"Bearer {moderator['token']['access']}"
    posts = [authorization for (method, path), authorization in sent.items() if path.endswith("/posts")]
    assert posts == [f"Bearer {member['token']['access']}"]


@pytest.mark.parametrize("case", CATALOG, ids=lambda case: case.name)
def test_catalog_case_passes_against_stub(case: ContractCase) -> None:
    app = create_stub_app(enforce_roles=True)

    async def _run() -> object:
        administrator = await authorize(stub_connection(app))
        return await execute(case, administrator, strict_not_found=True)

    result = asyncio.run(_run())
    if case.expect is Expectation.SUCCESS:
        assert_conforms(result, case.operation.response)
    else:
        assert result is None
