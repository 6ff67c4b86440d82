"""Property tests for schema-driven random value synthesis."""

from __future__ import annotations

import re
from typing import Literal
from uuid import UUID

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st
from pydantic import BaseModel

from board_contracts.sdk.functional import all_operations
from board_contracts.sdk.structures import (
    MemberJoin,
    PollCreate,
    SettingCreate,
    ThreadCreate,
    VoteCreate,
)
from board_contracts.sdk.structures.common import EMAIL_PATTERN
from board_contracts.sdk.structures.notifications import SETTING_KEY_PATTERN
from board_contracts.synthesis import NIL_UUID, random_uuid, random_value, strategy_for, unique_email
from board_contracts.validation import check_conforms

_REQUEST_MODELS = sorted(
    {operation.request for operation in all_operations() if operation.request is not None},
    key=lambda model: model.__name__,
)
_RESPONSE_SCHEMAS = sorted(
    {operation.response for operation in all_operations() if operation.response is not None},
    key=lambda schema: getattr(schema, "__name__", repr(schema)),
)

_PROPERTY_SETTINGS = settings(max_examples=25, deadline=None, suppress_health_check=[HealthCheck.too_slow])


@pytest.mark.parametrize("model", _REQUEST_MODELS, ids=lambda model: model.__name__)
def test_random_request_payload_validates_against_its_model(model: type[BaseModel]) -> None:
    value = random_value(model)
    assert isinstance(value, model)
    assert model.model_validate(value.model_dump()) == value


@pytest.mark.parametrize("schema", _RESPONSE_SCHEMAS, ids=lambda schema: getattr(schema, "__name__", repr(schema)))
def test_random_response_conforms_after_json_serialisation(schema: type[BaseModel]) -> None:
    value = random_value(schema)
    assert check_conforms(value.model_dump(mode="json"), schema) == []


@_PROPERTY_SETTINGS
@given(strategy_for(MemberJoin))
def test_member_join_respects_email_pattern_and_lengths(join: MemberJoin) -> None:
    assert re.fullmatch(EMAIL_PATTERN, join.email)
    assert 3 <= len(join.username) <= 32
    assert 8 <= len(join.password) <= 64


@_PROPERTY_SETTINGS
@given(strategy_for(PollCreate))
def test_poll_options_respect_list_and_item_bounds(poll: PollCreate) -> None:
    assert 2 <= len(poll.options) <= 10
    assert all(1 <= len(option) <= 100 for option in poll.options)


@_PROPERTY_SETTINGS
@given(strategy_for(ThreadCreate))
def test_optional_fields_are_sometimes_left_out(thread: ThreadCreate) -> None:
    assert thread.tag_ids is None or len(thread.tag_ids) <= 5
    assert isinstance(thread.category_id, UUID)


@_PROPERTY_SETTINGS
@given(strategy_for(VoteCreate))
def test_model_validators_are_honoured(vote: VoteCreate) -> None:
    assert (vote.post_id is None) != (vote.comment_id is None)


@_PROPERTY_SETTINGS
@given(strategy_for(SettingCreate))
def test_setting_keys_match_their_pattern(setting: SettingCreate) -> None:
    assert re.fullmatch(SETTING_KEY_PATTERN, setting.key)
    assert len(setting.value) <= 1000


@_PROPERTY_SETTINGS
@given(strategy_for(Literal["up", "down"]))
def test_literals_sample_declared_values(value: str) -> None:
    assert value in ("up", "down")


class _Slug(str):
    @classmethod
    def __strategy__(cls) -> st.SearchStrategy[str]:
        return st.sampled_from(["alpha", "beta"])


@_PROPERTY_SETTINGS
@given(strategy_for(_Slug))
def test_types_can_provide_their_own_strategy(value: str) -> None:
    assert value in ("alpha", "beta")


def test_unsupported_types_are_rejected() -> None:
    with pytest.raises(TypeError, match="cannot synthesize"):
        strategy_for(complex)


def test_random_uuids_are_fresh_and_never_nil() -> None:
    drawn = {random_uuid() for _ in range(50)}
    assert len(drawn) == 50
    assert NIL_UUID not in drawn
    assert NIL_UUID == UUID("00000000-0000-0000-0000-000000000000")


def test_unique_emails_match_the_email_pattern_and_never_repeat() -> None:
    drawn = {unique_email() for _ in range(50)}
    assert len(drawn) == 50
    assert all(re.match(EMAIL_PATTERN, email) for email in drawn)
