"""Contract tests for structural schema assertions on decoded responses."""

from __future__ import annotations

from uuid import UUID

import pytest

from board_contracts.sdk.structures import Category, CategorySummary, Page, Poll
from board_contracts.validation import SchemaAssertionError, assert_conforms, check_conforms, schema_name


def _category(**overrides: object) -> dict[str, object]:
    record: dict[str, object] = {
        "id": "5a4b3c2d-1e0f-4a9b-8c7d-6e5f4a3b2c1d",
        "parent_id": None,
        "name": "General",
        "description": "Anything goes",
        "sort_order": 1,
        "is_active": True,
        "created_at": "2024-05-01T12:00:00Z",
        "updated_at": "2024-05-01T12:00:00Z",
    }
    record.update(overrides)
    return record


def test_conforming_value_is_returned_parsed() -> None:
    parsed = assert_conforms(_category(), Category)
    assert isinstance(parsed, Category)
    assert parsed.id == UUID("5a4b3c2d-1e0f-4a9b-8c7d-6e5f4a3b2c1d")
    assert check_conforms(_category(), Category) == []


def test_every_violation_is_reported_with_a_json_path() -> None:
    value = _category(id="not-a-uuid", sort_order="1")
    del value["name"]

    with pytest.raises(SchemaAssertionError) as raised:
        assert_conforms(value, Category)

    paths = {violation.path for violation in raised.value.violations}
    assert paths == {"$.id", "$.name", "$.sort_order"}
    assert raised.value.schema_name == "Category"
    assert "3 violation(s)" in str(raised.value)


def test_numbers_are_never_parsed_out_of_strings() -> None:
    violations = check_conforms(_category(is_active="true"), Category)
    assert [violation.path for violation in violations] == ["$.is_active"]


def test_nested_paths_point_into_lists() -> None:
    page = {
        "pagination": {"current": 1, "limit": 10, "records": 1, "pages": 1},
        "data": [{"id": "5a4b3c2d-1e0f-4a9b-8c7d-6e5f4a3b2c1d", "name": "General", "sort_order": -1}],
    }
    violations = check_conforms(page, Page[CategorySummary])
    assert {violation.path for violation in violations} == {"$.data[0].is_active"}


def test_list_constraints_are_enforced() -> None:
    poll = {
        "id": "5a4b3c2d-1e0f-4a9b-8c7d-6e5f4a3b2c1d",
        "post_id": "0f1e2d3c-4b5a-4968-8776-655443322110",
        "question": "Tabs or spaces?",
        "options": [{"id": "7b2f7a8e-3c1d-4e5f-9a0b-1c2d3e4f5a6b", "label": "tabs", "vote_count": 0}],
        "multiple_choice": False,
        "created_at": "2024-05-01T12:00:00Z",
        "updated_at": "2024-05-01T12:00:00Z",
    }
    violations = check_conforms(poll, Poll)
    assert [violation.kind for violation in violations] == ["too_short"]


def test_void_schema_accepts_only_none() -> None:
    assert check_conforms(None, None) == []
    assert assert_conforms(None, None) is None
    with pytest.raises(SchemaAssertionError) as raised:
        assert_conforms({"id": "x"}, None)
    assert raised.value.violations[0].kind == "void"
    assert schema_name(None) == "void"
