"""Structural schema assertions for decoded API responses."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

_ADAPTERS: dict[Any, TypeAdapter[Any]] = {}


@dataclass(frozen=True)
class SchemaViolation:
    """One field that does not satisfy the declared schema."""

    path: str
    kind: str
    message: str
    value: Any

    def render(self) -> str:
        return f"{self.path}: {self.message} [{self.kind}] (got {self.value!r})"


class SchemaAssertionError(AssertionError):
    """Raised when a value does not conform to its declared schema."""

    def __init__(self, schema_name: str, violations: list[SchemaViolation]) -> None:
        lines = [f"value does not conform to {schema_name} ({len(violations)} violation(s)):"]
        lines.extend(f"  - {violation.render()}" for violation in violations)
        super().__init__("\n".join(lines))
        self.schema_name = schema_name
        self.violations = violations


def schema_name(schema: Any) -> str:
    if schema is None:
        return "void"
    return getattr(schema, "__name__", None) or repr(schema)


def _adapter(schema: Any) -> TypeAdapter[Any]:
    adapter = _ADAPTERS.get(schema)
    if adapter is None:
        adapter = TypeAdapter(schema)
        _ADAPTERS[schema] = adapter
    return adapter


def _json_path(loc: tuple[int | str, ...]) -> str:
    path = "$"
    for part in loc:
        path += f"[{part}]" if isinstance(part, int) else f".{part}"
    return path


def _as_json(value: Any) -> str:
    if isinstance(value, BaseModel):
        return value.model_dump_json()
    return json.dumps(value, default=str)


def _validate(value: Any, schema: Any) -> tuple[Any, list[SchemaViolation]]:
    if schema is None:
        if value is None:
            return None, []
        return None, [SchemaViolation(path="$", kind="void", message="expected no response body", value=value)]
    try:
        # Strict JSON mode: identifiers and timestamps must arrive as well-formed
        # strings, and numbers are never parsed out of strings.
        return _adapter(schema).validate_json(_as_json(value), strict=True), []
    except ValidationError as exc:
        violations = [
            SchemaViolation(
                path=_json_path(tuple(error["loc"])),
                kind=error["type"],
                message=error["msg"],
                value=error.get("input"),
            )
            for error in exc.errors(include_url=False)
        ]
        return None, violations


def check_conforms(value: Any, schema: Any) -> list[SchemaViolation]:
    """Return every violation of ``schema`` found in ``value`` (empty when it conforms)."""
    _, violations = _validate(value, schema)
    return violations


def assert_conforms(value: Any, schema: Any) -> Any:
    """Assert ``value`` satisfies ``schema`` and return it parsed into the schema type."""
    parsed, violations = _validate(value, schema)
    if violations:
        raise SchemaAssertionError(schema_name(schema), violations)
    return parsed
