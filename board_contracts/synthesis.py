"""Random schema-conformant values built from hypothesis strategies.

Types describe themselves to the synthesizer in one of two ways:

* a ``__strategy__()`` hook returning a hypothesis strategy, checked first so
  any type can take over its own generation;
* pydantic model metadata: each entry of ``model_fields`` carries the field
  annotation, whether it is required, and its constraints (length bounds,
  numeric bounds, regular expression).

New request or response models therefore need no changes here.
"""

from __future__ import annotations

import string
import types
import typing
import warnings
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any
from uuid import UUID, uuid4

from hypothesis import strategies as st
from hypothesis.errors import NonInteractiveExampleWarning
from pydantic import BaseModel, ValidationError
from pydantic.fields import FieldInfo

NIL_UUID = UUID(int=0)

_TEXT_ALPHABET = string.ascii_letters + string.digits
_DEFAULT_MAX_TEXT = 24
_DEFAULT_MAX_ITEMS = 3
_INT32 = 2**31 - 1
_EARLIEST = datetime(2000, 1, 1)
_LATEST = datetime(2099, 12, 31)

_MODEL_STRATEGIES: dict[type, st.SearchStrategy[Any]] = {}


def _constraints(metadata: typing.Iterable[Any]) -> dict[str, Any]:
    found: dict[str, Any] = {}
    for item in metadata:
        if isinstance(item, FieldInfo):
            found.update(_constraints(item.metadata))
            continue
        for name in ("min_length", "max_length", "ge", "gt", "le", "lt", "pattern"):
            value = getattr(item, name, None)
            if value is not None:
                found[name] = value
    return found


def _text(bounds: dict[str, Any]) -> st.SearchStrategy[str]:
    pattern = bounds.get("pattern")
    if pattern is not None:
        return st.from_regex(pattern, fullmatch=True)
    min_size = bounds.get("min_length", 0)
    max_size = bounds.get("max_length", max(min_size, _DEFAULT_MAX_TEXT))
    max_size = min(max_size, max(min_size, _DEFAULT_MAX_TEXT))
    return st.text(alphabet=_TEXT_ALPHABET, min_size=min_size, max_size=max_size)


def _integers(bounds: dict[str, Any]) -> st.SearchStrategy[int]:
    low = bounds.get("ge", bounds["gt"] + 1 if "gt" in bounds else -_INT32)
    high = bounds.get("le", bounds["lt"] - 1 if "lt" in bounds else _INT32)
    return st.integers(min_value=low, max_value=high)


def _floats(bounds: dict[str, Any]) -> st.SearchStrategy[float]:
    return st.floats(
        min_value=bounds.get("ge", bounds.get("gt")),
        max_value=bounds.get("le", bounds.get("lt")),
        exclude_min="gt" in bounds,
        exclude_max="lt" in bounds,
        allow_nan=False,
        allow_infinity=False,
    )


def _sequence(item: Any, bounds: dict[str, Any]) -> st.SearchStrategy[list[Any]]:
    min_size = bounds.get("min_length", 0)
    max_size = bounds.get("max_length", max(min_size, _DEFAULT_MAX_ITEMS))
    return st.lists(_strategy(item, ()), min_size=min_size, max_size=max_size)


def _build(model: type[BaseModel], values: dict[str, Any]) -> BaseModel | None:
    try:
        return model.model_validate(values)
    except ValidationError:
        return None


def _model(model: type[BaseModel]) -> st.SearchStrategy[BaseModel]:
    cached = _MODEL_STRATEGIES.get(model)
    if cached is not None:
        return cached
    required: dict[str, st.SearchStrategy[Any]] = {}
    optional: dict[str, st.SearchStrategy[Any]] = {}
    for name, field in model.model_fields.items():
        strategy = _strategy(field.annotation, field.metadata)
        (required if field.is_required() else optional)[name] = strategy
    # Model validators may reject some combinations (e.g. mutually exclusive
    # fields); those draws are discarded.
    strategy = (
        st.fixed_dictionaries(required, optional=optional)
        .map(lambda values: _build(model, values))
        .filter(lambda value: value is not None)
    )
    _MODEL_STRATEGIES[model] = strategy
    return strategy


def _strategy(annotation: Any, metadata: typing.Iterable[Any]) -> st.SearchStrategy[Any]:
    hook = getattr(annotation, "__strategy__", None)
    if callable(hook):
        return hook()

    origin = typing.get_origin(annotation)
    args = typing.get_args(annotation)

    if origin is typing.Annotated:
        return _strategy(args[0], (*args[1:], *metadata))
    if origin in (typing.Union, types.UnionType):
        return st.one_of([st.none() if arg is type(None) else _strategy(arg, metadata) for arg in args])
    if origin is typing.Literal:
        return st.sampled_from(args)

    bounds = _constraints(metadata)
    if origin in (list, tuple, set, frozenset):
        return _sequence(args[0] if args else Any, bounds)
    if origin is dict:
        key, value = args if args else (str, Any)
        return st.dictionaries(_strategy(key, ()), _strategy(value, ()), max_size=_DEFAULT_MAX_ITEMS)

    if isinstance(annotation, type):
        if issubclass(annotation, BaseModel):
            return _model(annotation)
        if issubclass(annotation, Enum):
            return st.sampled_from(list(annotation))
        if issubclass(annotation, bool):
            return st.booleans()
        if issubclass(annotation, int):
            return _integers(bounds)
        if issubclass(annotation, float):
            return _floats(bounds)
        if issubclass(annotation, str):
            return _text(bounds)
        if issubclass(annotation, UUID):
            return st.uuids(version=4)
        if issubclass(annotation, datetime):
            return st.datetimes(min_value=_EARLIEST, max_value=_LATEST, timezones=st.just(timezone.utc))
        if issubclass(annotation, date):
            return st.dates(min_value=_EARLIEST.date(), max_value=_LATEST.date())
    if annotation is Any:
        return st.one_of(st.none(), st.booleans(), st.integers(-_INT32, _INT32), _text({}))
    raise TypeError(f"cannot synthesize values of type {annotation!r}")


def strategy_for(tp: Any) -> st.SearchStrategy[Any]:
    """Return a hypothesis strategy producing values that conform to ``tp``."""
    return _strategy(tp, ())


def random_value(tp: Any) -> Any:
    """Draw one random value conforming to ``tp``."""
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", NonInteractiveExampleWarning)
        return strategy_for(tp).example()


def random_uuid() -> UUID:
    """A fresh identifier from the full UUID space, unrelated to any stored record."""
    return uuid4()


def unique_email() -> str:
    """An address no earlier call has produced, so sign-ups never collide."""
    return f"u{uuid4().hex[:12]}@board.com"
