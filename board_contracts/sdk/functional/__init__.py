"""Remote operations grouped by resource."""

from __future__ import annotations

from board_contracts.sdk.fetcher import Operation
from board_contracts.sdk.functional import auth, categories, engagement, moderation, notifications, tags, threads

_MODULES = (auth, categories, tags, threads, engagement, moderation, notifications)


def all_operations() -> tuple[Operation, ...]:
    """Every operation the SDK exposes, in declaration order."""
    operations: list[Operation] = []
    for module in _MODULES:
        operations.extend(value for value in vars(module).values() if isinstance(value, Operation))
    return tuple(operations)


__all__ = [
    "all_operations",
    "auth",
    "categories",
    "engagement",
    "moderation",
    "notifications",
    "tags",
    "threads",
]
