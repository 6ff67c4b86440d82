"""Shared fixtures: an in-process stub backend reached through httpx.ASGITransport."""

from __future__ import annotations

import pytest
from fastapi import FastAPI

from board_contracts.config import get_settings
from board_contracts.sdk import Connection
from stub_backend import create_stub_app, stub_connection


@pytest.fixture
def stub_app() -> FastAPI:
    return create_stub_app()


@pytest.fixture
def connection(stub_app: FastAPI) -> Connection:
    return stub_connection(stub_app)


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):  # type: ignore[no-untyped-def]
    for name in ("HOST", "API_TOKEN", "TIMEOUT_SECONDS", "STRICT_NOT_FOUND", "AUTHORIZE", "LOG_LEVEL"):
        monkeypatch.delenv(f"BOARD_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
