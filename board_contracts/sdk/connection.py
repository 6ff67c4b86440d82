"""Connection handle shared by every SDK call."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

import httpx


@dataclass(frozen=True)
class Connection:
    """Transport configuration for reaching the backend.

    Connections are never mutated; ``with_token`` and ``anonymous`` return
    copies so a single handle can be shared across independent test cases.
    """

    host: str
    headers: dict[str, str] = field(default_factory=dict)
    timeout_seconds: float = 30.0
    transport: httpx.AsyncBaseTransport | None = None

    def with_token(self, token: str) -> Connection:
        headers = dict(self.headers)
        headers["Authorization"] = f"Bearer {token}"
        return replace(self, headers=headers)

    def anonymous(self) -> Connection:
        headers = {key: value for key, value in self.headers.items() if key.lower() != "authorization"}
        return replace(self, headers=headers)
