"""Errors raised by SDK calls."""

from __future__ import annotations

from typing import Any

import httpx


class HttpError(Exception):
    """The backend answered with a non-2xx status."""

    def __init__(
        self,
        *,
        status_code: int,
        message: str,
        method: str,
        path: str,
        body: Any = None,
    ) -> None:
        super().__init__(f"{method} {path} failed with {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.method = method
        self.path = path
        self.body = body

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    @classmethod
    def from_response(cls, response: httpx.Response) -> HttpError:
        """Build an error from a failed response, reading the error envelope when present."""
        body: Any = None
        message = response.text
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            # Envelope format: { error: { code, message } }
            error = body.get("error")
            if isinstance(error, dict) and error.get("message"):
                message = str(error["message"])
            elif body.get("detail"):
                message = str(body["detail"])
        return cls(
            status_code=response.status_code,
            message=message or response.reason_phrase,
            method=response.request.method,
            path=response.request.url.path,
            body=body,
        )


class ResponseDecodeError(Exception):
    """A successful response did not carry a decodable JSON body."""

    def __init__(self, *, method: str, path: str, status_code: int, text: str) -> None:
        super().__init__(f"{method} {path} returned {status_code} with a non-JSON body")
        self.method = method
        self.path = path
        self.status_code = status_code
        self.text = text
