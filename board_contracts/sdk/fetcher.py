"""Route descriptors and the single HTTP round trip behind every SDK call."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from board_contracts.sdk.connection import Connection
from board_contracts.sdk.errors import HttpError, ResponseDecodeError

logger = logging.getLogger(__name__)

_PATH_PARAMETER = re.compile(r"\{(\w+)\}")
_ROLES = ("member", "moderator", "administrator")


@dataclass(frozen=True)
class Operation:
    """One remote operation of the discussion board API.

    ``request`` is the pydantic model the body must fit (``None`` when the
    operation takes no body) and ``response`` is the declared response schema
    (``None`` for operations that answer without a body).
    """

    resource: str
    action: str
    method: str
    path: str
    request: type[BaseModel] | None = None
    response: Any = None

    @property
    def name(self) -> str:
        return f"{self.resource}.{self.action}"

    @property
    def path_parameters(self) -> tuple[str, ...]:
        return tuple(_PATH_PARAMETER.findall(self.path))

    @property
    def role(self) -> str | None:
        """Account kind the route is reserved for, read from its ``/discussionBoard/<role>/`` prefix."""
        segments = self.path.split("/")
        if len(segments) > 3 and segments[1] == "discussionBoard" and segments[2] in _ROLES:
            return segments[2]
        return None

    def url(self, **path_params: Any) -> str:
        """Interpolate path parameters into the route template."""
        expected = set(self.path_parameters)
        missing = expected - path_params.keys()
        if missing:
            raise TypeError(f"{self.name} is missing path parameters: {', '.join(sorted(missing))}")
        unexpected = path_params.keys() - expected
        if unexpected:
            raise TypeError(f"{self.name} got unexpected path parameters: {', '.join(sorted(unexpected))}")
        return _PATH_PARAMETER.sub(lambda match: quote(str(path_params[match.group(1)]), safe=""), self.path)

    def encode(self, body: BaseModel | dict[str, Any] | None) -> dict[str, Any] | None:
        """Validate ``body`` against the request model and serialise it to JSON types."""
        if self.request is None:
            if body is not None:
                raise TypeError(f"{self.name} does not accept a request body")
            return None
        if body is None:
            raise TypeError(f"{self.name} requires a {self.request.__name__} body")
        if not isinstance(body, self.request):
            body = self.request.model_validate(body)
        return body.model_dump(mode="json", exclude_none=True)

    async def __call__(
        self,
        connection: Connection,
        *,
        body: BaseModel | dict[str, Any] | None = None,
        **path_params: Any,
    ) -> Any:
        url = self.url(**path_params)
        payload = self.encode(body)
        async with httpx.AsyncClient(
            base_url=connection.host,
            headers=connection.headers,
            timeout=connection.timeout_seconds,
            transport=connection.transport,
        ) as client:
            response = await client.request(self.method, url, json=payload)

        logger.debug("%s %s -> %d", self.method, url, response.status_code)
        if not response.is_success:
            raise HttpError.from_response(response)
        if self.response is None or not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ResponseDecodeError(
                method=self.method,
                path=url,
                status_code=response.status_code,
                text=response.text,
            ) from exc
