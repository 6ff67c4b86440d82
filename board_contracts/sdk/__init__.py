"""Typed client for the discussion board REST API."""

from board_contracts.sdk.connection import Connection
from board_contracts.sdk.errors import HttpError, ResponseDecodeError
from board_contracts.sdk.fetcher import Operation

__all__ = ["Connection", "HttpError", "Operation", "ResponseDecodeError"]
