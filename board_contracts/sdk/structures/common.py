"""Shared building blocks for request and response structures."""

from __future__ import annotations

from typing import Annotated, Generic, Literal, TypeVar

from pydantic import BaseModel, Field

EMAIL_PATTERN = r"^[a-z][a-z0-9]{2,15}@[a-z]{3,12}\.(com|net|org)$"

Email = Annotated[str, Field(pattern=EMAIL_PATTERN)]
SortDirection = Literal["asc", "desc"]

T = TypeVar("T")


class Pagination(BaseModel):
    current: int = Field(ge=0)
    limit: int = Field(ge=0)
    records: int = Field(ge=0)
    pages: int = Field(ge=0)


class Page(BaseModel, Generic[T]):
    """Paginated search result."""

    pagination: Pagination
    data: list[T]


class PageRequest(BaseModel):
    page: int | None = Field(default=None, ge=1, le=1000)
    limit: int | None = Field(default=None, ge=1, le=100)
    search: str | None = Field(default=None, max_length=100)
