"""Thread, post and comment structures."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from board_contracts.sdk.structures.common import PageRequest


class Thread(BaseModel):
    id: UUID
    category_id: UUID
    author_id: UUID
    title: str
    is_locked: bool
    is_pinned: bool
    tag_ids: list[UUID] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None


class ThreadSummary(BaseModel):
    id: UUID
    category_id: UUID
    title: str
    is_locked: bool
    is_pinned: bool
    created_at: datetime


class ThreadCreate(BaseModel):
    category_id: UUID
    title: str = Field(min_length=1, max_length=200)
    tag_ids: list[UUID] | None = Field(default=None, max_length=5)


class ThreadUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    is_locked: bool | None = None
    is_pinned: bool | None = None


class ThreadRequest(PageRequest):
    category_id: UUID | None = None


class Post(BaseModel):
    id: UUID
    thread_id: UUID
    author_id: UUID
    title: str
    body: str
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None


class PostSummary(BaseModel):
    id: UUID
    thread_id: UUID
    title: str
    created_at: datetime


class PostCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    body: str = Field(min_length=1, max_length=10_000)


class PostUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    body: str | None = Field(default=None, min_length=1, max_length=10_000)


class PostRequest(PageRequest):
    author_id: UUID | None = None


class Comment(BaseModel):
    id: UUID
    post_id: UUID
    parent_id: UUID | None = None
    author_id: UUID
    body: str
    nesting_level: int = Field(ge=0)
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None


class CommentSummary(BaseModel):
    id: UUID
    post_id: UUID
    parent_id: UUID | None = None
    body: str
    nesting_level: int = Field(ge=0)
    created_at: datetime


class CommentCreate(BaseModel):
    body: str = Field(min_length=1, max_length=2_000)
    parent_id: UUID | None = None


class CommentUpdate(BaseModel):
    body: str | None = Field(default=None, min_length=1, max_length=2_000)


class CommentRequest(PageRequest):
    parent_id: UUID | None = None
