"""Category and tag structures."""

from __future__ import annotations

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

from board_contracts.sdk.structures.common import PageRequest, SortDirection


class Category(BaseModel):
    id: UUID
    parent_id: UUID | None = None
    name: str
    description: str | None = None
    sort_order: int
    is_active: bool
    created_at: datetime
    updated_at: datetime


class CategorySummary(BaseModel):
    id: UUID
    name: str
    sort_order: int
    is_active: bool


class CategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=80)
    description: str | None = Field(default=None, max_length=500)
    parent_id: UUID | None = None
    sort_order: int = Field(ge=0, le=10_000)
    is_active: bool


class CategoryUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=80)
    description: str | None = Field(default=None, max_length=500)
    sort_order: int | None = Field(default=None, ge=0, le=10_000)
    is_active: bool | None = None


class CategoryRequest(PageRequest):
    is_active: bool | None = None
    sort_by: Literal["name", "sort_order", "created_at"] | None = None
    sort_dir: SortDirection | None = None


class Tag(BaseModel):
    id: UUID
    name: str
    description: str | None = None
    created_at: datetime
    updated_at: datetime


class TagSummary(BaseModel):
    id: UUID
    name: str


class TagCreate(BaseModel):
    name: str = Field(min_length=1, max_length=40)
    description: str | None = Field(default=None, max_length=200)


class TagUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=40)
    description: str | None = Field(default=None, max_length=200)


class TagRequest(PageRequest):
    sort_dir: SortDirection | None = None
