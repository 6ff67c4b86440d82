"""Moderation action, ban and moderator role structures."""

from __future__ import annotations

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

from board_contracts.sdk.structures.common import PageRequest

TargetType = Literal["thread", "post", "comment", "member"]
ModerationVerb = Literal["hide", "lock", "warn", "delete", "restore"]


class ModerationAction(BaseModel):
    id: UUID
    moderator_id: UUID
    target_type: TargetType
    target_id: UUID
    action: ModerationVerb
    reason: str
    created_at: datetime
    updated_at: datetime
    revoked_at: datetime | None = None


class ModerationActionSummary(BaseModel):
    id: UUID
    target_type: TargetType
    target_id: UUID
    action: ModerationVerb
    created_at: datetime


class ModerationActionCreate(BaseModel):
    target_type: TargetType
    target_id: UUID
    action: ModerationVerb
    reason: str = Field(min_length=1, max_length=500)


class ModerationActionUpdate(BaseModel):
    reason: str | None = Field(default=None, min_length=1, max_length=500)


class ModerationActionRequest(PageRequest):
    action: ModerationVerb | None = None
    target_type: TargetType | None = None


class Ban(BaseModel):
    id: UUID
    member_id: UUID
    moderator_id: UUID
    reason: str
    expires_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
    revoked_at: datetime | None = None


class BanSummary(BaseModel):
    id: UUID
    member_id: UUID
    expires_at: datetime | None = None
    created_at: datetime


class BanCreate(BaseModel):
    member_id: UUID
    reason: str = Field(min_length=1, max_length=500)
    expires_at: datetime | None = None


class BanUpdate(BaseModel):
    reason: str | None = Field(default=None, min_length=1, max_length=500)
    expires_at: datetime | None = None


class BanRequest(PageRequest):
    member_id: UUID | None = None
    active: bool | None = None


class Moderator(BaseModel):
    id: UUID
    member_id: UUID
    assigned_by_id: UUID
    assigned_at: datetime
    revoked_at: datetime | None = None


class ModeratorCreate(BaseModel):
    member_id: UUID


class ModeratorRequest(PageRequest):
    active: bool | None = None
