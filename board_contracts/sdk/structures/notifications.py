"""Notification and board setting structures."""

from __future__ import annotations

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

from board_contracts.sdk.structures.common import PageRequest

NotificationType = Literal["reply", "mention", "vote", "moderation", "system"]

SETTING_KEY_PATTERN = r"^[a-z][a-z0-9_]{2,30}(\.[a-z][a-z0-9_]{2,30}){0,2}$"


class Notification(BaseModel):
    id: UUID
    recipient_id: UUID
    type: NotificationType
    title: str
    body: str
    is_read: bool
    created_at: datetime
    read_at: datetime | None = None


class NotificationSummary(BaseModel):
    id: UUID
    type: NotificationType
    title: str
    is_read: bool
    created_at: datetime


class NotificationCreate(BaseModel):
    recipient_id: UUID
    type: NotificationType
    title: str = Field(min_length=1, max_length=120)
    body: str = Field(min_length=1, max_length=2_000)


class NotificationUpdate(BaseModel):
    is_read: bool


class NotificationRequest(PageRequest):
    is_read: bool | None = None
    type: NotificationType | None = None


class Setting(BaseModel):
    id: UUID
    key: str = Field(pattern=SETTING_KEY_PATTERN)
    value: str
    description: str | None = None
    created_at: datetime
    updated_at: datetime


class SettingSummary(BaseModel):
    id: UUID
    key: str
    value: str


class SettingCreate(BaseModel):
    key: str = Field(pattern=SETTING_KEY_PATTERN)
    value: str = Field(max_length=1_000)
    description: str | None = Field(default=None, max_length=500)


class SettingUpdate(BaseModel):
    value: str | None = Field(default=None, max_length=1_000)
    description: str | None = Field(default=None, max_length=500)


class SettingRequest(PageRequest):
    key: str | None = None
