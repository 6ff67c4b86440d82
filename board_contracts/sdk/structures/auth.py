"""Authentication structures for members and administrators."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from board_contracts.sdk.structures.common import Email


class AuthorizationToken(BaseModel):
    access: str = Field(min_length=1)
    refresh: str = Field(min_length=1)
    expired_at: datetime
    refreshable_until: datetime


class MemberJoin(BaseModel):
    email: Email
    username: str = Field(min_length=3, max_length=32)
    password: str = Field(min_length=8, max_length=64)


class MemberLogin(BaseModel):
    email: Email
    password: str = Field(min_length=8, max_length=64)


class TokenRefresh(BaseModel):
    refresh_token: str = Field(min_length=1)


class AuthorizedMember(BaseModel):
    id: UUID
    email: Email
    username: str
    created_at: datetime
    token: AuthorizationToken


class AdministratorJoin(BaseModel):
    email: Email
    display_name: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=8, max_length=64)


class AdministratorLogin(BaseModel):
    email: Email
    password: str = Field(min_length=8, max_length=64)


class AuthorizedAdministrator(BaseModel):
    id: UUID
    email: Email
    display_name: str
    created_at: datetime
    token: AuthorizationToken


class ModeratorJoin(BaseModel):
    email: Email
    username: str = Field(min_length=3, max_length=32)
    password: str = Field(min_length=8, max_length=64)


class ModeratorLogin(BaseModel):
    email: Email
    password: str = Field(min_length=8, max_length=64)


class AuthorizedModerator(BaseModel):
    id: UUID
    email: Email
    username: str
    created_at: datetime
    token: AuthorizationToken
