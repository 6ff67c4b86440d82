"""Vote, poll and poll vote structures."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

VoteType = Literal["up", "down"]


class Vote(BaseModel):
    id: UUID
    voter_id: UUID
    post_id: UUID | None = None
    comment_id: UUID | None = None
    vote_type: VoteType
    created_at: datetime
    updated_at: datetime


class VoteCreate(BaseModel):
    """Exactly one of ``post_id`` and ``comment_id`` names the voted content."""

    post_id: UUID | None = None
    comment_id: UUID | None = None
    vote_type: VoteType

    @model_validator(mode="after")
    def _single_target(self) -> "VoteCreate":
        if (self.post_id is None) == (self.comment_id is None):
            raise ValueError("exactly one of post_id or comment_id must be provided")
        return self


class VoteUpdate(BaseModel):
    vote_type: VoteType


class PollOption(BaseModel):
    id: UUID
    label: str
    vote_count: int = Field(ge=0)


class Poll(BaseModel):
    id: UUID
    post_id: UUID
    question: str
    options: list[PollOption] = Field(min_length=2)
    multiple_choice: bool
    closes_at: datetime | None = None
    created_at: datetime
    updated_at: datetime


class PollCreate(BaseModel):
    question: str = Field(min_length=1, max_length=300)
    options: list[Annotated[str, Field(min_length=1, max_length=100)]] = Field(min_length=2, max_length=10)
    multiple_choice: bool
    closes_at: datetime | None = None


class PollUpdate(BaseModel):
    question: str | None = Field(default=None, min_length=1, max_length=300)
    closes_at: datetime | None = None


class PollVote(BaseModel):
    id: UUID
    poll_id: UUID
    option_id: UUID
    voter_id: UUID
    created_at: datetime


class PollVoteCreate(BaseModel):
    option_id: UUID
