"""
Meeting Pydantic schemas.
"""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from teamdesk.schemas.types import UTCDateTime, reject_null

MeetingStatus = Literal["scheduled", "completed", "cancelled"]


class MeetingCreate(BaseModel):
    title: str = Field(min_length=1, max_length=500)
    description: str | None = Field(default=None, max_length=10000)
    start_time: UTCDateTime
    end_time: UTCDateTime
    location: str | None = Field(default=None, max_length=500)
    meeting_link: str | None = Field(default=None, max_length=2000)
    status: MeetingStatus = "scheduled"


class MeetingUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = None
    start_time: UTCDateTime | None = None
    end_time: UTCDateTime | None = None
    location: str | None = None
    meeting_link: str | None = None
    status: MeetingStatus | None = None

    @field_validator("title", "start_time", "end_time", "status")
    @classmethod
    def reject_explicit_null(cls, v: Any) -> Any:
        return reject_null(v)


class MeetingRead(BaseModel):
    id: uuid.UUID
    title: str
    description: str | None
    start_time: datetime
    end_time: datetime
    location: str | None
    meeting_link: str | None
    status: str
    organizer: uuid.UUID
    team_id: uuid.UUID
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
