"""
EmailArchive Pydantic schemas.
"""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from teamdesk.schemas.types import UTCDateTime


class EmailArchiveCreate(BaseModel):
    subject: str = Field(min_length=1, max_length=1000)
    sender: str = Field(min_length=1, max_length=500)
    recipient: str = Field(min_length=1, max_length=2000)
    body: str | None = None
    attachments: list[dict[str, Any]] | None = None
    email_date: UTCDateTime
    category: str | None = Field(default=None, max_length=200)
    tags: list[str] = Field(default_factory=list, max_length=50)


class EmailArchiveRead(BaseModel):
    id: uuid.UUID
    subject: str
    sender: str
    recipient: str
    body: str | None
    attachments: list[dict[str, Any]] | None
    email_date: datetime
    category: str | None
    tags: list[str] | None
    archived_by: uuid.UUID
    team_id: uuid.UUID
    created_at: datetime

    model_config = {"from_attributes": True}
