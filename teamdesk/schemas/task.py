"""
Task Pydantic schemas.
team_id and created_by are never accepted from the client; they come from
the request's team context.
"""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from teamdesk.schemas.types import UTCDateTime, reject_null

TaskStatus = Literal["pending", "in_progress", "completed"]
TaskPriority = Literal["low", "medium", "high"]


# ── Create ────────────────────────────────────────────────────────────────────

class TaskCreate(BaseModel):
    title: str = Field(min_length=1, max_length=500)
    description: str | None = Field(default=None, max_length=10000)
    status: TaskStatus = "pending"
    priority: TaskPriority = "medium"
    due_date: UTCDateTime | None = None
    assigned_to: uuid.UUID | None = None


# ── Update ────────────────────────────────────────────────────────────────────

class TaskUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    due_date: UTCDateTime | None = None
    assigned_to: uuid.UUID | None = None

    @field_validator("title", "status", "priority")
    @classmethod
    def reject_explicit_null(cls, v: Any) -> Any:
        return reject_null(v)


# ── Read ──────────────────────────────────────────────────────────────────────

class TaskRead(BaseModel):
    id: uuid.UUID
    title: str
    description: str | None
    status: str
    priority: str
    due_date: datetime | None
    completed_at: datetime | None
    created_by: uuid.UUID
    assigned_to: uuid.UUID | None
    team_id: uuid.UUID
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
