"""
Team Pydantic schemas.
"""
from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class TeamRead(BaseModel):
    id: uuid.UUID
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TeamSelection(BaseModel):
    success: bool = True
    team: TeamRead


class SetupResult(BaseModel):
    """Outcome of the first-use bootstrap. `teams` is empty when it was a no-op."""

    message: str
    teams: list[TeamRead] = Field(default_factory=list)
