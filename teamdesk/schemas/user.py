"""
User Pydantic schemas.
"""
from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel


class UserRead(BaseModel):
    id: uuid.UUID
    email: str
    first_name: str | None
    last_name: str | None
    profile_image_url: str | None
    current_team_id: uuid.UUID | None
    role: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class UserReadPublic(BaseModel):
    """Minimal public profile, embedded in activity entries."""

    id: uuid.UUID
    first_name: str | None
    last_name: str | None
    profile_image_url: str | None

    model_config = {"from_attributes": True}
