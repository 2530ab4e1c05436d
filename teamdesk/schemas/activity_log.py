"""
ActivityLog Pydantic schemas.
"""
from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel

from teamdesk.schemas.user import UserReadPublic


class ActivityLogRead(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    team_id: uuid.UUID
    action: str
    entity_type: str
    entity_id: uuid.UUID | None
    description: str
    created_at: datetime
    user: UserReadPublic | None = None

    model_config = {"from_attributes": True}
