"""
Document Pydantic schemas.
Documents are created through multipart upload, so there is no JSON create schema.
"""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel

DocumentStatus = Literal["pending", "approved", "rejected"]


class DocumentStatusUpdate(BaseModel):
    status: DocumentStatus


class DocumentRead(BaseModel):
    id: uuid.UUID
    name: str
    file_path: str
    file_size: int
    mime_type: str
    category: str
    description: str | None
    status: str
    uploaded_by: uuid.UUID
    team_id: uuid.UUID
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
