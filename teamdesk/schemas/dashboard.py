"""
Dashboard Pydantic schemas.
"""
from __future__ import annotations

from pydantic import BaseModel, Field


class DashboardMetrics(BaseModel):
    active_tasks: int = Field(ge=0)
    documents_today: int = Field(ge=0)
    meetings_today: int = Field(ge=0)
    pending_reviews: int = Field(ge=0)
