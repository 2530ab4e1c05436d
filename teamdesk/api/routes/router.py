"""
Aggregates all API routers into a single APIRouter.
"""
from __future__ import annotations

from fastapi import APIRouter

from teamdesk.api.routes import (
    auth,
    dashboard,
    documents,
    email_archives,
    meetings,
    tasks,
    teams,
)

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(teams.router)
api_router.include_router(dashboard.router)
api_router.include_router(documents.router)
api_router.include_router(tasks.router)
api_router.include_router(meetings.router)
api_router.include_router(email_archives.router)
