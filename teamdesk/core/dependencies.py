"""
FastAPI dependency aliases shared by the route modules.
"""
from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from teamdesk.core.identity import get_current_user, get_identity_resolver
from teamdesk.core.tenancy import TeamContext, require_team
from teamdesk.db.session import get_db
from teamdesk.models.user import User

# Re-export so routes and tests can import from one place
__all__ = [
    "get_db",
    "get_current_user",
    "get_identity_resolver",
    "require_team",
    "DBSession",
    "CurrentUser",
    "TeamScope",
]

# Convenience type aliases for route signatures
DBSession = Annotated[AsyncSession, Depends(get_db)]
CurrentUser = Annotated[User, Depends(get_current_user)]
TeamScope = Annotated[TeamContext, Depends(require_team)]
