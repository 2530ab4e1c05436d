"""
EmailArchive CRUD operations.
"""
from __future__ import annotations

from pydantic import BaseModel

from teamdesk.crud.base import TeamScopedCRUD
from teamdesk.models.email_archive import EmailArchive
from teamdesk.schemas.email_archive import EmailArchiveCreate


class CRUDEmailArchive(TeamScopedCRUD[EmailArchive, EmailArchiveCreate, BaseModel]):
    search_fields = ("subject", "sender", "body")
    order_field = "email_date"


crud_email_archive = CRUDEmailArchive(EmailArchive)
