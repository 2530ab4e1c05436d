"""
Document CRUD operations.
"""
from __future__ import annotations

from pydantic import BaseModel

from teamdesk.crud.base import TeamScopedCRUD
from teamdesk.models.document import Document
from teamdesk.schemas.document import DocumentStatusUpdate


class CRUDDocument(TeamScopedCRUD[Document, BaseModel, DocumentStatusUpdate]):
    search_fields = ("name", "description", "category")


crud_document = CRUDDocument(Document)
