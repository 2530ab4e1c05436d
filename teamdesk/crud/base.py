"""
Generic async CRUD base classes.
CRUDBase carries primary-key access and generic writes; TeamScopedCRUD adds
the team-filtered reads every business entity goes through.
"""
from __future__ import annotations

import uuid
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy import ColumnElement, Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from teamdesk.db.base import Base, utcnow

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Generic CRUD operations for SQLAlchemy async ORM models.

    Type parameters:
        ModelType: The SQLAlchemy ORM model class.
        CreateSchemaType: The Pydantic schema used for creation.
        UpdateSchemaType: The Pydantic schema used for updates.
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model = model

    async def get(self, db: AsyncSession, id: uuid.UUID) -> ModelType | None:
        """Fetch a single record by primary key."""
        result = await db.execute(select(self.model).where(self.model.id == id))  # type: ignore[attr-defined]
        return result.scalar_one_or_none()

    async def create_from_dict(
        self, db: AsyncSession, *, obj_in: dict[str, Any]
    ) -> ModelType:
        """Create a new record from a plain dictionary."""
        db_obj = self.model(**obj_in)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        *,
        db_obj: ModelType,
        obj_in: UpdateSchemaType | dict[str, Any],
    ) -> ModelType:
        """
        Update an existing record.
        Accepts either a Pydantic schema or a plain dict.
        Only fields explicitly set in the schema are updated. updated_at is
        stamped even when no value changes.
        """
        if isinstance(obj_in, dict):
            update_data = dict(obj_in)
        else:
            update_data = obj_in.model_dump(exclude_unset=True)
        if hasattr(db_obj, "updated_at"):
            update_data["updated_at"] = utcnow()

        for field, value in update_data.items():
            setattr(db_obj, field, value)

        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj


class TeamScopedCRUD(CRUDBase[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    CRUD for rows owned by a team.

    Every read filters on ``team_id``; a row belonging to another team is
    indistinguishable from a missing one.
    """

    # Columns matched by search_for_team, OR'd together
    search_fields: ClassVar[tuple[str, ...]] = ()
    # Column used for "most recent first" ordering
    order_field: ClassVar[str] = "created_at"

    def _team_query(self, team_id: uuid.UUID) -> Select[Any]:
        return select(self.model).where(self.model.team_id == team_id)  # type: ignore[attr-defined]

    def _ordered(self, query: Select[Any]) -> Select[Any]:
        column = getattr(self.model, self.order_field)
        # id as tie-breaker keeps ordering stable for equal timestamps
        return query.order_by(column.desc(), self.model.id.desc())  # type: ignore[attr-defined]

    async def get_for_team(
        self, db: AsyncSession, *, id: uuid.UUID, team_id: uuid.UUID
    ) -> ModelType | None:
        result = await db.execute(
            self._team_query(team_id).where(self.model.id == id)  # type: ignore[attr-defined]
        )
        return result.scalar_one_or_none()

    async def list_for_team(
        self,
        db: AsyncSession,
        *,
        team_id: uuid.UUID,
        limit: int | None = None,
    ) -> list[ModelType]:
        query = self._ordered(self._team_query(team_id))
        if limit is not None:
            query = query.limit(limit)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def search_for_team(
        self,
        db: AsyncSession,
        *,
        team_id: uuid.UUID,
        query: str,
        limit: int | None = None,
    ) -> list[ModelType]:
        """
        Case-insensitive substring match across ``search_fields``.
        LIKE wildcards in ``query`` are matched literally.
        """
        matches = or_(
            *(
                getattr(self.model, field).icontains(query, autoescape=True)
                for field in self.search_fields
            )
        )
        stmt = self._ordered(self._team_query(team_id).where(matches))
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await db.execute(stmt)
        return list(result.scalars().all())

    async def count_for_team(
        self,
        db: AsyncSession,
        *,
        team_id: uuid.UUID,
        conditions: tuple[ColumnElement[bool], ...] = (),
    ) -> int:
        query = (
            select(func.count())
            .select_from(self.model)
            .where(self.model.team_id == team_id, *conditions)  # type: ignore[attr-defined]
        )
        result = await db.execute(query)
        return result.scalar_one()
