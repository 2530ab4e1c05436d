"""
Shared Pydantic field types.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator


def _to_utc(value: datetime) -> datetime:
    # Naive client timestamps are taken as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UTCDateTime = Annotated[datetime, AfterValidator(_to_utc)]


def reject_null(value: object) -> object:
    """Field validator body for optional update fields that map to NOT NULL columns."""
    if value is None:
        raise ValueError("may not be null")
    return value
