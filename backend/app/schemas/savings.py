"""
Row schemas returned by the savings store.
"""

from pydantic import BaseModel
from datetime import date
from typing import Optional
from app.models.entry import EntryType


class GroupRow(BaseModel):
    """Saving group as read from the store."""
    id: str
    name: str
    description: Optional[str] = None
    target_total_cents: int
    avatar_url: Optional[str] = None

    class Config:
        from_attributes = True
        frozen = True


class MemberRow(BaseModel):
    """Group member as read from the store."""
    id: str
    display_name: str
    target_amount_cents: Optional[int] = None
    avatar_url: Optional[str] = None

    class Config:
        from_attributes = True
        frozen = True


class EntryRow(BaseModel):
    """Deposit or withdrawal as read from the store."""
    id: str
    member_id: str
    transaction_date: date
    amount_cents: int
    type: EntryType
    note: Optional[str] = None

    class Config:
        from_attributes = True
        frozen = True
