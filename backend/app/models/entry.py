"""
Saving group entry (deposit / withdrawal) database model.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, Integer, Date, DateTime, Text, Enum, ForeignKey, Index
from sqlalchemy.orm import relationship
import enum
from app.database import Base


class EntryType(str, enum.Enum):
    """Entry direction."""
    deposit = "deposit"
    withdraw = "withdraw"


class SavingGroupEntry(Base):
    """A single dated deposit or withdrawal by one member."""

    __tablename__ = "saving_group_entries"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    group_id = Column(String(36), ForeignKey("saving_groups.id"), nullable=False)
    member_id = Column(String(36), ForeignKey("saving_group_members.id"), nullable=False)
    transaction_date = Column(Date, nullable=False)
    amount_cents = Column(Integer, nullable=False)  # Always a positive magnitude
    type = Column(Enum(EntryType), nullable=False)
    note = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    group = relationship("SavingGroup", back_populates="entries")
    member = relationship("SavingGroupMember", back_populates="entries")

    # Indexes for common queries
    __table_args__ = (
        Index("idx_entry_group_date", "group_id", "transaction_date"),
        Index("idx_entry_member", "member_id"),
    )
