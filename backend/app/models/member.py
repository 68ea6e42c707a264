"""
Saving group member database model.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from app.database import Base


class SavingGroupMember(Base):
    """Participant of a saving group with an individual target."""

    __tablename__ = "saving_group_members"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    group_id = Column(String(36), ForeignKey("saving_groups.id"), nullable=False)
    display_name = Column(String(100), nullable=False)
    target_amount_cents = Column(Integer, nullable=True)  # NULL is read as 0
    avatar_url = Column(String(500), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    group = relationship("SavingGroup", back_populates="members")
    entries = relationship("SavingGroupEntry", back_populates="member")

    __table_args__ = (
        Index("idx_member_group_created", "group_id", "created_at"),
    )
