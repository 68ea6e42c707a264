"""
Saving group database model.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, Text, Integer, DateTime
from sqlalchemy.orm import relationship
from app.database import Base


class SavingGroup(Base):
    """A named collective savings goal."""

    __tablename__ = "saving_groups"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=True)
    target_total_cents = Column(Integer, nullable=False, default=0)  # Minor units
    avatar_url = Column(String(500), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    members = relationship("SavingGroupMember", back_populates="group")
    entries = relationship("SavingGroupEntry", back_populates="group")
