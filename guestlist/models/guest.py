from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    ForeignKey,
    Text,
    CheckConstraint,
    Index,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base


class Guest(Base):
    __tablename__ = "guests"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    ladies = Column(Integer, default=0, nullable=False)
    gents = Column(Integer, default=0, nullable=False)
    children = Column(Integer, default=0, nullable=False)
    notes = Column(Text)

    group_id = Column(
        Integer, ForeignKey("groups.id", ondelete="RESTRICT"), nullable=False
    )

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    group = relationship("Group", back_populates="guests")
    invites = relationship(
        "Invite",
        back_populates="guest",
        cascade="all, delete-orphan",
    )
    rsvps = relationship(
        "RSVP",
        back_populates="guest",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        CheckConstraint("ladies >= 0", name="ck_guests_ladies_non_negative"),
        CheckConstraint("gents >= 0", name="ck_guests_gents_non_negative"),
        CheckConstraint("children >= 0", name="ck_guests_children_non_negative"),
    )


Index("uq_guests_name_lower", func.lower(Guest.name), unique=True)
