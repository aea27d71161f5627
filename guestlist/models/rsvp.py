from sqlalchemy import (
    Column,
    Integer,
    DateTime,
    ForeignKey,
    Text,
    CheckConstraint,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base


class RSVP(Base):
    __tablename__ = "rsvps"

    id = Column(Integer, primary_key=True, index=True)
    ladies_final = Column(Integer, default=0, nullable=False)
    gents_final = Column(Integer, default=0, nullable=False)
    children_final = Column(Integer, default=0, nullable=False)
    notes = Column(Text)

    # Foreign Keys
    guest_id = Column(
        Integer, ForeignKey("guests.id", ondelete="CASCADE"), nullable=False
    )
    function_id = Column(
        Integer, ForeignKey("functions.id", ondelete="CASCADE"), nullable=False
    )

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    guest = relationship("Guest", back_populates="rsvps")
    function = relationship("Function", back_populates="rsvps")

    __table_args__ = (
        UniqueConstraint("guest_id", "function_id", name="uq_rsvp_guest_function"),
        CheckConstraint("ladies_final >= 0", name="ck_rsvps_ladies_non_negative"),
        CheckConstraint("gents_final >= 0", name="ck_rsvps_gents_non_negative"),
        CheckConstraint("children_final >= 0", name="ck_rsvps_children_non_negative"),
    )
