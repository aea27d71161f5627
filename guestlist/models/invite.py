from sqlalchemy import (
    Column,
    Integer,
    DateTime,
    ForeignKey,
    CheckConstraint,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base


class Invite(Base):
    __tablename__ = "invites"

    id = Column(Integer, primary_key=True, index=True)
    ladies_invited = Column(Integer, default=0, nullable=False)
    gents_invited = Column(Integer, default=0, nullable=False)
    children_invited = Column(Integer, default=0, nullable=False)

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
    guest = relationship("Guest", back_populates="invites")
    function = relationship("Function", back_populates="invites")

    __table_args__ = (
        UniqueConstraint("guest_id", "function_id", name="uq_invite_guest_function"),
        CheckConstraint("ladies_invited >= 0", name="ck_invites_ladies_non_negative"),
        CheckConstraint("gents_invited >= 0", name="ck_invites_gents_non_negative"),
        CheckConstraint(
            "children_invited >= 0", name="ck_invites_children_non_negative"
        ),
    )
