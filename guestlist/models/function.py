from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base


class Function(Base):
    """A wedding event (mehndi, nikah, reception...) guests are invited to"""

    __tablename__ = "functions"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    type = Column(String)
    date = Column(DateTime)
    venue = Column(String)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    invites = relationship(
        "Invite",
        back_populates="function",
        cascade="all, delete-orphan",
    )
    rsvps = relationship(
        "RSVP",
        back_populates="function",
        cascade="all, delete-orphan",
    )
