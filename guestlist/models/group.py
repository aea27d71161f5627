from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    ForeignKey,
    Boolean,
    Index,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base


class Group(Base):
    __tablename__ = "groups"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    is_predefined = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    guests = relationship("Guest", back_populates="group")
    label_links = relationship(
        "GroupLabel",
        back_populates="group",
        cascade="all, delete-orphan",
    )

    @property
    def labels(self):
        return [link.label for link in self.label_links]


class Label(Base):
    __tablename__ = "labels"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    group_links = relationship(
        "GroupLabel",
        back_populates="label",
        cascade="all, delete-orphan",
    )


class GroupLabel(Base):
    __tablename__ = "group_labels"

    group_id = Column(
        Integer, ForeignKey("groups.id", ondelete="CASCADE"), primary_key=True
    )
    label_id = Column(
        Integer, ForeignKey("labels.id", ondelete="CASCADE"), primary_key=True
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    group = relationship("Group", back_populates="label_links")
    label = relationship("Label", back_populates="group_links")


# Names are unique regardless of case
Index("uq_groups_name_lower", func.lower(Group.name), unique=True)
Index("uq_labels_name_lower", func.lower(Label.name), unique=True)
