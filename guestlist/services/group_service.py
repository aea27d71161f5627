import logging
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import IntegrityError
from sqlalchemy import func
from typing import Any, Dict, List, Optional
from ..models.group import Group, Label, GroupLabel
from ..models.guest import Guest
from ..schemas.group import GroupCreate, LabelCreate
from ..utils.constants import AppConstants
from ..utils.validation import ValidationHelpers
from .errors import (
    DuplicateError,
    GroupNotFoundError,
    LabelNotFoundError,
    NotFoundError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)


class GroupService:
    def __init__(self, db: Session):
        self.db = db

    # Groups

    def get_groups(self) -> List[Dict[str, Any]]:
        """All groups by name with guest counts and labels"""

        guest_counts = dict(
            self.db.query(Guest.group_id, func.count(Guest.id))
            .group_by(Guest.group_id)
            .all()
        )
        groups = (
            self.db.query(Group)
            .options(selectinload(Group.label_links).selectinload(GroupLabel.label))
            .order_by(Group.name.asc())
            .all()
        )

        return [
            {
                "id": group.id,
                "name": group.name,
                "is_predefined": group.is_predefined,
                "created_at": group.created_at,
                "guest_count": guest_counts.get(group.id, 0),
                "labels": sorted(group.labels, key=lambda label: label.name.lower()),
            }
            for group in groups
        ]

    def get_group(self, group_id: int) -> Group:
        group = self.db.query(Group).filter(Group.id == group_id).first()
        if not group:
            raise GroupNotFoundError("Group not found")
        return group

    def find_group_by_name(self, name: str) -> Optional[Group]:
        """Case-insensitive lookup on the trimmed name"""
        return (
            self.db.query(Group)
            .filter(func.lower(Group.name) == name.strip().lower())
            .first()
        )

    def create_group(self, group_data: GroupCreate) -> Group:
        name = ValidationHelpers.require_text(group_data.name, "Group name is required")

        if self.find_group_by_name(name):
            raise DuplicateError("Group with this name already exists")

        group = Group(name=name, is_predefined=group_data.is_predefined)
        self.db.add(group)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateError("Group with this name already exists")
        self.db.refresh(group)

        logger.info(f"Created group '{group.name}' ({group.id})")
        return group

    def find_or_create_group(self, name: str) -> Group:
        """Resolve a group case-insensitively, creating it when missing.

        A concurrent request may create the same group between the lookup and
        the insert; the unique index then rejects ours and the winner is
        re-queried instead of failing.
        """
        name = name.strip()
        group = self.find_group_by_name(name)
        if group:
            return group

        group = Group(name=name)
        self.db.add(group)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.info(f"Group '{name}' was created concurrently, re-querying")
            group = self.find_group_by_name(name)
            if not group:
                raise
            return group

        self.db.refresh(group)
        logger.info(f"Created group '{group.name}' ({group.id})")
        return group

    def get_default_group(self) -> Group:
        return self.find_or_create_group(AppConstants.DEFAULT_GROUP_NAME)

    # Labels

    def get_labels(self) -> List[Dict[str, Any]]:
        """All labels by name with the number of groups carrying each"""

        group_counts = dict(
            self.db.query(GroupLabel.label_id, func.count(GroupLabel.group_id))
            .group_by(GroupLabel.label_id)
            .all()
        )
        labels = self.db.query(Label).order_by(Label.name.asc()).all()

        return [
            {
                "id": label.id,
                "name": label.name,
                "created_at": label.created_at,
                "group_count": group_counts.get(label.id, 0),
            }
            for label in labels
        ]

    def create_label(self, label_data: LabelCreate) -> Label:
        name = ValidationHelpers.require_text(label_data.name, "Label name is required")

        existing = (
            self.db.query(Label).filter(func.lower(Label.name) == name.lower()).first()
        )
        if existing:
            raise DuplicateError("Label with this name already exists")

        label = Label(name=name)
        self.db.add(label)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateError("Label with this name already exists")
        self.db.refresh(label)

        logger.info(f"Created label '{label.name}' ({label.id})")
        return label

    def delete_label(self, label_id: int) -> None:
        """Delete a label together with every group association"""
        label = self.db.query(Label).filter(Label.id == label_id).first()
        if not label:
            raise LabelNotFoundError("Label not found")

        self.db.delete(label)
        self.db.commit()
        logger.info(f"Deleted label {label_id}")

    # Group <-> Label associations

    def add_label_to_group(self, group_id: int, label_id: Optional[int]) -> GroupLabel:
        if not label_id:
            raise ValidationFailedError("Label ID is required")

        self.get_group(group_id)
        label = self.db.query(Label).filter(Label.id == label_id).first()
        if not label:
            raise LabelNotFoundError("Label not found")

        if self._get_group_label(group_id, label_id):
            raise DuplicateError("Label is already added to this group")

        group_label = GroupLabel(group_id=group_id, label_id=label_id)
        self.db.add(group_label)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateError("Label is already added to this group")
        self.db.refresh(group_label)

        logger.info(f"Added label {label_id} to group {group_id}")
        return group_label

    def remove_label_from_group(self, group_id: int, label_id: Optional[int]) -> None:
        if not label_id:
            raise ValidationFailedError("Label ID is required")

        group_label = self._get_group_label(group_id, label_id)
        if not group_label:
            raise NotFoundError("Label not found on this group")

        self.db.delete(group_label)
        self.db.commit()
        logger.info(f"Removed label {label_id} from group {group_id}")

    def _get_group_label(self, group_id: int, label_id: int) -> Optional[GroupLabel]:
        return (
            self.db.query(GroupLabel)
            .filter(GroupLabel.group_id == group_id, GroupLabel.label_id == label_id)
            .first()
        )
