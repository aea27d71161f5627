import logging
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy import func
from typing import List, Optional
from ..models.guest import Guest
from ..models.function import Function
from ..models.invite import Invite
from ..models.rsvp import RSVP
from ..schemas.guest import GuestCreate, FunctionInviteCreate
from ..utils.validation import ValidationHelpers
from .errors import DuplicateError, GuestNotFoundError
from .group_service import GroupService

logger = logging.getLogger(__name__)

DUPLICATE_GUEST_MESSAGE = "A guest with this name already exists"


class GuestService:
    def __init__(self, db: Session):
        self.db = db

    def get_guests(
        self, search: Optional[str] = None, group_id: Optional[int] = None
    ) -> List[Guest]:
        """Guests newest first, optionally filtered by name fragment and group"""

        query = self.db.query(Guest).options(selectinload(Guest.group))

        if search and search.strip():
            query = query.filter(
                func.lower(Guest.name).contains(search.strip().lower(), autoescape=True)
            )

        if group_id:
            query = query.filter(Guest.group_id == group_id)

        return query.order_by(Guest.created_at.desc(), Guest.id.desc()).all()

    def get_guest(self, guest_id: int) -> Guest:
        guest = self.db.query(Guest).filter(Guest.id == guest_id).first()
        if not guest:
            raise GuestNotFoundError("Guest not found")
        return guest

    def find_guest_by_name(self, name: str) -> Optional[Guest]:
        return (
            self.db.query(Guest)
            .filter(func.lower(Guest.name) == name.strip().lower())
            .first()
        )

    def create_guest(self, guest_data: GuestCreate) -> Guest:
        """Create a guest, resolve its group and add any initial invites"""

        name = ValidationHelpers.require_text(guest_data.name, "Name is required")

        if self.find_guest_by_name(name):
            raise DuplicateError(DUPLICATE_GUEST_MESSAGE)

        ladies = ValidationHelpers.validate_count(guest_data.ladies, "Ladies")
        gents = ValidationHelpers.validate_count(guest_data.gents, "Gents")
        children = ValidationHelpers.validate_count(guest_data.children, "Children")

        group_service = GroupService(self.db)
        if guest_data.group_id:
            group = group_service.get_group(guest_data.group_id)
        else:
            group = group_service.get_default_group()

        guest = Guest(
            name=name,
            ladies=ladies,
            gents=gents,
            children=children,
            notes=ValidationHelpers.optional_text(guest_data.notes),
            group_id=group.id,
        )
        self.db.add(guest)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateError(DUPLICATE_GUEST_MESSAGE)
        self.db.refresh(guest)

        logger.info(f"Created guest '{guest.name}' ({guest.id}) in group '{group.name}'")

        if guest_data.function_invites:
            self._create_initial_invites(guest, guest_data.function_invites)
            self.db.refresh(guest)

        return guest

    def _create_initial_invites(
        self, guest: Guest, function_invites: List[FunctionInviteCreate]
    ) -> None:
        """Best effort: a bad entry is skipped, never fatal for the guest"""

        invited_function_ids = set()
        for entry in function_invites:
            if not entry.function_id or entry.function_id in invited_function_ids:
                continue

            function = (
                self.db.query(Function).filter(Function.id == entry.function_id).first()
            )
            if not function:
                logger.warning(
                    f"Skipping invite for guest {guest.id}: "
                    f"function {entry.function_id} does not exist"
                )
                continue

            invite = Invite(
                guest_id=guest.id,
                function_id=function.id,
                ladies_invited=ValidationHelpers.clamp_count(entry.ladies_invited),
                gents_invited=ValidationHelpers.clamp_count(entry.gents_invited),
                children_invited=ValidationHelpers.clamp_count(entry.children_invited),
            )
            self.db.add(invite)
            try:
                self.db.commit()
            except SQLAlchemyError as e:
                self.db.rollback()
                logger.warning(
                    f"Could not invite guest {guest.id} to function {function.id}: {e}"
                )
                continue

            invited_function_ids.add(function.id)

    def delete_guest(self, guest_id: int) -> None:
        guest = self.get_guest(guest_id)

        self.db.delete(guest)
        self.db.commit()
        logger.info(f"Deleted guest {guest_id}")

    def delete_all_guests(self) -> int:
        """Remove every guest and, with them, every invite and RSVP"""

        self.db.query(Invite).delete(synchronize_session=False)
        self.db.query(RSVP).delete(synchronize_session=False)
        deleted_count = self.db.query(Guest).delete(synchronize_session=False)
        self.db.commit()

        logger.info(f"Deleted all guests ({deleted_count})")
        return deleted_count
