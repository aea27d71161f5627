import logging
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import Optional, Tuple
from ..models.guest import Guest
from ..models.invite import Invite
from ..schemas.invite import InviteUpsert, InviteUpdate
from ..schemas.common import InviteCounts
from ..utils.constants import (
    AppConstants,
    DECREMENT_PRECEDENCE,
    INVITE_COUNT_FIELDS,
    ResponseMessages,
)
from ..utils.validation import ValidationHelpers
from .errors import (
    GuestNotFoundError,
    InviteNotFoundError,
    PermissionDeniedError,
    ValidationFailedError,
)
from .function_service import FunctionService

logger = logging.getLogger(__name__)


class InviteService:
    def __init__(self, db: Session):
        self.db = db

    def upsert_invite(
        self, function_id: int, invite_data: InviteUpsert
    ) -> Tuple[Invite, bool]:
        """Create the guest's invite to a function or replace its counts.

        Returns the invite and whether it was newly created.
        """

        if not invite_data.guest_id:
            raise ValidationFailedError("Guest ID is required")

        FunctionService(self.db).get_function(function_id)
        self._get_guest_or_raise(invite_data.guest_id)
        ladies, gents, children = self._validated_counts(invite_data)

        invite = self._get_pair(invite_data.guest_id, function_id)
        if invite:
            self._apply_counts(invite, ladies, gents, children)
            self.db.commit()
            self.db.refresh(invite)
            logger.info(f"Updated invite {invite.id} for guest {invite.guest_id}")
            return invite, False

        invite = Invite(
            guest_id=invite_data.guest_id,
            function_id=function_id,
            ladies_invited=ladies,
            gents_invited=gents,
            children_invited=children,
        )
        self.db.add(invite)
        try:
            self.db.commit()
        except IntegrityError:
            # Another request invited the same guest first; update theirs
            self.db.rollback()
            invite = self._get_pair(invite_data.guest_id, function_id)
            if not invite:
                raise
            self._apply_counts(invite, ladies, gents, children)
            self.db.commit()
            self.db.refresh(invite)
            return invite, False

        self.db.refresh(invite)
        logger.info(
            f"Invited guest {invite.guest_id} to function {function_id} ({invite.id})"
        )
        return invite, True

    def update_invite(self, function_id: int, invite_data: InviteUpdate) -> Invite:
        """Replace all three counts of an invite belonging to the function"""

        if not invite_data.invite_id:
            raise ValidationFailedError("Invite ID is required")

        invite = self._get_invite_for_function(invite_data.invite_id, function_id)
        ladies, gents, children = self._validated_counts(invite_data)

        self._apply_counts(invite, ladies, gents, children)
        self.db.commit()
        self.db.refresh(invite)

        logger.info(f"Updated invite {invite.id}")
        return invite

    def delete_invite(self, function_id: int, invite_id: Optional[int]) -> None:
        if not invite_id:
            raise ValidationFailedError("Invite ID is required")

        invite = self._get_invite_for_function(invite_id, function_id)

        self.db.delete(invite)
        self.db.commit()
        logger.info(f"Deleted invite {invite_id} from function {function_id}")

    def increment(self, invite_id: int, category: Optional[str]) -> Invite:
        """Add one person of the chosen category"""

        field = self._category_field(category)
        invite = self.get_invite(invite_id)

        self._add_one(invite, field)
        self.db.commit()
        self.db.refresh(invite)
        return invite

    def increment_for_guest(
        self, function_id: int, guest_id: Optional[int], category: Optional[str]
    ) -> Tuple[Invite, bool]:
        """Increment the pair's invite, creating it at zero on first use"""

        if not guest_id:
            raise ValidationFailedError("Guest ID is required")
        field = self._category_field(category)

        FunctionService(self.db).get_function(function_id)
        self._get_guest_or_raise(guest_id)

        invite = self._get_pair(guest_id, function_id)
        created = invite is None
        if created:
            invite = Invite(
                guest_id=guest_id,
                function_id=function_id,
                ladies_invited=0,
                gents_invited=0,
                children_invited=0,
            )
            self.db.add(invite)
            self.db.flush()

        self._add_one(invite, field)
        self.db.commit()
        self.db.refresh(invite)
        return invite, created

    def decrement(self, invite_id: int) -> Invite:
        """Remove one person, always children first, then gents, then ladies.

        The category removed does not depend on what was last added.
        """

        invite = self.get_invite(invite_id)

        for category in DECREMENT_PRECEDENCE:
            field = INVITE_COUNT_FIELDS[category]
            current = getattr(invite, field) or 0
            if current > 0:
                setattr(invite, field, current - 1)
                break
        else:
            raise ValidationFailedError(ResponseMessages.COUNT_AT_ZERO)

        self.db.commit()
        self.db.refresh(invite)
        return invite

    def get_invite(self, invite_id: int) -> Invite:
        invite = self.db.query(Invite).filter(Invite.id == invite_id).first()
        if not invite:
            raise InviteNotFoundError("Invite not found")
        return invite

    def _get_invite_for_function(self, invite_id: int, function_id: int) -> Invite:
        invite = self.get_invite(invite_id)
        if invite.function_id != function_id:
            raise PermissionDeniedError(ResponseMessages.INVITE_MISMATCH)
        return invite

    def _get_pair(self, guest_id: int, function_id: int) -> Optional[Invite]:
        return (
            self.db.query(Invite)
            .filter(Invite.guest_id == guest_id, Invite.function_id == function_id)
            .first()
        )

    def _get_guest_or_raise(self, guest_id: int) -> Guest:
        guest = self.db.query(Guest).filter(Guest.id == guest_id).first()
        if not guest:
            raise GuestNotFoundError("Guest not found")
        return guest

    def _category_field(self, category: Optional[str]) -> str:
        field = INVITE_COUNT_FIELDS.get((category or "").strip().lower())
        if not field:
            raise ValidationFailedError(
                "Invalid category. Must be ladies, gents, or children"
            )
        return field

    def _add_one(self, invite: Invite, field: str) -> None:
        current = getattr(invite, field) or 0
        if current >= AppConstants.MAX_HEADCOUNT:
            raise ValidationFailedError(
                f"Count cannot exceed {AppConstants.MAX_HEADCOUNT}"
            )
        setattr(invite, field, current + 1)

    def _validated_counts(self, counts: InviteCounts) -> Tuple[int, int, int]:
        return (
            ValidationHelpers.validate_count(counts.ladies_invited, "Ladies invited"),
            ValidationHelpers.validate_count(counts.gents_invited, "Gents invited"),
            ValidationHelpers.validate_count(
                counts.children_invited, "Children invited"
            ),
        )

    def _apply_counts(self, invite: Invite, ladies: int, gents: int, children: int):
        invite.ladies_invited = ladies
        invite.gents_invited = gents
        invite.children_invited = children
