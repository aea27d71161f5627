import logging
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import func
from typing import Any, Dict, List
from ..models.function import Function
from ..models.guest import Guest
from ..models.invite import Invite
from ..models.rsvp import RSVP
from ..schemas.function import FunctionCreate, FunctionUpdate
from ..utils.date_helpers import DateHelpers
from ..utils.validation import ValidationHelpers
from .errors import FunctionNotFoundError, ValidationFailedError

logger = logging.getLogger(__name__)


class FunctionService:
    def __init__(self, db: Session):
        self.db = db

    def get_functions(self) -> List[Dict[str, Any]]:
        """All functions by date (undated last) with invite and RSVP counts"""

        invite_counts = self._count_by_function(Invite)
        rsvp_counts = self._count_by_function(RSVP)

        functions = (
            self.db.query(Function)
            .order_by(Function.date.is_(None), Function.date.asc(), Function.name.asc())
            .all()
        )

        return [
            self._function_dict(
                function,
                invite_count=invite_counts.get(function.id, 0),
                rsvp_count=rsvp_counts.get(function.id, 0),
            )
            for function in functions
        ]

    def get_function(self, function_id: int) -> Function:
        function = self.db.query(Function).filter(Function.id == function_id).first()
        if not function:
            raise FunctionNotFoundError("Function not found")
        return function

    def get_function_details(self, function_id: int) -> Dict[str, Any]:
        """Function with its invites (by guest name) and guests not yet invited"""

        function = self.get_function(function_id)

        invites = (
            self.db.query(Invite)
            .join(Guest, Invite.guest_id == Guest.id)
            .options(selectinload(Invite.guest))
            .filter(Invite.function_id == function_id)
            .order_by(func.lower(Guest.name).asc())
            .all()
        )
        invited_guest_ids = {invite.guest_id for invite in invites}

        all_guests = self.db.query(Guest).order_by(func.lower(Guest.name).asc()).all()
        available_guests = [g for g in all_guests if g.id not in invited_guest_ids]

        rsvp_count = (
            self.db.query(func.count(RSVP.id))
            .filter(RSVP.function_id == function_id)
            .scalar()
        )

        details = self._function_dict(
            function, invite_count=len(invites), rsvp_count=rsvp_count or 0
        )
        details["invites"] = invites
        details["available_guests"] = available_guests
        return details

    def create_function(self, function_data: FunctionCreate) -> Function:
        name = ValidationHelpers.require_text(
            function_data.name, "Function name is required"
        )

        function = Function(
            name=name,
            type=ValidationHelpers.optional_text(function_data.type),
            venue=ValidationHelpers.optional_text(function_data.venue),
            date=DateHelpers.parse_iso_date(function_data.date),
        )

        self.db.add(function)
        self.db.commit()
        self.db.refresh(function)

        logger.info(f"Created function '{function.name}' ({function.id})")
        return function

    def update_function(
        self, function_id: int, function_updates: FunctionUpdate
    ) -> Function:
        """Apply only the fields present in the request"""

        function = self.get_function(function_id)
        supplied = function_updates.model_fields_set

        if "name" in supplied:
            if not function_updates.name or not function_updates.name.strip():
                raise ValidationFailedError("Function name cannot be empty")
            function.name = function_updates.name.strip()

        if "type" in supplied:
            function.type = ValidationHelpers.optional_text(function_updates.type)

        if "venue" in supplied:
            function.venue = ValidationHelpers.optional_text(function_updates.venue)

        if "date" in supplied:
            function.date = DateHelpers.parse_iso_date(function_updates.date)

        self.db.commit()
        self.db.refresh(function)

        logger.info(f"Updated function {function_id}: {sorted(supplied)}")
        return function

    def delete_function(self, function_id: int) -> None:
        """Delete a function; its invites and RSVPs go with it"""

        function = self.get_function(function_id)

        self.db.delete(function)
        self.db.commit()
        logger.info(f"Deleted function {function_id}")

    def _count_by_function(self, model) -> Dict[int, int]:
        return dict(
            self.db.query(model.function_id, func.count(model.id))
            .group_by(model.function_id)
            .all()
        )

    def _function_dict(
        self, function: Function, invite_count: int = 0, rsvp_count: int = 0
    ) -> Dict[str, Any]:
        return {
            "id": function.id,
            "name": function.name,
            "type": function.type,
            "date": function.date,
            "venue": function.venue,
            "created_at": function.created_at,
            "invite_count": invite_count,
            "rsvp_count": rsvp_count,
        }
