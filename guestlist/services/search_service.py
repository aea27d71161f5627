import logging
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import func
from typing import Any, Dict, Optional
from ..models.function import Function
from ..models.guest import Guest
from ..models.rsvp import RSVP
from ..utils.constants import ResponseMessages
from .errors import ValidationFailedError

logger = logging.getLogger(__name__)


class SearchService:
    def __init__(self, db: Session):
        self.db = db

    def find_best_match(self, query: str) -> Optional[Guest]:
        """Exact case-insensitive name match first, then the first name
        containing the query"""

        needle = query.strip().lower()
        options = (
            selectinload(Guest.invites),
            selectinload(Guest.rsvps).selectinload(RSVP.function),
        )

        exact = (
            self.db.query(Guest)
            .options(*options)
            .filter(func.lower(Guest.name) == needle)
            .first()
        )
        if exact:
            return exact

        return (
            self.db.query(Guest)
            .options(*options)
            .filter(func.lower(Guest.name).contains(needle, autoescape=True))
            .order_by(func.lower(Guest.name).asc(), Guest.id.asc())
            .first()
        )

    def search_guest(self, query: Optional[str]) -> Dict[str, Any]:
        """Invite and RSVP status of the best matching guest for every function"""

        if not query or not query.strip():
            raise ValidationFailedError(ResponseMessages.QUERY_REQUIRED)

        guest = self.find_best_match(query)
        if not guest:
            logger.info(f"No guest matches '{query.strip()}'")
            return {"guest": None, "message": ResponseMessages.GUEST_NOT_FOUND}

        functions = (
            self.db.query(Function)
            .order_by(Function.date.is_(None), Function.date.asc(), Function.id.asc())
            .all()
        )
        invites_by_function = {invite.function_id: invite for invite in guest.invites}
        rsvps_by_function = {rsvp.function_id: rsvp for rsvp in guest.rsvps}

        function_overview = []
        for function in functions:
            invite = invites_by_function.get(function.id)
            rsvp = rsvps_by_function.get(function.id)

            function_overview.append(
                {
                    "function_id": function.id,
                    "function_name": function.name,
                    "invited": invite is not None,
                    "ladies_invited": invite.ladies_invited if invite else 0,
                    "gents_invited": invite.gents_invited if invite else 0,
                    "children_invited": invite.children_invited if invite else 0,
                    "rsvp_received": rsvp is not None,
                    "ladies_final": rsvp.ladies_final if rsvp else 0,
                    "gents_final": rsvp.gents_final if rsvp else 0,
                    "children_final": rsvp.children_final if rsvp else 0,
                    "rsvp_notes": (rsvp.notes or None) if rsvp else None,
                }
            )

        return {
            "guest": {
                "id": guest.id,
                "name": guest.name,
                "ladies": guest.ladies,
                "gents": guest.gents,
                "children": guest.children,
            },
            "function_overview": function_overview,
            "has_rsvp": len(guest.rsvps) > 0,
            "all_rsvp_notes": [
                {"function_name": rsvp.function.name, "notes": rsvp.notes}
                for rsvp in guest.rsvps
                if rsvp.notes
            ],
        }
