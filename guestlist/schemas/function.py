from typing import List, Optional
from datetime import datetime
from .common import CamelModel
from .guest import GuestSummary


class FunctionCreate(CamelModel):
    name: Optional[str] = None
    type: Optional[str] = None
    date: Optional[str] = None  # ISO date string
    venue: Optional[str] = None


class FunctionUpdate(FunctionCreate):
    """Partial update: only keys present in the request body are applied"""


class FunctionSummary(CamelModel):
    id: int
    name: str
    type: Optional[str] = None
    date: Optional[datetime] = None
    venue: Optional[str] = None


class FunctionResponse(FunctionSummary):
    created_at: Optional[datetime] = None
    invite_count: int = 0
    rsvp_count: int = 0


class InviteWithGuest(CamelModel):
    id: int
    guest_id: int
    function_id: int
    ladies_invited: int = 0
    gents_invited: int = 0
    children_invited: int = 0
    created_at: Optional[datetime] = None
    guest: GuestSummary


class FunctionDetailResponse(FunctionResponse):
    invites: List[InviteWithGuest] = []
    available_guests: List[GuestSummary] = []
