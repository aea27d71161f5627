from typing import List, Optional
from .common import CamelModel
from .guest import GuestSummary


class FunctionOverview(CamelModel):
    function_id: int
    function_name: str
    invited: bool = False
    ladies_invited: int = 0
    gents_invited: int = 0
    children_invited: int = 0
    rsvp_received: bool = False
    ladies_final: int = 0
    gents_final: int = 0
    children_final: int = 0
    rsvp_notes: Optional[str] = None


class RSVPNote(CamelModel):
    function_name: str
    notes: str


class GuestSearchResponse(CamelModel):
    guest: Optional[GuestSummary] = None
    message: Optional[str] = None
    function_overview: List[FunctionOverview] = []
    has_rsvp: bool = False
    all_rsvp_notes: List[RSVPNote] = []
