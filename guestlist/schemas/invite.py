from typing import Optional
from .common import CamelModel, InviteCounts
from .function import FunctionSummary, InviteWithGuest


class InviteUpsert(InviteCounts):
    guest_id: Optional[int] = None


class InviteUpdate(InviteCounts):
    invite_id: Optional[int] = None


class InviteIncrement(CamelModel):
    category: Optional[str] = None


class PairIncrement(InviteIncrement):
    guest_id: Optional[int] = None


class InviteResponse(InviteWithGuest):
    function: FunctionSummary
