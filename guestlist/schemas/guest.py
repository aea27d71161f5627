from typing import List, Optional
from datetime import datetime
from .common import CamelModel, InviteCounts
from .group import GroupSummary


class FunctionInviteCreate(InviteCounts):
    function_id: Optional[int] = None


class GuestCreate(CamelModel):
    name: Optional[str] = None
    group_id: Optional[int] = None
    ladies: Optional[int] = 0
    gents: Optional[int] = 0
    children: Optional[int] = 0
    notes: Optional[str] = None
    function_invites: Optional[List[FunctionInviteCreate]] = None


class GuestSummary(CamelModel):
    id: int
    name: str
    ladies: int = 0
    gents: int = 0
    children: int = 0


class GuestInvite(CamelModel):
    id: int
    function_id: int
    ladies_invited: int
    gents_invited: int
    children_invited: int


class GuestResponse(GuestSummary):
    notes: Optional[str] = None
    group_id: int
    group: GroupSummary
    created_at: Optional[datetime] = None
    invites: List[GuestInvite] = []
