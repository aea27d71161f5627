from typing import List, Optional
from datetime import datetime
from .common import CamelModel


class GroupCreate(CamelModel):
    name: Optional[str] = None
    is_predefined: bool = False


class LabelCreate(CamelModel):
    name: Optional[str] = None


class GroupLabelCreate(CamelModel):
    label_id: Optional[int] = None


class LabelResponse(CamelModel):
    id: int
    name: str
    created_at: Optional[datetime] = None


class LabelWithCount(LabelResponse):
    group_count: int = 0


class GroupSummary(CamelModel):
    id: int
    name: str
    is_predefined: bool = False


class GroupResponse(GroupSummary):
    created_at: Optional[datetime] = None
    guest_count: int = 0
    labels: List[LabelResponse] = []


class GroupLabelResponse(CamelModel):
    group_id: int
    label_id: int
    created_at: Optional[datetime] = None
    label: LabelResponse
