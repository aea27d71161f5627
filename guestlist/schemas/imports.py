from typing import List
from .common import CamelModel
from .group import GroupSummary


class ImportResult(CamelModel):
    success: int = 0
    failed: int = 0
    errors: List[str] = []
    group: GroupSummary
