from typing import Optional
from datetime import datetime
from .common import CamelModel


class ExpenseCreate(CamelModel):
    description: Optional[str] = None
    amount: Optional[float] = None
    paid_by: Optional[str] = None
    note: Optional[str] = None


class ExpenseUpdate(ExpenseCreate):
    """Partial update: only keys present in the request body are applied"""


class ExpenseResponse(CamelModel):
    id: int
    description: str
    amount: float
    paid_by: str
    note: Optional[str] = None
    created_at: Optional[datetime] = None
