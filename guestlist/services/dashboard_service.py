from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import Any, Dict
from ..models.expense import Expense
from ..models.function import Function
from ..models.guest import Guest
from ..models.rsvp import RSVP
from ..utils.service_helpers import round_currency


class DashboardService:
    def __init__(self, db: Session):
        self.db = db

    def get_stats(self) -> Dict[str, Any]:
        """Headline totals for the dashboard"""

        total_expenses = self.db.query(func.sum(Expense.amount)).scalar() or 0

        return {
            "total_guests": self.db.query(func.count(Guest.id)).scalar() or 0,
            "total_functions": self.db.query(func.count(Function.id)).scalar() or 0,
            "total_expenses": round_currency(total_expenses),
            "total_rsvps": self.db.query(func.count(RSVP.id)).scalar() or 0,
        }
