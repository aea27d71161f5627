import logging
from sqlalchemy.orm import Session
from sqlalchemy import desc
from typing import Any, List, Optional
from ..models.enums import HouseholdRole
from ..models.expense import Expense
from ..schemas.expense import ExpenseCreate, ExpenseUpdate
from ..utils.validation import ValidationHelpers
from .errors import ExpenseNotFoundError, ValidationFailedError

logger = logging.getLogger(__name__)

PAYER_ROLES = [role.value for role in HouseholdRole]


class ExpenseService:
    def __init__(self, db: Session):
        self.db = db

    def get_expenses(self) -> List[Expense]:
        return (
            self.db.query(Expense)
            .order_by(desc(Expense.created_at), desc(Expense.id))
            .all()
        )

    def get_expense(self, expense_id: int) -> Expense:
        return self._get_expense_or_raise(expense_id)

    def create_expense(self, expense_data: ExpenseCreate) -> Expense:
        description = ValidationHelpers.require_text(
            expense_data.description, "Description is required"
        )
        amount = ValidationHelpers.validate_amount(expense_data.amount)
        paid_by = self._validate_payer(expense_data.paid_by, "Paid by is required")

        expense = Expense(
            description=description,
            amount=amount,
            paid_by=paid_by,
            note=ValidationHelpers.optional_text(expense_data.note),
        )

        self.db.add(expense)
        self.db.commit()
        self.db.refresh(expense)

        logger.info(f"Recorded expense {expense.id}: {amount} paid by {paid_by}")
        return expense

    def update_expense(
        self, expense_id: int, expense_updates: ExpenseUpdate
    ) -> Expense:
        """Apply only the fields present in the request"""

        expense = self._get_expense_or_raise(expense_id)
        supplied = expense_updates.model_fields_set

        if "description" in supplied:
            expense.description = ValidationHelpers.require_text(
                expense_updates.description, "Description cannot be empty"
            )

        if "amount" in supplied:
            expense.amount = ValidationHelpers.validate_amount(expense_updates.amount)

        if "paid_by" in supplied:
            expense.paid_by = self._validate_payer(
                expense_updates.paid_by, "Paid by cannot be empty"
            )

        if "note" in supplied:
            expense.note = ValidationHelpers.optional_text(expense_updates.note)

        self.db.commit()
        self.db.refresh(expense)

        logger.info(f"Updated expense {expense_id}: {sorted(supplied)}")
        return expense

    def delete_expense(self, expense_id: int) -> None:
        expense = self._get_expense_or_raise(expense_id)

        self.db.delete(expense)
        self.db.commit()
        logger.info(f"Deleted expense {expense_id}")

    def _get_expense_or_raise(self, expense_id: int) -> Expense:
        expense = self.db.query(Expense).filter(Expense.id == expense_id).first()
        if not expense:
            raise ExpenseNotFoundError("Expense not found")
        return expense

    def _validate_payer(self, paid_by: Optional[Any], missing_message: str) -> str:
        payer = ValidationHelpers.require_text(paid_by, missing_message).lower()
        if payer not in PAYER_ROLES:
            raise ValidationFailedError(
                f"Paid by must be one of: {', '.join(PAYER_ROLES)}"
            )
        return payer
