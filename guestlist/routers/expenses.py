from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from ..database import get_db
from ..services.expense_service import ExpenseService
from ..schemas.expense import ExpenseCreate, ExpenseUpdate, ExpenseResponse
from ..schemas.common import SuccessResponse
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["expenses"])


@router.get("", response_model=List[ExpenseResponse])
@handle_service_errors
async def get_expenses(db: Session = Depends(get_db)):
    """List expenses, newest first"""
    expense_service = ExpenseService(db)

    return [
        ExpenseResponse.model_validate(expense)
        for expense in expense_service.get_expenses()
    ]


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_expense(expense_data: ExpenseCreate, db: Session = Depends(get_db)):
    expense_service = ExpenseService(db)

    expense = expense_service.create_expense(expense_data)
    return ExpenseResponse.model_validate(expense)


@router.get("/{expense_id}", response_model=ExpenseResponse)
@handle_service_errors
async def get_expense(expense_id: int, db: Session = Depends(get_db)):
    expense_service = ExpenseService(db)

    return ExpenseResponse.model_validate(expense_service.get_expense(expense_id))


@router.put("/{expense_id}", response_model=ExpenseResponse)
@handle_service_errors
async def update_expense(
    expense_id: int, expense_updates: ExpenseUpdate, db: Session = Depends(get_db)
):
    """Update only the fields present in the request body"""
    expense_service = ExpenseService(db)

    expense = expense_service.update_expense(expense_id, expense_updates)
    return ExpenseResponse.model_validate(expense)


@router.delete("/{expense_id}", response_model=SuccessResponse)
@handle_service_errors
async def delete_expense(expense_id: int, db: Session = Depends(get_db)):
    expense_service = ExpenseService(db)

    expense_service.delete_expense(expense_id)
    return SuccessResponse()
