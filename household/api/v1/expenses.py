from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from household.api.deps import get_db
from household.schemas.common import ErrorResponse, ValidationErrorResponse
from household.schemas.expense import ExpenseCreate, ExpenseUpdate, ExpenseResponse
from household.services.expense_service import ExpenseService

router = APIRouter()


@router.get("", response_model=List[ExpenseResponse])
async def list_expenses(db: AsyncSession = Depends(get_db)):
    """Get all expenses, oldest first."""
    service = ExpenseService(db)
    return await service.list_expenses()


@router.get(
    "/{expense_id}",
    response_model=ExpenseResponse,
    responses={404: {"model": ErrorResponse, "description": "Expense not found"}},
)
async def get_expense(expense_id: int, db: AsyncSession = Depends(get_db)):
    """Get a single expense by ID."""
    service = ExpenseService(db)
    return await service.get_expense(expense_id)


@router.post(
    "",
    response_model=ExpenseResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ValidationErrorResponse, "description": "Invalid expense data"}},
)
async def create_expense(data: ExpenseCreate, db: AsyncSession = Depends(get_db)):
    """
    Create a new expense.

    Income entries are filed under the reserved income category and icon.
    Variable expenses without a month/year are pinned to the current month.

    Returns:
    - 201: Expense created
    - 400: Invalid expense data
    """
    service = ExpenseService(db)
    return await service.create_expense(data)


@router.put(
    "/{expense_id}",
    response_model=ExpenseResponse,
    responses={
        400: {"model": ValidationErrorResponse, "description": "Invalid expense data"},
        404: {"model": ErrorResponse, "description": "Expense not found"},
    },
)
async def update_expense(
    expense_id: int,
    data: ExpenseUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Update an expense. Only the provided fields are changed.

    When the amount or frequency of a fixed expense changes and no snapshot
    exists for the previous year, the old terms are saved as a historical
    snapshot before the update is applied.

    Returns:
    - 200: Expense updated
    - 400: Invalid expense data
    - 404: Expense not found
    """
    service = ExpenseService(db)
    return await service.update_expense(expense_id, data)


@router.delete(
    "/{expense_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse, "description": "Expense not found"}},
)
async def delete_expense(expense_id: int, db: AsyncSession = Depends(get_db)):
    """Delete an expense."""
    service = ExpenseService(db)
    await service.delete_expense(expense_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
