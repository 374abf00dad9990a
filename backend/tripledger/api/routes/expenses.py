"""
Expense management routes.
"""
from fastapi import APIRouter, Depends, Response, status
from typing import List
from tripledger.db.repository import TripRepository
from tripledger.schemas.expense import ExpenseCreate, ExpenseUpdate, ExpenseResponse
from tripledger.services import expense_service
from tripledger.api.dependencies import get_repository

router = APIRouter(prefix="/trips", tags=["expenses"])


@router.get("/{trip_id}/expenses", response_model=List[ExpenseResponse])
async def list_expenses(trip_id: str, repo: TripRepository = Depends(get_repository)):
    """List a trip's expenses in the order they were added."""
    return repo.snapshot(trip_id).expenses


@router.post("/{trip_id}/expenses", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    trip_id: str,
    expense_data: ExpenseCreate,
    repo: TripRepository = Depends(get_repository)
):
    """Create a new expense split evenly across its participants."""
    expense = expense_service.add_expense(
        repo, trip_id, expense_data, include_payer=expense_data.include_payer
    )
    return ExpenseResponse.model_validate(expense)


@router.put("/{trip_id}/expenses/{expense_id}", response_model=ExpenseResponse)
async def update_expense(
    trip_id: str,
    expense_id: str,
    expense_data: ExpenseUpdate,
    repo: TripRepository = Depends(get_repository)
):
    """Replace an expense."""
    expense = expense_service.update_expense(
        repo, trip_id, expense_id, expense_data, include_payer=expense_data.include_payer
    )
    return ExpenseResponse.model_validate(expense)


@router.delete("/{trip_id}/expenses/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_expense(
    trip_id: str,
    expense_id: str,
    repo: TripRepository = Depends(get_repository)
):
    """Delete an expense."""
    expense_service.delete_expense(repo, trip_id, expense_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
