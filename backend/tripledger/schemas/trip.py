"""
Pydantic schemas for Trip entity.
"""
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime
from decimal import Decimal
from tripledger.schemas.person import PersonResponse
from tripledger.schemas.expense import ExpenseResponse


class TripBase(BaseModel):
    """Base trip schema."""
    name: str
    budget: Optional[Decimal] = None


class TripCreate(TripBase):
    """Schema for trip creation."""
    pass


class TripUpdate(BaseModel):
    """Schema for trip update."""
    name: Optional[str] = None
    budget: Optional[Decimal] = None


class TripResponse(TripBase):
    """Schema for trip response."""
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TripListItem(TripResponse):
    """Schema for trip list entries."""
    person_count: int = 0
    expense_count: int = 0


class TripDetail(TripResponse):
    """
    Trip with its persons and expenses in insertion order.

    This is the snapshot handed to the balance and settlement engine.
    """
    persons: List[PersonResponse] = []
    expenses: List[ExpenseResponse] = []


class TripBulkDelete(BaseModel):
    """Schema for deleting several trips at once."""
    ids: List[str]


class TripBulkDeleteResult(BaseModel):
    """Schema for bulk delete result."""
    deleted: int
