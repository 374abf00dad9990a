"""
Pydantic schemas for Expense entity.
"""
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime
from decimal import Decimal


class ExpenseBase(BaseModel):
    """Base expense schema."""
    title: str
    amount: Decimal
    paid_by: str  # Person id of the payer
    participants: List[str]  # Person ids sharing the expense evenly


class ExpenseCreate(ExpenseBase):
    """Schema for expense creation."""
    include_payer: bool = False  # Append the payer to participants when missing


class ExpenseUpdate(ExpenseBase):
    """Schema for expense update (full replacement)."""
    include_payer: bool = False


class ExpenseResponse(ExpenseBase):
    """Schema for expense response."""
    id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
