"""
Pydantic schemas for balances and settlements.
"""
from pydantic import BaseModel, Field
from typing import List, Dict, Optional


class Settlement(BaseModel):
    """A single transfer from a debtor to a creditor."""
    model_config = {"populate_by_name": True, "frozen": True}

    from_id: str = Field(alias="from")  # Debtor person id
    to: str  # Creditor person id
    amount: float


class Transfer(Settlement):
    """Settlement enriched with display names."""
    from_name: str
    to_name: str


class BalancesResponse(BaseModel):
    """Schema for per-person balances of a trip."""
    trip_id: str
    balances: Dict[str, float]  # person_id -> balance (positive = is owed)


class SettlementResponse(BalancesResponse):
    """Schema for balances plus the transfers that settle them."""
    transfers: List[Transfer]


class PersonSummary(BaseModel):
    """Schema for one row of the expense summary."""
    person_id: str
    name: str
    total_paid: float
    total_share: float
    balance: float


class TripSummaryResponse(BaseModel):
    """Schema for trip expense summary."""
    trip_id: str
    trip_name: str
    currency_symbol: str
    expense_count: int
    total_spent: float
    budget: Optional[float] = None
    remaining_budget: Optional[float] = None
    is_over_budget: bool = False
    persons: List[PersonSummary]
