"""
Settlement routes: balances, transfers and expense summary.
"""
from fastapi import APIRouter, Depends
from tripledger.db.repository import TripRepository
from tripledger.schemas.settlement import (
    BalancesResponse, SettlementResponse, TripSummaryResponse
)
from tripledger.services.settlement_service import get_trip_balances, get_trip_settlement
from tripledger.services.summary_service import summarize_trip
from tripledger.api.dependencies import get_repository

router = APIRouter(prefix="/settlement", tags=["settlement"])


@router.get("/{trip_id}", response_model=SettlementResponse)
async def get_settlement(trip_id: str, repo: TripRepository = Depends(get_repository)):
    """
    Get balances and the transfers that settle them.

    Positive balance = person is owed money, negative = person owes money.
    Transfer order among exactly equal amounts is not guaranteed.
    """
    return get_trip_settlement(repo.snapshot(trip_id))


@router.get("/{trip_id}/balances", response_model=BalancesResponse)
async def get_balances(trip_id: str, repo: TripRepository = Depends(get_repository)):
    """Get the net balance of every person on the trip."""
    return get_trip_balances(repo.snapshot(trip_id))


@router.get("/{trip_id}/summary", response_model=TripSummaryResponse)
async def get_summary(trip_id: str, repo: TripRepository = Depends(get_repository)):
    """Get paid / share / balance per person and the budget position."""
    return summarize_trip(repo.snapshot(trip_id))
