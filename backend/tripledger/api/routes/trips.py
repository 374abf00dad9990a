"""
Trip management routes.
"""
from fastapi import APIRouter, Depends, Response, status
from typing import List
from tripledger.db.repository import TripRepository
from tripledger.schemas.trip import (
    TripCreate, TripUpdate, TripResponse, TripListItem, TripDetail,
    TripBulkDelete, TripBulkDeleteResult
)
from tripledger.services import trip_service
from tripledger.api.dependencies import get_repository

router = APIRouter(prefix="/trips", tags=["trips"])


@router.post("", response_model=TripResponse, status_code=status.HTTP_201_CREATED)
async def create_trip(
    trip_data: TripCreate,
    repo: TripRepository = Depends(get_repository)
):
    """Create a new trip."""
    return trip_service.create_trip(repo, trip_data.name, trip_data.budget)


@router.get("", response_model=List[TripListItem])
async def list_trips(repo: TripRepository = Depends(get_repository)):
    """List all trips with person and expense counts."""
    return [
        TripListItem(
            **TripResponse.model_validate(trip).model_dump(),
            person_count=len(trip.persons),
            expense_count=len(trip.expenses)
        )
        for trip in repo.list_trips()
    ]


@router.post("/bulk-delete", response_model=TripBulkDeleteResult)
async def bulk_delete_trips(
    payload: TripBulkDelete,
    repo: TripRepository = Depends(get_repository)
):
    """Delete several trips at once."""
    deleted = trip_service.bulk_delete_trips(repo, payload.ids)
    return TripBulkDeleteResult(deleted=deleted)


@router.get("/{trip_id}", response_model=TripDetail)
async def get_trip(trip_id: str, repo: TripRepository = Depends(get_repository)):
    """Get trip details with persons and expenses."""
    return repo.snapshot(trip_id)


@router.patch("/{trip_id}", response_model=TripResponse)
async def update_trip(
    trip_id: str,
    trip_data: TripUpdate,
    repo: TripRepository = Depends(get_repository)
):
    """Update trip name or budget; an explicit null budget removes it."""
    clear_budget = "budget" in trip_data.model_fields_set and trip_data.budget is None
    return trip_service.update_trip(
        repo, trip_id, trip_data.name, trip_data.budget, clear_budget=clear_budget
    )


@router.delete("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_trip(trip_id: str, repo: TripRepository = Depends(get_repository)):
    """Delete a trip with all its persons and expenses."""
    trip_service.delete_trip(repo, trip_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
