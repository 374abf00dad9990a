"""
Person management routes.
"""
from fastapi import APIRouter, Depends, Response, status
from tripledger.db.repository import TripRepository
from tripledger.schemas.person import PersonCreate, PersonResponse
from tripledger.services import person_service
from tripledger.api.dependencies import get_repository

router = APIRouter(prefix="/trips", tags=["persons"])


@router.post("/{trip_id}/persons", response_model=PersonResponse, status_code=status.HTTP_201_CREATED)
async def add_person(
    trip_id: str,
    person_data: PersonCreate,
    repo: TripRepository = Depends(get_repository)
):
    """Add a person to the trip."""
    return person_service.add_person(repo, trip_id, person_data.name)


@router.delete("/{trip_id}/persons/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_person(
    trip_id: str,
    person_id: str,
    repo: TripRepository = Depends(get_repository)
):
    """Remove a person who is not part of any expense."""
    person_service.delete_person(repo, trip_id, person_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
