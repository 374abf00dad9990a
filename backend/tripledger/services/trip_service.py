"""
Trip service for creating, updating and deleting trips.
"""
import logging
from decimal import Decimal
from typing import List, Optional
from tripledger.core.exceptions import TripLedgerError, ValidationError
from tripledger.core.money import to_cents
from tripledger.db.repository import TripRepository
from tripledger.models.trip import Trip

logger = logging.getLogger(__name__)


def commit(repo: TripRepository) -> None:
    """Save pending changes or raise TripLedgerError."""
    if not repo.save():
        raise TripLedgerError("Failed to save data")


def _clean_name(name: Optional[str], label: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError(f"{label} name is required")
    return cleaned


def _check_budget(budget: Optional[Decimal]) -> Optional[Decimal]:
    """Quantize to cents as stored; the stored budget must stay positive."""
    if budget is None:
        return None
    budget = to_cents(budget)
    if budget <= 0:
        raise ValidationError("Budget must be greater than 0")
    return budget


def create_trip(repo: TripRepository, name: str, budget: Optional[Decimal] = None) -> Trip:
    """Create a new trip with no persons or expenses."""
    trip = Trip(name=_clean_name(name, "Trip"), budget=_check_budget(budget))
    repo.add(trip)
    commit(repo)
    logger.info(f"Created trip {trip.id} ({trip.name})")
    return repo.get(trip.id)


def update_trip(
    repo: TripRepository,
    trip_id: str,
    name: Optional[str] = None,
    budget: Optional[Decimal] = None,
    clear_budget: bool = False
) -> Trip:
    """Rename a trip and/or change or remove its budget."""
    trip = repo.get(trip_id)
    if name is not None:
        trip.name = _clean_name(name, "Trip")
    if clear_budget:
        trip.budget = None
    elif budget is not None:
        trip.budget = _check_budget(budget)
    commit(repo)
    return repo.get(trip_id)


def delete_trip(repo: TripRepository, trip_id: str) -> None:
    """Delete a trip with its persons and expenses."""
    trip = repo.get(trip_id)
    repo.delete(trip)
    commit(repo)
    logger.info(f"Deleted trip {trip_id}")


def bulk_delete_trips(repo: TripRepository, trip_ids: List[str]) -> int:
    """Delete several trips, ignoring unknown ids. Returns how many were removed."""
    wanted = set(trip_ids)
    if not wanted:
        return 0

    trips = [trip for trip in repo.list_trips() if trip.id in wanted]
    for trip in trips:
        repo.delete(trip)
    commit(repo)

    logger.info(f"Bulk deleted {len(trips)} of {len(wanted)} requested trip(s)")
    return len(trips)
