"""
Person service for managing trip members.
"""
import logging
from tripledger.core.exceptions import NotFoundError, ValidationError
from tripledger.db.repository import TripRepository
from tripledger.models.person import Person
from tripledger.models.trip import Trip
from tripledger.services.trip_service import commit

logger = logging.getLogger(__name__)


def find_person(trip: Trip, person_id: str) -> Person:
    for person in trip.persons:
        if person.id == person_id:
            return person
    raise NotFoundError("Person not found")


def add_person(repo: TripRepository, trip_id: str, name: str) -> Person:
    """Add a person to a trip. Names are unique per trip, ignoring case."""
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Person name is required")

    trip = repo.get(trip_id)
    if any(p.name.lower() == cleaned.lower() for p in trip.persons):
        raise ValidationError("A person with this name already exists in this trip")

    position = max((p.position for p in trip.persons), default=-1) + 1
    person = Person(name=cleaned, position=position)
    trip.persons.append(person)
    commit(repo)

    logger.info(f"Added person {person.id} ({person.name}) to trip {trip_id}")
    return person


def delete_person(repo: TripRepository, trip_id: str, person_id: str) -> None:
    """Remove a person who is not involved in any expense."""
    trip = repo.get(trip_id)
    person = find_person(trip, person_id)

    in_use = any(
        expense.paid_by == person_id or person_id in expense.participants
        for expense in trip.expenses
    )
    if in_use:
        raise ValidationError("Cannot delete person. They are involved in one or more expenses.")

    trip.persons.remove(person)
    commit(repo)
    logger.info(f"Removed person {person_id} from trip {trip_id}")
