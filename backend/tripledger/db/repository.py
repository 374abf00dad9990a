"""
Trip repository over a SQLAlchemy session.

Mutation services receive a repository instead of a session so that the
storage backend stays behind load/save. The balance engine never sees it:
it works on TripDetail snapshots.
"""
import logging
from typing import Iterable, List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from tripledger.core.exceptions import NotFoundError
from tripledger.models.trip import Trip
from tripledger.models.expense import Expense
from tripledger.schemas.trip import TripDetail

logger = logging.getLogger(__name__)


class TripRepository:
    """Load and save trips with their persons and expenses."""

    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(Trip).options(
            selectinload(Trip.persons),
            selectinload(Trip.expenses).selectinload(Expense.participant_links)
        )

    def load(self) -> List[TripDetail]:
        """Return every trip as an immutable snapshot, oldest first."""
        trips = self._query().order_by(Trip.created_at).all()
        return [TripDetail.model_validate(trip) for trip in trips]

    def list_trips(self) -> List[Trip]:
        return self._query().order_by(Trip.created_at).all()

    def get(self, trip_id: str) -> Trip:
        """Get a trip or raise NotFoundError."""
        trip = self._query().filter(Trip.id == trip_id).first()
        if not trip:
            raise NotFoundError("Trip not found")
        return trip

    def snapshot(self, trip_id: str) -> TripDetail:
        """Detached, validated copy of a trip for the balance engine."""
        return TripDetail.model_validate(self.get(trip_id))

    def add(self, trip: Trip) -> None:
        self.db.add(trip)

    def delete(self, trip: Trip) -> None:
        self.db.delete(trip)

    def save(self, trips: Optional[Iterable[Trip]] = None) -> bool:
        """
        Persist pending changes.

        Any trips passed in are added to the session first. Returns False
        (after rolling back) when the commit fails.
        """
        try:
            if trips:
                self.db.add_all(list(trips))
            self.db.commit()
            return True
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error saving trips: {e}", exc_info=True)
            return False
