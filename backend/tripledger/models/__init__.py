"""Models package - Import all models for SQLAlchemy registration."""
from tripledger.models.trip import Trip
from tripledger.models.person import Person
from tripledger.models.expense import Expense, ExpenseParticipant

__all__ = [
    "Trip",
    "Person",
    "Expense",
    "ExpenseParticipant",
]
