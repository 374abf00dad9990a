"""
Expense service for expense-related business logic.
"""
import logging
from decimal import Decimal
from typing import List, Optional, Tuple
from tripledger.core.config import settings
from tripledger.core.exceptions import NotFoundError, ValidationError
from tripledger.core.money import to_cents
from tripledger.core.utils import unique_in_order
from tripledger.db.repository import TripRepository
from tripledger.models.expense import Expense, ExpenseParticipant
from tripledger.models.trip import Trip
from tripledger.schemas.expense import ExpenseBase
from tripledger.services.trip_service import commit

logger = logging.getLogger(__name__)


def find_expense(trip: Trip, expense_id: str) -> Expense:
    for expense in trip.expenses:
        if expense.id == expense_id:
            return expense
    raise NotFoundError("Expense not found")


def _validate(
    trip: Trip,
    title: Optional[str],
    amount: Optional[Decimal],
    paid_by: Optional[str],
    participants: Optional[List[str]],
    include_payer: bool
) -> Tuple[Decimal, List[str]]:
    """
    Check an expense against the trip.

    Returns the amount quantized to cents, as it will be stored, and the
    final participant ids.

    Participants are de-duplicated in order; the payer is appended when
    include_payer is set and they are not already sharing.
    """
    if not title or not title.strip():
        raise ValidationError("Expense title is required")
    if amount is None or to_cents(amount) <= 0:
        raise ValidationError("Expense amount must be greater than 0")
    if not paid_by:
        raise ValidationError("Please select who paid for this expense")
    if not participants:
        raise ValidationError("Please select at least one participant")

    member_ids = {person.id for person in trip.persons}
    if paid_by not in member_ids:
        raise ValidationError("Payer is not a person on this trip")
    unknown = [pid for pid in participants if pid not in member_ids]
    if unknown:
        raise ValidationError(f"Participants not on this trip: {', '.join(unknown)}")

    final = unique_in_order(participants)
    if include_payer and paid_by not in final:
        final.append(paid_by)
    return to_cents(amount), final


def _set_participants(expense: Expense, participant_ids: List[str]) -> None:
    expense.participant_links = [
        ExpenseParticipant(person_id=person_id, position=index)
        for index, person_id in enumerate(participant_ids)
    ]


def add_expense(repo: TripRepository, trip_id: str, data: ExpenseBase, include_payer: bool = False) -> Expense:
    """Add an expense to a trip, split evenly across its participants."""
    trip = repo.get(trip_id)

    if len(trip.persons) < settings.MIN_PERSONS_FOR_EXPENSE:
        raise ValidationError(
            f"You need at least {settings.MIN_PERSONS_FOR_EXPENSE} persons in the trip before adding expenses"
        )

    amount, participant_ids = _validate(
        trip, data.title, data.amount, data.paid_by, data.participants, include_payer
    )

    position = max((e.position for e in trip.expenses), default=-1) + 1
    expense = Expense(
        title=data.title.strip(),
        amount=amount,
        paid_by=data.paid_by,
        position=position
    )
    _set_participants(expense, participant_ids)
    trip.expenses.append(expense)
    commit(repo)

    logger.info(f"Added expense {expense.id} ({expense.title}: {expense.amount}) to trip {trip_id}")
    return expense


def update_expense(
    repo: TripRepository,
    trip_id: str,
    expense_id: str,
    data: ExpenseBase,
    include_payer: bool = False
) -> Expense:
    """Replace an expense's title, amount, payer and participants."""
    trip = repo.get(trip_id)
    expense = find_expense(trip, expense_id)

    amount, participant_ids = _validate(
        trip, data.title, data.amount, data.paid_by, data.participants, include_payer
    )

    expense.title = data.title.strip()
    expense.amount = amount
    expense.paid_by = data.paid_by
    _set_participants(expense, participant_ids)
    commit(repo)

    logger.info(f"Updated expense {expense_id} in trip {trip_id}")
    return expense


def delete_expense(repo: TripRepository, trip_id: str, expense_id: str) -> None:
    """Delete an expense from a trip."""
    trip = repo.get(trip_id)
    expense = find_expense(trip, expense_id)
    trip.expenses.remove(expense)
    commit(repo)
    logger.info(f"Deleted expense {expense_id} from trip {trip_id}")
