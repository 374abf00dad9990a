"""
Balance service: reduces a trip's expenses to one signed balance per person.
"""
import logging
from typing import Dict, Optional
from tripledger.core.money import is_settled, round2
from tripledger.schemas.trip import TripDetail

logger = logging.getLogger(__name__)


def calculate_balances(trip: Optional[TripDetail]) -> Dict[str, float]:
    """
    Calculate net balances for a trip.

    For every expense the payer is credited the full amount and each
    participant is debited amount / len(participants). A payer who also
    participates receives both. Balances are rounded to cents at the end.

    Returns person_id -> balance (positive = is owed, negative = owes),
    in trip person order. An absent trip or a trip without persons gives {}.
    """
    if trip is None or not trip.persons:
        return {}

    balances: Dict[str, float] = {person.id: 0.0 for person in trip.persons}

    for expense in trip.expenses:
        participants = list(expense.participants)
        if not participants:
            logger.warning(f"Skipping expense {expense.id} with no participants")
            continue

        amount = float(expense.amount)
        split = amount / len(participants)

        balances[expense.paid_by] = balances.get(expense.paid_by, 0.0) + amount
        for participant_id in participants:
            balances[participant_id] = balances.get(participant_id, 0.0) - split

    balances = {person_id: round2(balance) for person_id, balance in balances.items()}

    total = round2(sum(balances.values()))
    if not is_settled(total):
        logger.warning(f"Balance sum for trip {trip.id} is not zero: {total:.2f}")

    return balances
