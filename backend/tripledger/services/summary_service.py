"""
Summary service for per-person paid/share totals and budget tracking.
"""
from typing import Dict
from tripledger.core.config import settings
from tripledger.core.money import round2
from tripledger.schemas.settlement import PersonSummary, TripSummaryResponse
from tripledger.schemas.trip import TripDetail
from tripledger.services.balance_service import calculate_balances


def summarize_trip(trip: TripDetail) -> TripSummaryResponse:
    """Summarize what each person paid, their even share, and the trip budget."""
    total_paid: Dict[str, float] = {person.id: 0.0 for person in trip.persons}
    total_share: Dict[str, float] = {person.id: 0.0 for person in trip.persons}

    for expense in trip.expenses:
        if not expense.participants:
            continue
        amount = float(expense.amount)
        split = amount / len(expense.participants)
        total_paid[expense.paid_by] = total_paid.get(expense.paid_by, 0.0) + amount
        for participant_id in expense.participants:
            total_share[participant_id] = total_share.get(participant_id, 0.0) + split

    balances = calculate_balances(trip)
    rows = [
        PersonSummary(
            person_id=person.id,
            name=person.name,
            total_paid=round2(total_paid[person.id]),
            total_share=round2(total_share[person.id]),
            balance=balances.get(person.id, 0.0)
        )
        for person in trip.persons
    ]

    # Expenses with no participants are skipped by the balances as well
    total_spent = round2(sum(
        float(expense.amount) for expense in trip.expenses if expense.participants
    ))
    budget = float(trip.budget) if trip.budget is not None else None
    remaining = round2(budget - total_spent) if budget is not None else None

    return TripSummaryResponse(
        trip_id=trip.id,
        trip_name=trip.name,
        currency_symbol=settings.CURRENCY_SYMBOL,
        expense_count=len(trip.expenses),
        total_spent=total_spent,
        budget=budget,
        remaining_budget=remaining,
        is_over_budget=remaining is not None and remaining < 0,
        persons=rows
    )
