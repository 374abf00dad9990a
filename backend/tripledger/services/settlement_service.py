"""
Settlement service: turns balances into transfers that settle all debts.
"""
import logging
from typing import Dict, List, Sequence
from tripledger.core.money import EPSILON, is_credit, is_debit, round2
from tripledger.schemas.person import PersonResponse
from tripledger.schemas.settlement import (
    Settlement, Transfer, BalancesResponse, SettlementResponse
)
from tripledger.schemas.trip import TripDetail
from tripledger.services.balance_service import calculate_balances

logger = logging.getLogger(__name__)

UNKNOWN_PERSON = "Unknown"


def _person_order(balances: Dict[str, float], persons: Sequence[PersonResponse]) -> List[str]:
    """Ids in person order, followed by balance ids that have no person."""
    ordered = [person.id for person in persons if person.id in balances]
    known = set(ordered)
    ordered.extend(person_id for person_id in balances if person_id not in known)
    return ordered


def resolve_settlements(
    balances: Dict[str, float],
    persons: Sequence[PersonResponse]
) -> List[Settlement]:
    """
    Resolve who pays whom.

    Greedy matching: the largest remaining debtor pays the largest remaining
    creditor min(debt, credit) until one side runs out. This keeps the list
    short in the usual case but does not guarantee the minimum number of
    transfers.

    Ties between equal amounts keep the order of `persons` (stable sort).
    """
    creditors = []
    debtors = []
    for person_id in _person_order(balances, persons):
        balance = balances[person_id]
        if is_credit(balance):
            creditors.append({"id": person_id, "amount": balance})
        elif is_debit(balance):
            debtors.append({"id": person_id, "amount": abs(balance)})

    creditors.sort(key=lambda c: c["amount"], reverse=True)
    debtors.sort(key=lambda d: d["amount"], reverse=True)

    settlements: List[Settlement] = []
    while creditors and debtors:
        creditor = creditors[0]
        debtor = debtors[0]

        payment = min(creditor["amount"], debtor["amount"])
        # Float remnants just above a cent must not surface as 0.01 transfers
        amount = round2(payment)
        if payment > EPSILON and amount > EPSILON:
            settlements.append(Settlement(
                from_id=debtor["id"],
                to=creditor["id"],
                amount=amount
            ))

        creditor["amount"] -= payment
        debtor["amount"] -= payment

        if creditor["amount"] < EPSILON:
            creditors.pop(0)
        if debtor["amount"] < EPSILON:
            debtors.pop(0)

    return settlements


def get_trip_balances(trip: TripDetail) -> BalancesResponse:
    """Build the balances response for a trip snapshot."""
    return BalancesResponse(trip_id=trip.id, balances=calculate_balances(trip))


def get_trip_settlement(trip: TripDetail) -> SettlementResponse:
    """Calculate balances and transfers for a trip snapshot."""
    balances = calculate_balances(trip)
    settlements = resolve_settlements(balances, trip.persons)

    names = {person.id: person.name for person in trip.persons}
    transfers = [
        Transfer(
            from_id=s.from_id,
            to=s.to,
            amount=s.amount,
            from_name=names.get(s.from_id, UNKNOWN_PERSON),
            to_name=names.get(s.to, UNKNOWN_PERSON)
        )
        for s in settlements
    ]
    logger.debug(f"Trip {trip.id}: {len(transfers)} transfer(s) settle {len(balances)} balance(s)")

    return SettlementResponse(trip_id=trip.id, balances=balances, transfers=transfers)
