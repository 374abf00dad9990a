"""
Tests for settlement resolution.
"""
import random
from collections import Counter, defaultdict
import pytest
from tripledger.core.money import EPSILON, is_settled, round2
from tripledger.schemas.person import PersonResponse
from tripledger.services.balance_service import calculate_balances
from tripledger.services.settlement_service import resolve_settlements, get_trip_settlement


def people(*ids):
    return [PersonResponse(id=pid, name=pid.upper()) for pid in ids]


def as_tuples(settlements):
    return [(s.from_id, s.to, s.amount) for s in settlements]


def apply_settlements(balances, settlements):
    remaining = dict(balances)
    for s in settlements:
        remaining[s.from_id] += s.amount
        remaining[s.to] -= s.amount
    return remaining


def random_trip(trip_factory, seed):
    """Random trip whose splits come out in whole cents."""
    rng = random.Random(seed)
    ids = [f"p{i}" for i in range(rng.randint(2, 7))]
    expenses = []
    for _ in range(rng.randint(1, 12)):
        participants = rng.sample(ids, rng.randint(1, len(ids)))
        share_cents = rng.randint(1, 20000)
        amount = share_cents * len(participants) / 100
        expenses.append((amount, rng.choice(ids), participants))
    return trip_factory(ids, expenses)


def test_reference_scenario(goa_trip):
    balances = calculate_balances(goa_trip)
    settlements = resolve_settlements(balances, goa_trip.persons)
    assert as_tuples(settlements) == [("c", "a", 100.0)]


def test_payer_excluded_from_participants(trip_factory):
    trip = trip_factory(["x", "y", "z"], [(90, "x", ["y", "z"])])
    settlements = resolve_settlements(calculate_balances(trip), trip.persons)
    assert sorted(as_tuples(settlements)) == [("y", "x", 45.0), ("z", "x", 45.0)]


def test_chain_into_single_creditor():
    balances = {"a": -50.0, "b": -30.0, "c": 80.0}
    settlements = resolve_settlements(balances, people("a", "b", "c"))

    assert len(settlements) == 2
    assert all(s.to == "c" for s in settlements)
    assert {s.from_id for s in settlements} == {"a", "b"}
    assert sum(s.amount for s in settlements) == pytest.approx(80.0, abs=EPSILON)


def test_largest_debtor_pays_largest_creditor_first():
    balances = {"a": 70.0, "b": 30.0, "c": -20.0, "d": -80.0}
    settlements = resolve_settlements(balances, people("a", "b", "c", "d"))
    assert as_tuples(settlements) == [
        ("d", "a", 70.0),
        ("d", "b", 10.0),
        ("c", "b", 20.0),
    ]


def test_no_balances_gives_no_settlements():
    assert resolve_settlements({}, []) == []
    assert resolve_settlements({"a": 0.0, "b": 0.0}, people("a", "b")) == []


def test_balance_below_tolerance_is_settled():
    balances = {"a": 0.005, "b": -0.005}
    assert resolve_settlements(balances, people("a", "b")) == []


def test_small_residual_produces_no_transfer_for_that_person():
    balances = {"a": 10.005, "b": -10.0, "c": -0.005}
    settlements = resolve_settlements(balances, people("a", "b", "c"))
    assert as_tuples(settlements) == [("b", "a", 10.0)]


def test_no_trip_expenses_gives_no_settlements(trip_factory):
    trip = trip_factory(["a", "b", "c"], [])
    assert resolve_settlements(calculate_balances(trip), trip.persons) == []


def test_balance_without_person_is_still_settled():
    balances = {"a": 25.0, "ghost": -25.0}
    settlements = resolve_settlements(balances, people("a"))
    assert as_tuples(settlements) == [("ghost", "a", 25.0)]


def test_equal_balances_settle_as_same_multiset():
    balances = {"a": 50.0, "b": 50.0, "c": -50.0, "d": -50.0}
    settlements = resolve_settlements(balances, people("a", "b", "c", "d"))
    assert len(settlements) == 2
    assert sorted(s.amount for s in settlements) == [50.0, 50.0]
    assert {s.to for s in settlements} == {"a", "b"}
    assert {s.from_id for s in settlements} == {"c", "d"}


def test_does_not_mutate_balances():
    balances = {"a": 40.0, "b": -40.0}
    resolve_settlements(balances, people("a", "b"))
    assert balances == {"a": 40.0, "b": -40.0}


@pytest.mark.parametrize("seed", range(25))
def test_settlement_properties(trip_factory, seed):
    trip = random_trip(trip_factory, seed)
    balances = calculate_balances(trip)
    settlements = resolve_settlements(balances, trip.persons)

    # Discharges every balance
    remaining = apply_settlements(balances, settlements)
    assert all(is_settled(round2(value)) for value in remaining.values())

    # Nothing at or below the threshold
    assert all(s.amount > EPSILON for s in settlements)

    # Debtors only pay, creditors only receive, never beyond their balance
    paid = defaultdict(float)
    received = defaultdict(float)
    for s in settlements:
        assert balances[s.from_id] < 0 < balances[s.to]
        paid[s.from_id] += s.amount
        received[s.to] += s.amount
    for person_id, amount in paid.items():
        assert amount <= -balances[person_id] + 0.03
    for person_id, amount in received.items():
        assert amount <= balances[person_id] + 0.03

    # Greedy matching never needs more than n - 1 transfers
    assert len(settlements) <= max(len(trip.persons) - 1, 0)

    # Same input, same transfers
    again = resolve_settlements(balances, trip.persons)
    assert Counter(as_tuples(again)) == Counter(as_tuples(settlements))


def test_trip_settlement_names_transfers(goa_trip):
    result = get_trip_settlement(goa_trip)
    assert result.trip_id == goa_trip.id
    assert result.balances == {"a": 100.0, "b": 0.0, "c": -100.0}
    assert len(result.transfers) == 1
    transfer = result.transfers[0]
    assert (transfer.from_name, transfer.to_name, transfer.amount) == ("C", "A", 100.0)


def test_trip_settlement_unknown_name(trip_factory):
    trip = trip_factory(["a", "b"], [(30, "a", ["b", "ghost"])])
    result = get_trip_settlement(trip)
    names = {(t.from_name, t.to_name) for t in result.transfers}
    assert names == {("B", "A"), ("Unknown", "A")}


def test_settlement_serializes_from_alias():
    settlements = resolve_settlements({"a": 5.0, "b": -5.0}, people("a", "b"))
    assert settlements[0].model_dump(by_alias=True) == {"from": "b", "to": "a", "amount": 5.0}
