"""
Shared fixtures: in-memory database, API client and trip snapshots.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
import tripledger.models  # noqa: F401
from tripledger.db.base import Base
from tripledger.db.repository import TripRepository
from tripledger.db.session import get_db
from tripledger.main import app
from tripledger.schemas.expense import ExpenseResponse
from tripledger.schemas.person import PersonResponse
from tripledger.schemas.trip import TripDetail


@pytest.fixture
def db_session():
    """Fresh in-memory SQLite database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def repo(db_session):
    return TripRepository(db_session)


@pytest.fixture
def client(db_session):
    """API client bound to the in-memory database."""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def make_trip(person_ids, expenses, trip_id="trip", budget=None):
    """
    Build a trip snapshot.

    expenses is a list of (amount, paid_by, participants) tuples.
    """
    return TripDetail(
        id=trip_id,
        name="Test trip",
        budget=budget,
        persons=[PersonResponse(id=pid, name=pid.upper()) for pid in person_ids],
        expenses=[
            ExpenseResponse(
                id=f"e{index}",
                title=f"Expense {index}",
                amount=amount,
                paid_by=paid_by,
                participants=list(participants)
            )
            for index, (amount, paid_by, participants) in enumerate(expenses, start=1)
        ]
    )


@pytest.fixture
def goa_trip():
    """A pays 300 for A, B, C; B pays 300 for B, C."""
    return make_trip(
        ["a", "b", "c"],
        [
            (300, "a", ["a", "b", "c"]),
            (300, "b", ["b", "c"]),
        ]
    )


@pytest.fixture
def trip_factory():
    return make_trip
