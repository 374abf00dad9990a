"""
Shared FastAPI dependencies.
"""
from fastapi import Depends
from sqlalchemy.orm import Session
from tripledger.db.repository import TripRepository
from tripledger.db.session import get_db


def get_repository(db: Session = Depends(get_db)) -> TripRepository:
    """Dependency for getting a trip repository bound to the request session."""
    return TripRepository(db)
