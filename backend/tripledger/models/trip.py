"""
Trip model for group expense tracking.
"""
from sqlalchemy import Column, String, Numeric
from sqlalchemy.orm import relationship
from tripledger.db.base import BaseModel


class Trip(BaseModel):
    """Trip model grouping the persons who share expenses."""
    __tablename__ = "trips"

    name = Column(String(200), nullable=False)
    budget = Column(Numeric(15, 2), nullable=True)  # Optional spending target, never enforced

    # Relationships (insertion order is kept through the position columns)
    persons = relationship(
        "Person",
        back_populates="trip",
        cascade="all, delete-orphan",
        order_by="Person.position",
    )
    expenses = relationship(
        "Expense",
        back_populates="trip",
        cascade="all, delete-orphan",
        order_by="Expense.position",
    )
