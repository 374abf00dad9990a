"""
Expense model for tracking spending.
"""
from sqlalchemy import Column, String, Numeric, ForeignKey, Integer
from sqlalchemy.orm import relationship
from tripledger.db.base import BaseModel


class Expense(BaseModel):
    """Expense model representing a single spending event split evenly."""
    __tablename__ = "expenses"

    trip_id = Column(String(36), ForeignKey("trips.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    amount = Column(Numeric(15, 2), nullable=False)
    paid_by = Column(String(36), ForeignKey("persons.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)

    # Relationships
    trip = relationship("Trip", back_populates="expenses")
    payer = relationship("Person", foreign_keys=[paid_by])
    participant_links = relationship(
        "ExpenseParticipant",
        back_populates="expense",
        cascade="all, delete-orphan",
        order_by="ExpenseParticipant.position",
    )

    @property
    def participants(self):
        """Ids of the persons sharing this expense, in selection order."""
        return [link.person_id for link in self.participant_links]


class ExpenseParticipant(BaseModel):
    """Junction table for Expense and Person many-to-many relationship."""
    __tablename__ = "expense_participants"

    expense_id = Column(String(36), ForeignKey("expenses.id"), nullable=False, index=True)
    person_id = Column(String(36), ForeignKey("persons.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)

    # Relationships
    expense = relationship("Expense", back_populates="participant_links")
    person = relationship("Person")
