"""
Person model for trip members.
"""
from sqlalchemy import Column, String, ForeignKey, Integer
from sqlalchemy.orm import relationship
from tripledger.db.base import BaseModel


class Person(BaseModel):
    """A member of a trip who can pay for or share expenses."""
    __tablename__ = "persons"

    trip_id = Column(String(36), ForeignKey("trips.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    position = Column(Integer, nullable=False, default=0)

    # Relationships
    trip = relationship("Trip", back_populates="persons")
