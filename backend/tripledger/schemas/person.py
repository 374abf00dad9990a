"""
Pydantic schemas for Person entity.
"""
from pydantic import BaseModel


class PersonCreate(BaseModel):
    """Schema for adding a person to a trip."""
    name: str


class PersonResponse(BaseModel):
    """Schema for person response."""
    id: str
    name: str

    class Config:
        from_attributes = True
