"""Position schemas."""
from pydantic import BaseModel, Field
from typing import Optional


class CreatePositionRequest(BaseModel):
    """Request to open a position."""
    title: str = Field(..., min_length=1)
    department: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    status: str = "Active"


class UpdatePositionRequest(BaseModel):
    """Request to update a position."""
    title: Optional[str] = None
    department: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
