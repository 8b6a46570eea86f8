"""
Document schemas.

Each pydantic model describes one MongoDB collection. The in-memory backend
stores the same ``model_dump()`` output, so both modes hold identical shapes.
"""

from datetime import datetime, timezone
from typing import Any, List, Union

from pydantic import BaseModel, Field, NonNegativeFloat, NonNegativeInt

# Whole prices stay integers so they serialize as 25, not 25.0.
Price = Union[NonNegativeInt, NonNegativeFloat]


class Lesson(BaseModel):
    """
    Lessons collection schema
    Collection name: "lessons"
    """
    subject: str = Field(..., description="Lesson subject shown in the catalog")
    price: Price = Field(..., description="Price per seat")
    location: str = Field(..., description="Where the lesson takes place")
    spaces: int = Field(..., ge=0, description="Seats still available")
    description: str = Field("", description="Short description")
    image: str = Field("", description="Image path served under /images")


class Order(BaseModel):
    """
    Orders collection schema
    Collection name: "order"
    """
    name: str = Field(..., description="Customer name")
    phone: str = Field(..., description="Customer phone number")
    email: str = Field(..., description="Customer email")
    items: List[Any] = Field(..., min_length=1, description="Ordered lesson references")
    createdAt: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class User(BaseModel):
    """
    Users collection schema
    Collection name: "users"
    """
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address (unique)")
    password: str = Field(..., description="Argon2 password hash")
