from app.models.base import Base
from app.models.agent import SpaceTravelAgent
from app.models.assignment import AssignmentHistory
from app.models.booking import Booking

__all__ = [
    "Base",
    "SpaceTravelAgent",
    "AssignmentHistory",
    "Booking",
]
