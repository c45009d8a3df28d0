"""Repository layer – all database access goes through here.

Repositories encapsulate SQLAlchemy queries so that the service layer
only works with immutable snapshot records.
"""

from app.repositories.agent_repository import AgentRepository
from app.repositories.assignment_repository import AssignmentRepository
from app.repositories.booking_repository import BookingRepository
from app.repositories.snapshot_repository import SnapshotRepository

__all__ = [
    "AgentRepository",
    "AssignmentRepository",
    "BookingRepository",
    "SnapshotRepository",
]
