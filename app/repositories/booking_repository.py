"""Booking repository – read access to ``bookings``."""

from typing import List

from sqlalchemy import select

from app.models.assignment import AssignmentHistory
from app.models.booking import Booking
from app.repositories.base import BaseRepository


class BookingRepository(BaseRepository):
    """Encapsulates queries against the ``bookings`` table."""

    async def list_all(self) -> List[Booking]:
        """Return every booking ordered by ``booking_id``."""
        result = await self._db.execute(select(Booking).order_by(Booking.booking_id))
        return list(result.scalars().all())

    async def list_for_agent(self, agent_id: int) -> List[Booking]:
        """Return the bookings that came out of one agent's assignments."""
        result = await self._db.execute(
            select(Booking)
            .join(
                AssignmentHistory,
                AssignmentHistory.assignment_id == Booking.assignment_id,
            )
            .where(AssignmentHistory.agent_id == agent_id)
            .order_by(Booking.booking_id)
        )
        return list(result.scalars().all())
