"""Assignment repository – read access to ``assignment_history``."""

from typing import List

from sqlalchemy import select

from app.models.assignment import AssignmentHistory
from app.repositories.base import BaseRepository


class AssignmentRepository(BaseRepository):
    """Encapsulates queries against the ``assignment_history`` table."""

    async def list_all(self) -> List[AssignmentHistory]:
        """Return every assignment ordered by ``assignment_id``."""
        result = await self._db.execute(
            select(AssignmentHistory).order_by(AssignmentHistory.assignment_id)
        )
        return list(result.scalars().all())

    async def list_for_agent(self, agent_id: int) -> List[AssignmentHistory]:
        """Return one agent's assignments ordered by ``assignment_id``."""
        result = await self._db.execute(
            select(AssignmentHistory)
            .where(AssignmentHistory.agent_id == agent_id)
            .order_by(AssignmentHistory.assignment_id)
        )
        return list(result.scalars().all())
