from typing import List, Optional

from sqlalchemy import select

from app.models.agent import SpaceTravelAgent
from app.repositories.base import BaseRepository


class AgentRepository(BaseRepository):
    """Encapsulates every SQL query that touches the ``space_travel_agents`` table."""

    async def get_by_id(self, agent_id: int) -> Optional[SpaceTravelAgent]:
        """Return a single agent by primary key, or ``None``."""
        result = await self._db.execute(
            select(SpaceTravelAgent).where(SpaceTravelAgent.agent_id == agent_id)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> List[SpaceTravelAgent]:
        """Return every agent ordered by ``agent_id``."""
        result = await self._db.execute(
            select(SpaceTravelAgent).order_by(SpaceTravelAgent.agent_id)
        )
        return list(result.scalars().all())
