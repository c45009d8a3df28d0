import logging
from typing import List, Optional

from pydantic import ValidationError

from app.core.cache import CacheService
from app.core.config import settings
from app.core.constants import SUMMARY_CACHE_KEY
from app.core.exceptions import AgentNotFoundError
from app.repositories.snapshot_repository import SnapshotRepository
from app.schemas.agent import AgentSummaryListResponse, AgentSummaryOut
from app.services.agent_summary import AgentSummaryAggregator
from app.services.snapshot import DataSnapshot

logger = logging.getLogger(__name__)


class AgentSummaryService:
    """Serves the agent performance summary view with Redis caching.

    Dependencies are injected via the constructor so the class remains
    stateless and easily testable.
    """

    def __init__(
        self,
        cache: Optional[CacheService] = None,
        aggregator: Optional[AgentSummaryAggregator] = None,
    ) -> None:
        self._cache: CacheService = cache or CacheService()
        self._aggregator = aggregator or AgentSummaryAggregator()

    def build_summaries(self, snapshot: DataSnapshot) -> List[AgentSummaryOut]:
        """Summaries for every agent in *snapshot*, ordered by agent id."""
        summaries = self._aggregator.summarize(
            snapshot.agents,
            snapshot.assignments,
            snapshot.bookings,
            outcomes=snapshot.outcomes,
        )
        return [
            AgentSummaryOut(
                **summaries[agent.agent_id].model_dump(),
                first_name=agent.first_name,
                last_name=agent.last_name,
            )
            for agent in sorted(snapshot.agents, key=lambda a: a.agent_id)
        ]

    async def get_all_summaries(
        self, snapshot_repo: SnapshotRepository
    ) -> AgentSummaryListResponse:
        """Return the summary view, served from cache when possible.

        Results are cached in Redis for ``SUMMARY_CACHE_TTL`` seconds.
        """
        cached = await self._get_cached()
        if cached is not None:
            return cached

        snapshot = await snapshot_repo.load_snapshot()
        agents = self.build_summaries(snapshot)
        response = AgentSummaryListResponse(total=len(agents), agents=agents)

        await self._cache.set_json(
            SUMMARY_CACHE_KEY,
            response.model_dump(mode="json"),
            ttl=settings.SUMMARY_CACHE_TTL,
        )
        return response

    async def get_agent_summary(
        self, agent_id: int, snapshot_repo: SnapshotRepository
    ) -> AgentSummaryOut:
        """Return one agent's summary, computed fresh from its own history."""
        snapshot = await snapshot_repo.load_agent_snapshot(agent_id)
        if snapshot is None:
            raise AgentNotFoundError(f"Agent {agent_id} not found")
        return self.build_summaries(snapshot)[0]

    async def _get_cached(self) -> Optional[AgentSummaryListResponse]:
        data = await self._cache.get_json(SUMMARY_CACHE_KEY)
        if data is None:
            return None
        try:
            response = AgentSummaryListResponse.model_validate(data)
        except ValidationError:
            logger.warning("Discarding malformed cached agent summaries")
            return None
        return response.model_copy(update={"cached": True})
