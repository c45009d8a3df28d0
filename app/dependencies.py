import logging
from typing import AsyncGenerator, Optional

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from redis.asyncio import Redis
from redis.exceptions import RedisError

from app.core.cache import CacheService
from app.core.config import settings
from app.core.database import get_db
from app.repositories.snapshot_repository import SnapshotRepository
from app.schemas.ranking import ScoringWeights
from app.services.agent_ranking import AgentRankingService
from app.services.agent_summary_service import AgentSummaryService

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Redis client factory
# ---------------------------------------------------------------------------


async def get_redis_client() -> AsyncGenerator[Optional[Redis], None]:
    """Yield an async Redis client for one request and close it afterwards.

    Yields ``None`` when Redis cannot be reached so callers fall back to
    uncached reads.
    """
    client = Redis.from_url(settings.REDIS_URL, decode_responses=True)
    try:
        await client.ping()
    except (RedisError, OSError):
        logger.warning("Redis unavailable – caching disabled for this request")
        await client.aclose()
        yield None
        return

    try:
        yield client
    finally:
        await client.aclose()


# ---------------------------------------------------------------------------
# Repository factory functions
# ---------------------------------------------------------------------------


async def get_snapshot_repo(
    db: AsyncSession = Depends(get_db),
) -> SnapshotRepository:
    return SnapshotRepository(db)


# ---------------------------------------------------------------------------
# Cache service factory
# ---------------------------------------------------------------------------


async def get_cache_service(
    redis_client: Optional[Redis] = Depends(get_redis_client),
) -> CacheService:
    """Build a :class:`CacheService` backed by the shared Redis client."""
    return CacheService(redis_client=redis_client)


# ---------------------------------------------------------------------------
# Service factory functions
# ---------------------------------------------------------------------------


def get_scoring_weights() -> ScoringWeights:
    """Scoring configuration read from application settings."""
    return ScoringWeights.from_settings(settings)


async def get_ranking_service(
    weights: ScoringWeights = Depends(get_scoring_weights),
) -> AgentRankingService:
    """Build an :class:`AgentRankingService` for the configured weights."""
    return AgentRankingService(weights)


async def get_agent_summary_service(
    cache: CacheService = Depends(get_cache_service),
) -> AgentSummaryService:
    """Build an :class:`AgentSummaryService` with injected dependencies."""
    return AgentSummaryService(cache=cache)
