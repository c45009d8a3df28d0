"""API-layer dependency functions.

Re-exports all dependency factories from ``app.dependencies`` so that
endpoint modules only need to import from ``app.api.deps``.
"""

from app.dependencies import (
    # Repository factories
    get_snapshot_repo,
    # Service factories
    get_scoring_weights,
    get_ranking_service,
    get_agent_summary_service,
    get_cache_service,
    # Redis
    get_redis_client,
)

__all__ = [
    "get_snapshot_repo",
    "get_scoring_weights",
    "get_ranking_service",
    "get_agent_summary_service",
    "get_cache_service",
    "get_redis_client",
]
