from fastapi import APIRouter, Depends, Request

from app.core.config import settings
from app.core.rate_limit import limiter
from app.repositories.snapshot_repository import SnapshotRepository
from app.schemas.ranking import InquiryRequest, RankingResponse
from app.services.agent_ranking import AgentRankingService
from app.api.deps import get_ranking_service, get_snapshot_repo

router = APIRouter(prefix="/rankings", tags=["Rankings"])


@router.post("", response_model=RankingResponse)
@limiter.limit(settings.RANKING_RATE_LIMIT)
async def rank_agents(
    request: Request,
    request_body: InquiryRequest,
    service: AgentRankingService = Depends(get_ranking_service),
    snapshot_repo: SnapshotRepository = Depends(get_snapshot_repo),
) -> RankingResponse:
    """Rank every agent for a new customer inquiry.

    All five inquiry attributes are required; a missing one is rejected
    with ``invalid_inquiry`` before any data is read.  The first result
    is the recommended assignment.
    """
    result, snapshot = await service.rank(request_body, snapshot_repo)
    return service.to_response(result, snapshot)
