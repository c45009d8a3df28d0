from fastapi import APIRouter, Depends

from app.schemas.agent import AgentSummaryListResponse, AgentSummaryOut
from app.services.agent_summary_service import AgentSummaryService
from app.repositories.snapshot_repository import SnapshotRepository
from app.api.deps import get_agent_summary_service, get_snapshot_repo

router = APIRouter(prefix="/agents", tags=["Agents"])


@router.get("/summaries", response_model=AgentSummaryListResponse)
async def list_agent_summaries(
    service: AgentSummaryService = Depends(get_agent_summary_service),
    snapshot_repo: SnapshotRepository = Depends(get_snapshot_repo),
) -> AgentSummaryListResponse:
    """Return the performance summary for every agent.

    Served from Redis when a cached copy exists.
    """
    return await service.get_all_summaries(snapshot_repo)


@router.get("/{agent_id}/summary", response_model=AgentSummaryOut)
async def get_agent_summary(
    agent_id: int,
    service: AgentSummaryService = Depends(get_agent_summary_service),
    snapshot_repo: SnapshotRepository = Depends(get_snapshot_repo),
) -> AgentSummaryOut:
    """Return one agent's performance summary (404 if the agent is unknown)."""
    return await service.get_agent_summary(agent_id, snapshot_repo)
