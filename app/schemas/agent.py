from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AgentSummary(BaseModel):
    """Per-agent performance aggregate derived from assignment history.

    Rating and tenure are carried alongside the counts so the combiner
    can score an agent from this record alone.  Missing source values
    are already coerced to ``0.0``.
    """

    model_config = ConfigDict(frozen=True)

    agent_id: int
    average_customer_service_rating: float = 0.0
    years_of_service: float = 0.0
    total_assignments: int = 0
    confirmed_bookings: int = 0
    cancelled_bookings: int = 0
    pending_bookings: int = 0
    conversion_rate: float = Field(0.0, ge=0, le=1)
    avg_revenue_per_booking: float = Field(0.0, ge=0)


class AgentSummaryOut(AgentSummary):
    """Agent summary enriched with the agent's display name."""

    first_name: str
    last_name: str


class AgentSummaryListResponse(BaseModel):
    total: int
    agents: List[AgentSummaryOut]
    cached: Optional[bool] = False
