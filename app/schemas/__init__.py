"""Pydantic schemas package – re-exports for convenience."""

# Common enums
from app.schemas.common import BookingStatus as BookingStatus

# Snapshot records
from app.schemas.snapshot import (
    AgentRecord as AgentRecord,
    AssignmentRecord as AssignmentRecord,
    BookingRecord as BookingRecord,
)

# Agent schemas
from app.schemas.agent import (
    AgentSummary as AgentSummary,
    AgentSummaryOut as AgentSummaryOut,
    AgentSummaryListResponse as AgentSummaryListResponse,
)

# Ranking schemas
from app.schemas.ranking import (
    Inquiry as Inquiry,
    InquiryRequest as InquiryRequest,
    ContextualMetrics as ContextualMetrics,
    ScoringWeights as ScoringWeights,
    RankedAgent as RankedAgent,
    RankedAgentOut as RankedAgentOut,
    RankingResponse as RankingResponse,
)
