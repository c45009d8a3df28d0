import logging
from typing import Any, Mapping, NamedTuple, Optional, Tuple, Union

from pydantic import BaseModel

from app.repositories.snapshot_repository import SnapshotRepository
from app.schemas.ranking import (
    Inquiry,
    RankedAgent,
    RankedAgentOut,
    RankingResponse,
    ScoringWeights,
)
from app.services.agent_summary import AgentSummaryAggregator
from app.services.contextual_match import ContextualMatchCalculator
from app.services.inquiry_validator import InquiryValidator
from app.services.returning_customer import ReturningCustomerResolver
from app.services.score_combiner import ScoreCombiner
from app.services.snapshot import DataSnapshot

logger = logging.getLogger(__name__)


class RankingResult(NamedTuple):
    inquiry: Inquiry
    prior_agent: Optional[int]
    ranked: Tuple[RankedAgent, ...]

    @property
    def recommended_agent_id(self) -> Optional[int]:
        return self.ranked[0].agent_id if self.ranked else None


class AgentRankingService:
    """Rank agents for one customer inquiry.

    Pipeline per request:

    1. Validate the inquiry (``InvalidInquiryError`` before any read).
    2. Load a read-only snapshot of agents, assignments and bookings.
    3. Summarise every agent, compute contextual metrics for the inquiry,
       and resolve the customer's previous agent.
    4. Combine everything into a sorted list of scores.

    The service keeps no per-request state, so one instance can serve
    concurrent inquiries against the same snapshot.
    """

    def __init__(
        self,
        weights: Optional[ScoringWeights] = None,
        *,
        aggregator: Optional[AgentSummaryAggregator] = None,
        calculator: Optional[ContextualMatchCalculator] = None,
        resolver: Optional[ReturningCustomerResolver] = None,
    ) -> None:
        self._combiner = ScoreCombiner(weights)
        self._aggregator = aggregator or AgentSummaryAggregator()
        self._calculator = calculator or ContextualMatchCalculator()
        self._resolver = resolver or ReturningCustomerResolver()

    @property
    def weights(self) -> ScoringWeights:
        return self._combiner.weights

    def rank_snapshot(
        self,
        snapshot: DataSnapshot,
        inquiry: Union[Inquiry, BaseModel, Mapping[str, Any]],
    ) -> RankingResult:
        """Run the scoring pipeline against an already-loaded snapshot."""
        inquiry = InquiryValidator.validate(inquiry)

        summaries = self._aggregator.summarize(
            snapshot.agents,
            snapshot.assignments,
            snapshot.bookings,
            outcomes=snapshot.outcomes,
        )
        contextual = self._calculator.contextualize(
            snapshot.assignments,
            snapshot.bookings,
            inquiry,
            outcomes=snapshot.outcomes,
        )
        prior_agent = self._resolver.resolve_prior_agent(
            snapshot.bookings, snapshot.assignments, inquiry.customer_name
        )
        ranked = self._combiner.score(summaries, contextual, prior_agent)

        result = RankingResult(inquiry=inquiry, prior_agent=prior_agent, ranked=ranked)
        logger.info(
            "Ranked %d agents for %r; recommended agent %s",
            len(ranked),
            inquiry.customer_name,
            result.recommended_agent_id,
        )
        return result

    async def rank(
        self,
        inquiry: Union[Inquiry, BaseModel, Mapping[str, Any]],
        snapshot_repo: SnapshotRepository,
    ) -> Tuple[RankingResult, DataSnapshot]:
        """Validate *inquiry*, load a fresh snapshot and rank every agent."""
        inquiry = InquiryValidator.validate(inquiry)
        snapshot = await snapshot_repo.load_snapshot()
        return self.rank_snapshot(snapshot, inquiry), snapshot

    @staticmethod
    def to_response(result: RankingResult, snapshot: DataSnapshot) -> RankingResponse:
        """Attach agent names and 1-based ranks for the HTTP response."""
        results = []
        for position, ranked in enumerate(result.ranked, start=1):
            agent = snapshot.get_agent(ranked.agent_id)
            results.append(
                RankedAgentOut(
                    rank=position,
                    agent_id=ranked.agent_id,
                    first_name=agent.first_name if agent else "",
                    last_name=agent.last_name if agent else "",
                    score=ranked.score,
                    is_returning_match=ranked.is_returning_match,
                )
            )
        return RankingResponse(
            customer_name=result.inquiry.customer_name,
            returning_agent_id=result.prior_agent,
            recommended_agent_id=result.recommended_agent_id,
            results=results,
        )
