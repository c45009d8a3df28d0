import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence

from app.core.constants import CANCELLED_STATUS, CONFIRMED_STATUS, PENDING_STATUS
from app.schemas.agent import AgentSummary
from app.schemas.snapshot import AgentRecord, AssignmentRecord, BookingRecord
from app.services.snapshot import AssignmentOutcome, join_outcomes

logger = logging.getLogger(__name__)


class AgentSummaryAggregator:
    """Roll assignment history up into one performance summary per agent.

    Every agent in the input appears in the output.  Agents without any
    assignments get all-zero metrics so they stay rankable, just low.

    Formulas:
        - ``conversion_rate``  confirmed / total assignments (0 if none)
        - ``avg_revenue_per_booking``  confirmed revenue / confirmed (0 if none)

    An assignment without a booking counts towards the total but towards
    none of the status buckets.
    """

    def summarize(
        self,
        agents: Iterable[AgentRecord],
        assignments: Iterable[AssignmentRecord],
        bookings: Iterable[BookingRecord],
        *,
        outcomes: Optional[Sequence[AssignmentOutcome]] = None,
    ) -> Dict[int, AgentSummary]:
        """Summaries keyed by agent id.

        Pass *outcomes* when the assignment/booking join is already known
        (see :attr:`DataSnapshot.outcomes`) to skip recomputing it.
        """
        if outcomes is None:
            outcomes = join_outcomes(assignments, bookings)

        by_agent: Dict[int, List[AssignmentOutcome]] = defaultdict(list)
        for outcome in outcomes:
            by_agent[outcome.agent_id].append(outcome)

        summaries = {
            agent.agent_id: self._summarize_agent(
                agent, by_agent.get(agent.agent_id, [])
            )
            for agent in agents
        }
        logger.debug("Summarised %d agents", len(summaries))
        return summaries

    @staticmethod
    def _summarize_agent(
        agent: AgentRecord, outcomes: List[AssignmentOutcome]
    ) -> AgentSummary:
        total = len(outcomes)
        statuses = [o.status for o in outcomes]
        confirmed = statuses.count(CONFIRMED_STATUS)
        confirmed_revenue = sum(o.revenue for o in outcomes if o.is_confirmed)

        return AgentSummary(
            agent_id=agent.agent_id,
            average_customer_service_rating=float(
                agent.average_customer_service_rating or 0.0
            ),
            years_of_service=float(agent.years_of_service or 0.0),
            total_assignments=total,
            confirmed_bookings=confirmed,
            cancelled_bookings=statuses.count(CANCELLED_STATUS),
            pending_bookings=statuses.count(PENDING_STATUS),
            conversion_rate=confirmed / total if total else 0.0,
            avg_revenue_per_booking=confirmed_revenue / confirmed if confirmed else 0.0,
        )
