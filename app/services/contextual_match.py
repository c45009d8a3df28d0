import logging
from collections import defaultdict
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from app.schemas.ranking import ContextualMetrics, Inquiry
from app.schemas.snapshot import AssignmentRecord, BookingRecord
from app.services.snapshot import AssignmentOutcome, join_outcomes

logger = logging.getLogger(__name__)

RowFilter = Callable[[AssignmentOutcome], bool]


def _group_matching(
    outcomes: Sequence[AssignmentOutcome], matches: RowFilter
) -> Dict[int, List[AssignmentOutcome]]:
    grouped: Dict[int, List[AssignmentOutcome]] = defaultdict(list)
    for outcome in outcomes:
        if matches(outcome):
            grouped[outcome.agent_id].append(outcome)
    return grouped


def conversion_by_agent(
    outcomes: Sequence[AssignmentOutcome], matches: RowFilter
) -> Dict[int, float]:
    """Share of matching rows that ended in a confirmed booking, per agent.

    Agents with no matching rows are left out of the result entirely.
    """
    return {
        agent_id: sum(1 for o in rows if o.is_confirmed) / len(rows)
        for agent_id, rows in _group_matching(outcomes, matches).items()
    }


def confirmed_revenue_by_agent(
    outcomes: Sequence[AssignmentOutcome], matches: RowFilter
) -> Dict[int, float]:
    """Mean revenue over confirmed matching rows, per agent.

    Non-confirmed rows contribute nothing (not zero); an agent whose
    matching rows include no confirmed booking is left out.
    """
    result: Dict[int, float] = {}
    for agent_id, rows in _group_matching(outcomes, matches).items():
        revenues = [o.revenue for o in rows if o.is_confirmed]
        if revenues:
            result[agent_id] = sum(revenues) / len(revenues)
    return result


class ContextualMatchCalculator:
    """Per-agent track record restricted to history resembling the inquiry.

    Four independent dimensions, each computed over its own filtered
    subset of the assignment/booking join:

        - communication method  → ``comm_conversion_rate``
        - lead source           → ``lead_conversion_rate``
        - destination           → ``destination_avg_revenue``
        - launch location       → ``launch_conversion_rate``

    Communication method and lead source live on the assignment; the
    destination and launch location live on the booking, so assignments
    that never produced a booking cannot match those two.  A dimension an
    agent has no matching history for stays ``None``.
    """

    def contextualize(
        self,
        assignments: Iterable[AssignmentRecord],
        bookings: Iterable[BookingRecord],
        inquiry: Inquiry,
        *,
        outcomes: Optional[Sequence[AssignmentOutcome]] = None,
    ) -> Dict[int, ContextualMetrics]:
        if outcomes is None:
            outcomes = join_outcomes(assignments, bookings)

        comm = conversion_by_agent(
            outcomes,
            lambda o: o.assignment.communication_method
            == inquiry.communication_method,
        )
        lead = conversion_by_agent(
            outcomes, lambda o: o.assignment.lead_source == inquiry.lead_source
        )
        dest = confirmed_revenue_by_agent(
            outcomes,
            lambda o: _booking_attr(o, "destination") == inquiry.destination,
        )
        launch = conversion_by_agent(
            outcomes,
            lambda o: _booking_attr(o, "launch_location") == inquiry.launch_location,
        )

        agent_ids = set(comm) | set(lead) | set(dest) | set(launch)
        logger.debug(
            "Contextual history: comm=%d lead=%d dest=%d launch=%d agents",
            len(comm),
            len(lead),
            len(dest),
            len(launch),
        )
        return {
            agent_id: ContextualMetrics(
                comm_conversion_rate=comm.get(agent_id),
                lead_conversion_rate=lead.get(agent_id),
                destination_avg_revenue=dest.get(agent_id),
                launch_conversion_rate=launch.get(agent_id),
            )
            for agent_id in agent_ids
        }


def _booking_attr(outcome: AssignmentOutcome, name: str) -> Optional[str]:
    if outcome.booking is None:
        return None
    return getattr(outcome.booking, name)
