import logging
from datetime import date
from typing import Iterable, Optional

from app.core.constants import CONFIRMED_STATUS
from app.schemas.snapshot import AssignmentRecord, BookingRecord

logger = logging.getLogger(__name__)


class ReturningCustomerResolver:
    """Find the agent who closed this customer's most recent confirmed booking.

    Only ``Confirmed`` bookings count: a later cancelled or pending booking
    with someone else does not displace the last success.  Ties on the
    latest booking date go to the lowest assignment id, then the lowest
    booking id.  Undated bookings sort as the oldest.
    """

    def resolve_prior_agent(
        self,
        bookings: Iterable[BookingRecord],
        assignments: Iterable[AssignmentRecord],
        customer_name: str,
    ) -> Optional[int]:
        agent_by_assignment = {a.assignment_id: a.agent_id for a in assignments}

        candidates = [
            b
            for b in bookings
            if b.customer_name == customer_name
            and b.booking_status == CONFIRMED_STATUS
            and b.assignment_id in agent_by_assignment
        ]
        if not candidates:
            return None

        latest = min(
            candidates,
            key=lambda b: (
                -(b.booking_date or date.min).toordinal(),
                b.assignment_id,
                b.booking_id,
            ),
        )
        agent_id = agent_by_assignment[latest.assignment_id]
        logger.info(
            "Returning customer %r last booked with agent %s (booking %s)",
            customer_name,
            agent_id,
            latest.booking_id,
        )
        return agent_id
