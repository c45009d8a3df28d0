from typing import Dict, Iterable, NamedTuple, Optional, Tuple

from app.core.constants import CONFIRMED_STATUS
from app.core.exceptions import DataIntegrityError
from app.schemas.snapshot import AgentRecord, AssignmentRecord, BookingRecord


class AssignmentOutcome(NamedTuple):
    """One assignment joined to its (optional) booking."""

    assignment: AssignmentRecord
    booking: Optional[BookingRecord]

    @property
    def agent_id(self) -> int:
        return self.assignment.agent_id

    @property
    def status(self) -> Optional[str]:
        return self.booking.booking_status if self.booking else None

    @property
    def is_confirmed(self) -> bool:
        return self.status == CONFIRMED_STATUS

    @property
    def revenue(self) -> float:
        """Booking revenue, with a missing value counted as ``0.0``."""
        if self.booking is None or self.booking.total_revenue is None:
            return 0.0
        return float(self.booking.total_revenue)


def join_outcomes(
    assignments: Iterable[AssignmentRecord],
    bookings: Iterable[BookingRecord],
) -> Tuple[AssignmentOutcome, ...]:
    """Left-join assignments to bookings on ``assignment_id``.

    Raises ``DataIntegrityError`` when a booking references an unknown
    assignment or when one assignment carries more than one booking.
    """
    assignments = tuple(assignments)
    known_ids = {a.assignment_id for a in assignments}

    by_assignment: Dict[int, BookingRecord] = {}
    for booking in bookings:
        if booking.assignment_id not in known_ids:
            raise DataIntegrityError(
                f"Booking {booking.booking_id} references unknown "
                f"assignment {booking.assignment_id}"
            )
        if booking.assignment_id in by_assignment:
            raise DataIntegrityError(
                f"Assignment {booking.assignment_id} has more than one booking"
            )
        by_assignment[booking.assignment_id] = booking

    return tuple(
        AssignmentOutcome(a, by_assignment.get(a.assignment_id)) for a in assignments
    )


class DataSnapshot:
    """Read-only view of agents, assignments, and bookings for one run.

    All referential checks happen at construction, so every component
    downstream can assume a consistent snapshot.  The assignment/booking
    join is computed once and shared by every derived view.
    """

    def __init__(
        self,
        agents: Iterable[AgentRecord],
        assignments: Iterable[AssignmentRecord],
        bookings: Iterable[BookingRecord],
    ) -> None:
        self._agents: Tuple[AgentRecord, ...] = tuple(agents)
        self._assignments: Tuple[AssignmentRecord, ...] = tuple(assignments)
        self._bookings: Tuple[BookingRecord, ...] = tuple(bookings)

        self._check_unique("agent", [a.agent_id for a in self._agents])
        self._check_unique(
            "assignment", [a.assignment_id for a in self._assignments]
        )
        self._check_unique("booking", [b.booking_id for b in self._bookings])

        agent_ids = {a.agent_id for a in self._agents}
        for assignment in self._assignments:
            if assignment.agent_id not in agent_ids:
                raise DataIntegrityError(
                    f"Assignment {assignment.assignment_id} references unknown "
                    f"agent {assignment.agent_id}"
                )

        self._outcomes = join_outcomes(self._assignments, self._bookings)

    @staticmethod
    def _check_unique(kind: str, ids: list) -> None:
        if len(ids) != len(set(ids)):
            raise DataIntegrityError(f"Duplicate {kind} ids in snapshot")

    @property
    def agents(self) -> Tuple[AgentRecord, ...]:
        return self._agents

    @property
    def assignments(self) -> Tuple[AssignmentRecord, ...]:
        return self._assignments

    @property
    def bookings(self) -> Tuple[BookingRecord, ...]:
        return self._bookings

    @property
    def outcomes(self) -> Tuple[AssignmentOutcome, ...]:
        return self._outcomes

    def get_agent(self, agent_id: int) -> Optional[AgentRecord]:
        return next((a for a in self._agents if a.agent_id == agent_id), None)

    def __repr__(self) -> str:
        return (
            f"DataSnapshot(agents={len(self._agents)}, "
            f"assignments={len(self._assignments)}, "
            f"bookings={len(self._bookings)})"
        )
