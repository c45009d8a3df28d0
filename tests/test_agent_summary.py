"""Tests for the AgentSummaryAggregator."""

import pytest

from app.core.exceptions import DataIntegrityError
from app.schemas.snapshot import AgentRecord, AssignmentRecord, BookingRecord
from app.services.agent_summary import AgentSummaryAggregator
from app.services.snapshot import DataSnapshot


def _make_agent(agent_id: int, rating=4.0, years=5):
    return AgentRecord(
        agent_id=agent_id,
        first_name=f"Agent{agent_id}",
        last_name="Example",
        average_customer_service_rating=rating,
        years_of_service=years,
    )


def _make_assignment(assignment_id: int, agent_id: int, **kwargs):
    return AssignmentRecord(assignment_id=assignment_id, agent_id=agent_id, **kwargs)


def _make_booking(assignment_id: int, status: str, revenue=None, **kwargs):
    return BookingRecord(
        booking_id=assignment_id * 10,
        assignment_id=assignment_id,
        booking_status=status,
        total_revenue=revenue,
        **kwargs,
    )


@pytest.fixture
def aggregator() -> AgentSummaryAggregator:
    return AgentSummaryAggregator()


class TestSummarize:
    """Verify per-agent counts, rates and averages."""

    def test_counts_and_rates(self, aggregator: AgentSummaryAggregator):
        """10 assignments, 4 confirmed → 40% conversion, 125k average revenue."""
        agents = [_make_agent(1)]
        assignments = [_make_assignment(i, 1) for i in range(1, 11)]
        bookings = [
            _make_booking(1, "Confirmed", 100_000),
            _make_booking(2, "Confirmed", 150_000),
            _make_booking(3, "Confirmed", 200_000),
            _make_booking(4, "Confirmed", 50_000),
            _make_booking(5, "Cancelled", 90_000),
            _make_booking(6, "Pending"),
        ]

        summary = aggregator.summarize(agents, assignments, bookings)[1]

        assert summary.total_assignments == 10
        assert summary.confirmed_bookings == 4
        assert summary.cancelled_bookings == 1
        assert summary.pending_bookings == 1
        assert summary.conversion_rate == pytest.approx(0.4)
        assert summary.avg_revenue_per_booking == pytest.approx(125_000)

    def test_agent_without_assignments_gets_zeros(
        self, aggregator: AgentSummaryAggregator
    ):
        """An agent with no history still appears, with all-zero metrics."""
        agents = [_make_agent(1), _make_agent(2)]
        assignments = [_make_assignment(1, 1)]
        bookings = [_make_booking(1, "Confirmed", 10_000)]

        summaries = aggregator.summarize(agents, assignments, bookings)

        assert set(summaries) == {1, 2}
        idle = summaries[2]
        assert idle.total_assignments == 0
        assert idle.confirmed_bookings == 0
        assert idle.conversion_rate == 0.0
        assert idle.avg_revenue_per_booking == 0.0

    def test_no_confirmed_bookings_means_zero_revenue(
        self, aggregator: AgentSummaryAggregator
    ):
        agents = [_make_agent(1)]
        assignments = [_make_assignment(1, 1), _make_assignment(2, 1)]
        bookings = [_make_booking(1, "Cancelled", 75_000)]

        summary = aggregator.summarize(agents, assignments, bookings)[1]

        assert summary.total_assignments == 2
        assert summary.conversion_rate == 0.0
        assert summary.avg_revenue_per_booking == 0.0

    def test_cancelled_revenue_is_ignored(self, aggregator: AgentSummaryAggregator):
        agents = [_make_agent(1)]
        assignments = [_make_assignment(1, 1), _make_assignment(2, 1)]
        bookings = [
            _make_booking(1, "Confirmed", 60_000),
            _make_booking(2, "Cancelled", 500_000),
        ]

        summary = aggregator.summarize(agents, assignments, bookings)[1]

        assert summary.avg_revenue_per_booking == pytest.approx(60_000)
        assert summary.conversion_rate == pytest.approx(0.5)

    def test_missing_revenue_counts_as_zero(self, aggregator: AgentSummaryAggregator):
        """A confirmed booking with NULL revenue still counts as a booking."""
        agents = [_make_agent(1)]
        assignments = [_make_assignment(1, 1), _make_assignment(2, 1)]
        bookings = [
            _make_booking(1, "Confirmed", 100_000),
            _make_booking(2, "Confirmed", None),
        ]

        summary = aggregator.summarize(agents, assignments, bookings)[1]

        assert summary.confirmed_bookings == 2
        assert summary.avg_revenue_per_booking == pytest.approx(50_000)

    def test_missing_rating_and_tenure_default_to_zero(
        self, aggregator: AgentSummaryAggregator
    ):
        agents = [_make_agent(1, rating=None, years=None)]

        summary = aggregator.summarize(agents, [], [])[1]

        assert summary.average_customer_service_rating == 0.0
        assert summary.years_of_service == 0.0

    def test_unknown_status_counts_towards_total_only(
        self, aggregator: AgentSummaryAggregator
    ):
        agents = [_make_agent(1)]
        assignments = [_make_assignment(1, 1), _make_assignment(2, 1)]
        bookings = [
            _make_booking(1, "Waitlisted", 40_000),
            _make_booking(2, "Confirmed", 80_000),
        ]

        summary = aggregator.summarize(agents, assignments, bookings)[1]

        assert summary.total_assignments == 2
        assert summary.confirmed_bookings == 1
        assert summary.cancelled_bookings == 0
        assert summary.pending_bookings == 0
        assert summary.conversion_rate == pytest.approx(0.5)

    def test_conversion_rate_is_bounded(self, aggregator: AgentSummaryAggregator):
        agents = [_make_agent(i) for i in range(1, 4)]
        assignments = [_make_assignment(i, (i % 3) + 1) for i in range(1, 13)]
        bookings = [_make_booking(i, "Confirmed", 1_000) for i in range(1, 13, 2)]

        for summary in aggregator.summarize(agents, assignments, bookings).values():
            assert 0.0 <= summary.conversion_rate <= 1.0

    def test_booking_for_unknown_assignment_raises(
        self, aggregator: AgentSummaryAggregator
    ):
        agents = [_make_agent(1)]
        assignments = [_make_assignment(1, 1)]
        bookings = [_make_booking(99, "Confirmed", 1_000)]

        with pytest.raises(DataIntegrityError):
            aggregator.summarize(agents, assignments, bookings)


class TestPrecomputedOutcomes:
    def test_matches_fresh_join(self):
        aggregator = AgentSummaryAggregator()
        agents = [_make_agent(1), _make_agent(2)]
        assignments = [_make_assignment(1, 1), _make_assignment(2, 1)]
        bookings = [_make_booking(1, "Confirmed", revenue=80_000)]
        snapshot = DataSnapshot(agents, assignments, bookings)

        reused = aggregator.summarize(
            agents, assignments, bookings, outcomes=snapshot.outcomes
        )

        assert reused == aggregator.summarize(agents, assignments, bookings)
        assert reused[1].conversion_rate == pytest.approx(0.5)
        assert reused[2].total_assignments == 0
