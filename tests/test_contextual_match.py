"""Tests for the ContextualMatchCalculator – absent vs. zero semantics."""

import pytest

from app.schemas.ranking import Inquiry
from app.schemas.snapshot import AssignmentRecord, BookingRecord
from app.services.contextual_match import ContextualMatchCalculator

DFW = "Dallas-Fort Worth Launch Complex"
CAPE = "Cape Canaveral Spaceport"


def _make_assignment(assignment_id, agent_id, comm, lead):
    return AssignmentRecord(
        assignment_id=assignment_id,
        agent_id=agent_id,
        communication_method=comm,
        lead_source=lead,
    )


def _make_booking(assignment_id, status, revenue, destination, launch):
    return BookingRecord(
        booking_id=assignment_id,
        assignment_id=assignment_id,
        customer_name="Someone",
        booking_status=status,
        total_revenue=revenue,
        destination=destination,
        launch_location=launch,
    )


@pytest.fixture
def inquiry() -> Inquiry:
    return Inquiry(
        customer_name="John Doe",
        communication_method="Text",
        lead_source="Organic",
        destination="Mars",
        launch_location=DFW,
    )


@pytest.fixture
def history():
    assignments = [
        # agent 1 — mixed history across every dimension
        _make_assignment(1, 1, "Text", "Organic"),
        _make_assignment(2, 1, "Text", "Paid Ad"),
        _make_assignment(3, 1, "Email", "Organic"),
        # agent 2 — nothing resembling the inquiry
        _make_assignment(4, 2, "Email", "Referral"),
        # agent 3 — matching history that never converted
        _make_assignment(5, 3, "Text", "Organic"),
        # agent 4 — an unbooked assignment only
        _make_assignment(6, 4, "Phone Call", "Paid Ad"),
    ]
    bookings = [
        _make_booking(1, "Confirmed", 100_000, "Mars", DFW),
        _make_booking(2, "Cancelled", 300_000, "Mars", CAPE),
        _make_booking(4, "Confirmed", 80_000, "Moon", CAPE),
        _make_booking(5, "Cancelled", 120_000, "Mars", DFW),
    ]
    return assignments, bookings


@pytest.fixture
def metrics(history, inquiry):
    assignments, bookings = history
    return ContextualMatchCalculator().contextualize(assignments, bookings, inquiry)


class TestContextualize:
    def test_comm_conversion_rate(self, metrics):
        """Two Text assignments, one confirmed → 0.5."""
        assert metrics[1].comm_conversion_rate == pytest.approx(0.5)

    def test_unbooked_assignment_counts_as_not_confirmed(self, metrics):
        """The unbooked Organic assignment lowers the lead conversion rate."""
        assert metrics[1].lead_conversion_rate == pytest.approx(0.5)

    def test_destination_revenue_ignores_non_confirmed(self, metrics):
        """The cancelled 300k Mars booking contributes nothing."""
        assert metrics[1].destination_avg_revenue == pytest.approx(100_000)

    def test_launch_conversion_rate(self, metrics):
        assert metrics[1].launch_conversion_rate == pytest.approx(1.0)

    def test_agent_without_matching_rows_is_absent(self, metrics):
        """Agent 2 has no row matching any attribute → no entry at all."""
        assert 2 not in metrics

    def test_unbooked_assignments_never_match_booking_attributes(self, metrics):
        assert 4 not in metrics

    def test_present_zero_is_not_absent(self, metrics):
        """Agent 3 has matching history with no conversions → 0.0, not None."""
        agent3 = metrics[3]
        assert agent3.comm_conversion_rate == 0.0
        assert agent3.lead_conversion_rate == 0.0
        assert agent3.launch_conversion_rate == 0.0

    def test_destination_without_confirmed_booking_is_absent(self, metrics):
        """Matching Mars rows but none confirmed → the average is undefined."""
        assert metrics[3].destination_avg_revenue is None

    def test_dimensions_are_independent(self, history):
        """An agent can be present in one dimension and absent in the others."""
        assignments, bookings = history
        inquiry = Inquiry(
            customer_name="Jane",
            communication_method="Email",
            lead_source="Affiliate",
            destination="Europa",
            launch_location="Nowhere",
        )

        metrics = ContextualMatchCalculator().contextualize(
            assignments, bookings, inquiry
        )

        assert metrics[1].comm_conversion_rate == 0.0
        assert metrics[1].lead_conversion_rate is None
        assert metrics[1].destination_avg_revenue is None
        assert metrics[1].launch_conversion_rate is None
        assert metrics[2].comm_conversion_rate == pytest.approx(1.0)

    def test_attribute_match_is_exact(self, history):
        assignments, bookings = history
        inquiry = Inquiry(
            customer_name="Jane",
            communication_method="text",
            lead_source="organic",
            destination="mars",
            launch_location=DFW.lower(),
        )

        metrics = ContextualMatchCalculator().contextualize(
            assignments, bookings, inquiry
        )

        assert metrics == {}
