"""create agent ranking tables

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2025-08-14 09:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1b2c3d4e5f6"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "space_travel_agents",
        sa.Column("agent_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), unique=True),
        sa.Column("average_customer_service_rating", sa.Numeric(3, 2)),
        sa.Column("years_of_service", sa.Numeric(5, 2)),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
        sa.CheckConstraint(
            "average_customer_service_rating BETWEEN 0 AND 5",
            name="ck_agent_rating_range",
        ),
        sa.CheckConstraint("years_of_service >= 0", name="ck_agent_tenure_nonneg"),
    )

    op.create_table(
        "assignment_history",
        sa.Column("assignment_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "agent_id",
            sa.Integer(),
            sa.ForeignKey("space_travel_agents.agent_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("customer_name", sa.String(200)),
        sa.Column("communication_method", sa.String(50)),
        sa.Column("lead_source", sa.String(50)),
        sa.Column(
            "assigned_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
    )
    # assignment_history — per-agent aggregation and contextual filters
    op.create_index(
        "ix_assignment_history_agent_id", "assignment_history", ["agent_id"]
    )

    op.create_table(
        "bookings",
        sa.Column("booking_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "assignment_id",
            sa.Integer(),
            sa.ForeignKey("assignment_history.assignment_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("customer_name", sa.String(200)),
        sa.Column("booking_status", sa.String(20), nullable=False),
        sa.Column("total_revenue", sa.Numeric(15, 2)),
        sa.Column("destination", sa.String(100)),
        sa.Column("launch_location", sa.String(150)),
        sa.Column("booking_date", sa.Date()),
        sa.UniqueConstraint("assignment_id", name="uq_bookings_assignment_id"),
    )
    # bookings — returning-customer lookup
    op.create_index("ix_bookings_customer_name", "bookings", ["customer_name"])


def downgrade() -> None:
    op.drop_index("ix_bookings_customer_name", table_name="bookings")
    op.drop_table("bookings")
    op.drop_index("ix_assignment_history_agent_id", table_name="assignment_history")
    op.drop_table("assignment_history")
    op.drop_table("space_travel_agents")
