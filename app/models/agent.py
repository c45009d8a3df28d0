from sqlalchemy import Column, String, Integer, Numeric, DateTime, CheckConstraint
from sqlalchemy.orm import relationship
from app.models.base import Base
from sqlalchemy.sql import func


class SpaceTravelAgent(Base):
    """Space-travel sales agent who can be assigned customer inquiries.

    Rating and tenure are reference data maintained outside this
    service; both may be NULL for newly onboarded agents.
    """

    __tablename__ = "space_travel_agents"
    agent_id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True)
    average_customer_service_rating = Column(Numeric(3, 2))
    years_of_service = Column(Numeric(5, 2))
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    assignments = relationship("AssignmentHistory", back_populates="agent")

    __table_args__ = (
        CheckConstraint(
            "average_customer_service_rating BETWEEN 0 AND 5",
            name="ck_agent_rating_range",
        ),
        CheckConstraint("years_of_service >= 0", name="ck_agent_tenure_nonneg"),
    )
