from sqlalchemy import Column, DateTime, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.models.base import Base
from sqlalchemy.sql import func


class AssignmentHistory(Base):
    """Historical pairing of an agent with a customer inquiry.

    Carries the channel the customer used and where the lead came from.
    An assignment may or may not have produced a booking.
    """

    __tablename__ = "assignment_history"
    assignment_id = Column(Integer, primary_key=True, autoincrement=True)
    agent_id = Column(
        Integer,
        ForeignKey("space_travel_agents.agent_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    customer_name = Column(String(200))
    communication_method = Column(String(50))
    lead_source = Column(String(50))
    assigned_at = Column(DateTime(timezone=True), server_default=func.now())

    agent = relationship("SpaceTravelAgent", back_populates="assignments")
    booking = relationship("Booking", back_populates="assignment", uselist=False)
