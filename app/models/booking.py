from sqlalchemy import Column, Date, Integer, Numeric, String, ForeignKey
from sqlalchemy.orm import relationship
from app.models.base import Base


class Booking(Base):
    """Commercial outcome of an assignment.

    Exactly one booking per assignment at most (UNIQUE on
    ``assignment_id``).  ``total_revenue`` is only meaningful when the
    status is ``Confirmed``.
    """

    __tablename__ = "bookings"
    booking_id = Column(Integer, primary_key=True, autoincrement=True)
    assignment_id = Column(
        Integer,
        ForeignKey("assignment_history.assignment_id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    customer_name = Column(String(200), index=True)
    booking_status = Column(String(20), nullable=False)
    total_revenue = Column(Numeric(15, 2))
    destination = Column(String(100))
    launch_location = Column(String(150))
    booking_date = Column(Date)

    assignment = relationship("AssignmentHistory", back_populates="booking")
