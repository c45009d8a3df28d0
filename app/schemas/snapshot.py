"""Immutable record types that make up one read-only data snapshot.

Built from ORM rows with ``from_attributes=True``; a row that fails
validation here is reported as a data-integrity problem by the loader.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

_RECORD_CONFIG = ConfigDict(frozen=True, from_attributes=True)


class AgentRecord(BaseModel):
    model_config = _RECORD_CONFIG

    agent_id: int
    first_name: str
    last_name: str
    average_customer_service_rating: Optional[float] = Field(None, ge=0, le=5)
    years_of_service: Optional[float] = Field(None, ge=0)


class AssignmentRecord(BaseModel):
    model_config = _RECORD_CONFIG

    assignment_id: int
    agent_id: int
    communication_method: Optional[str] = None
    lead_source: Optional[str] = None
    customer_name: Optional[str] = None


class BookingRecord(BaseModel):
    model_config = _RECORD_CONFIG

    booking_id: int
    assignment_id: int
    customer_name: Optional[str] = None
    booking_status: Optional[str] = None
    total_revenue: Optional[float] = Field(None, ge=0)
    destination: Optional[str] = None
    launch_location: Optional[str] = None
    booking_date: Optional[date] = None
