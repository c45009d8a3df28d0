"""Schemas for inquiries, contextual metrics, and ranked results."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.core.config import Settings


class Inquiry(BaseModel):
    """A new customer inquiry to be matched against the agent pool.

    Every attribute is required; use :class:`InquiryValidator` to build
    one from untrusted input so that a missing field surfaces as
    ``InvalidInquiryError`` rather than a raw validation error.
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    customer_name: str = Field(..., min_length=1)
    communication_method: str = Field(..., min_length=1)
    lead_source: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    launch_location: str = Field(..., min_length=1)


class InquiryRequest(BaseModel):
    """Request body for ``POST /rankings``.

    Fields are optional at the HTTP layer so that missing attributes are
    reported through the domain ``invalid_inquiry`` error.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    customer_name: Optional[str] = None
    communication_method: Optional[str] = None
    lead_source: Optional[str] = None
    destination: Optional[str] = None
    launch_location: Optional[str] = None


class ContextualMetrics(BaseModel):
    """Performance restricted to history matching one inquiry attribute.

    ``None`` means the agent has no matching history for that dimension
    (absent), which is not the same as a measured ``0.0``.
    """

    model_config = ConfigDict(frozen=True)

    comm_conversion_rate: Optional[float] = Field(None, ge=0, le=1)
    lead_conversion_rate: Optional[float] = Field(None, ge=0, le=1)
    destination_avg_revenue: Optional[float] = Field(None, ge=0)
    launch_conversion_rate: Optional[float] = Field(None, ge=0, le=1)


class ScoringWeights(BaseModel):
    """Weights, normalisation constants, and the override sentinel."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    service_rating_weight: float = 0.30
    conversion_weight: float = 0.25
    revenue_weight: float = 0.25
    tenure_weight: float = 0.10
    comm_weight: float = 0.05
    lead_weight: float = 0.05
    dest_weight: float = 0.05
    launch_weight: float = 0.05
    revenue_norm: float = 200000.0
    tenure_norm: float = 20.0
    override_score: float = 999.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "ScoringWeights":
        return cls(
            service_rating_weight=settings.SERVICE_RATING_WEIGHT,
            conversion_weight=settings.CONVERSION_WEIGHT,
            revenue_weight=settings.REVENUE_WEIGHT,
            tenure_weight=settings.TENURE_WEIGHT,
            comm_weight=settings.COMM_WEIGHT,
            lead_weight=settings.LEAD_WEIGHT,
            dest_weight=settings.DEST_WEIGHT,
            launch_weight=settings.LAUNCH_WEIGHT,
            revenue_norm=settings.REVENUE_NORM,
            tenure_norm=settings.TENURE_NORM,
            override_score=settings.OVERRIDE_SCORE,
        )

    @property
    def total_weight(self) -> float:
        """Upper bound of the weighted formula when every input is in range."""
        return (
            self.service_rating_weight
            + self.conversion_weight
            + self.revenue_weight
            + self.tenure_weight
            + self.comm_weight
            + self.lead_weight
            + self.dest_weight
            + self.launch_weight
        )


class RankedAgent(BaseModel):
    model_config = ConfigDict(frozen=True)

    agent_id: int
    score: float
    is_returning_match: bool = False


class RankedAgentOut(RankedAgent):
    rank: int
    first_name: str
    last_name: str


class RankingResponse(BaseModel):
    customer_name: str
    returning_agent_id: Optional[int] = None
    recommended_agent_id: Optional[int] = None
    results: List[RankedAgentOut]
