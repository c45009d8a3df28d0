import logging
from typing import Mapping, Optional, Tuple

from app.core.constants import MAX_SERVICE_RATING
from app.core.exceptions import InvalidScoringConfigError
from app.schemas.agent import AgentSummary
from app.schemas.ranking import ContextualMetrics, RankedAgent, ScoringWeights

logger = logging.getLogger(__name__)

_NO_CONTEXT = ContextualMetrics()


class ScoreCombiner:
    """Combine summaries, contextual metrics, and the returning-customer
    override into one ranked list.

    Weighted formula (default weights shown)::

        0.30 * rating / 5
      + 0.25 * conversion_rate
      + 0.25 * avg_revenue / revenue_norm
      + 0.10 * years_of_service / tenure_norm
      + 0.05 * comm_rate        (falls back to conversion_rate)
      + 0.05 * lead_rate        (falls back to conversion_rate)
      + 0.05 * dest_revenue / revenue_norm   (falls back to avg_revenue)
      + 0.05 * launch_rate      (falls back to conversion_rate)

    A fallback applies only when the contextual value is absent; a
    measured ``0.0`` is used as-is.  Scores are not clamped, so revenue
    above ``revenue_norm`` can push a score past 1.0.

    The prior agent of a returning customer gets ``override_score``
    instead, which must exceed the sum of the weights.
    """

    def __init__(self, weights: Optional[ScoringWeights] = None) -> None:
        self._weights = weights or ScoringWeights()
        self._validate(self._weights)

    @property
    def weights(self) -> ScoringWeights:
        return self._weights

    @staticmethod
    def _validate(weights: ScoringWeights) -> None:
        if weights.revenue_norm <= 0 or weights.tenure_norm <= 0:
            raise InvalidScoringConfigError(
                "revenue_norm and tenure_norm must be positive"
            )
        negative = [
            name
            for name, value in weights.model_dump().items()
            if name.endswith("_weight") and value < 0
        ]
        if negative:
            raise InvalidScoringConfigError(
                f"Weights must be non-negative: {', '.join(sorted(negative))}"
            )
        if weights.override_score <= weights.total_weight:
            raise InvalidScoringConfigError(
                f"override_score ({weights.override_score}) must exceed the "
                f"maximum weighted score ({weights.total_weight})"
            )

    def weighted_score(
        self, summary: AgentSummary, context: Optional[ContextualMetrics] = None
    ) -> float:
        """Composite score for one agent, ignoring any override."""
        w = self._weights
        ctx = context or _NO_CONTEXT
        conversion = summary.conversion_rate
        revenue = summary.avg_revenue_per_booking

        comm = _or_fallback(ctx.comm_conversion_rate, conversion)
        lead = _or_fallback(ctx.lead_conversion_rate, conversion)
        dest_revenue = _or_fallback(ctx.destination_avg_revenue, revenue)
        launch = _or_fallback(ctx.launch_conversion_rate, conversion)

        return (
            w.service_rating_weight
            * (summary.average_customer_service_rating / MAX_SERVICE_RATING)
            + w.conversion_weight * conversion
            + w.revenue_weight * (revenue / w.revenue_norm)
            + w.tenure_weight * (summary.years_of_service / w.tenure_norm)
            + w.comm_weight * comm
            + w.lead_weight * lead
            + w.dest_weight * (dest_revenue / w.revenue_norm)
            + w.launch_weight * launch
        )

    def score(
        self,
        summaries: Mapping[int, AgentSummary],
        contextual: Mapping[int, ContextualMetrics],
        prior_agent: Optional[int] = None,
    ) -> Tuple[RankedAgent, ...]:
        """Score every summarised agent and sort by score descending.

        Ties are broken by ascending agent id so the output is fully
        deterministic.  A returning-customer match always sorts first.
        """
        ranked = []
        for agent_id, summary in summaries.items():
            if prior_agent is not None and agent_id == prior_agent:
                ranked.append(
                    RankedAgent(
                        agent_id=agent_id,
                        score=self._weights.override_score,
                        is_returning_match=True,
                    )
                )
                continue
            ranked.append(
                RankedAgent(
                    agent_id=agent_id,
                    score=self.weighted_score(summary, contextual.get(agent_id)),
                )
            )

        if prior_agent is not None and prior_agent not in summaries:
            logger.warning(
                "Prior agent %s is not in the scored agent pool; override skipped",
                prior_agent,
            )

        # The override wins even against out-of-range weighted scores
        ranked.sort(key=lambda r: (not r.is_returning_match, -r.score, r.agent_id))
        return tuple(ranked)


def _or_fallback(value: Optional[float], fallback: float) -> float:
    return fallback if value is None else value

