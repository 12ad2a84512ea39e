"""
Staleness checks and provider-level rollups built on top of plan-level scores.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Sequence

from provider_directory.models.acceptance import ConfidenceLevel
from provider_directory.services.confidence import weights
from provider_directory.services.confidence.scorer import (
    days_since,
    resolve_now,
    round_half_up,
)
from provider_directory.settings import settings


@dataclass
class ProviderAggregateConfidence:
    average: int
    min: int
    max: int
    needs_attention: bool

    def as_dict(self) -> dict[str, Any]:
        return {
            "average": self.average,
            "min": self.min,
            "max": self.max,
            "needsAttention": self.needs_attention,
        }


def reverification_window_days(
    confidence_score: float, days_since_update: Optional[float] = None
) -> float:
    """Days a record at `confidence_score` may go unverified before it is stale."""
    baseline = (
        settings.reverification_baseline_days
        if days_since_update is None
        else days_since_update
    )
    for min_score, multiplier in weights.REVERIFICATION_MULTIPLIERS:
        if confidence_score >= min_score:
            return baseline * multiplier
    return baseline * weights.LOW_CONFIDENCE_REVERIFICATION_MULTIPLIER


def needs_reverification(
    last_verified_at: Optional[datetime],
    confidence_score: float,
    days_since_update: Optional[float] = None,
    now: Optional[datetime] = None,
) -> bool:
    """
    True when a provider-plan record should be queued for re-verification.

    Higher confidence buys a longer window:
        score >= 90 → baseline × 2      (180 days at the default 90)
        score >= 75 → baseline × 1.5    (135)
        score >= 50 → baseline          (90)
        otherwise   → baseline × 0.5    (45)

    A record verified exactly `window` days ago is still fresh; one day more
    and it is stale. Never-verified records always need verification.
    """
    if last_verified_at is None:
        return True

    now = resolve_now(now)
    allowed_days = reverification_window_days(confidence_score, days_since_update)
    return days_since(last_verified_at, now) > allowed_days


def calculate_provider_aggregate_confidence(
    plan_confidence_scores: Sequence[float],
) -> ProviderAggregateConfidence:
    """Summarise one provider's plan-level scores; an empty list needs attention."""
    scores = list(plan_confidence_scores)
    if not scores:
        return ProviderAggregateConfidence(
            average=0, min=0, max=0, needs_attention=True
        )

    average = round_half_up(sum(scores) / len(scores))
    lowest = min(scores)
    highest = max(scores)

    return ProviderAggregateConfidence(
        average=average,
        min=lowest,
        max=highest,
        needs_attention=(
            lowest < weights.ATTENTION_MIN_SCORE
            or average < weights.ATTENTION_AVERAGE_SCORE
        ),
    )


def get_confidence_level(score: float) -> str:
    for min_score, level in weights.CONFIDENCE_LEVEL_BANDS:
        if score >= min_score:
            return level
    return ConfidenceLevel.VERY_LOW
