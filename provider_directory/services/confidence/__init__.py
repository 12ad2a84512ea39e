"""Confidence scoring for provider-plan acceptance records."""

from provider_directory.services.confidence.aggregate import (
    ProviderAggregateConfidence,
    calculate_provider_aggregate_confidence,
    get_confidence_level,
    needs_reverification,
)
from provider_directory.services.confidence.recalculation import (
    AcceptanceRecord,
    RecalculationOutcome,
    recalculate_confidence_scores,
)
from provider_directory.services.confidence.scorer import (
    ConfidenceFactors,
    ConfidenceResult,
    calculate_batch_confidence_scores,
    calculate_confidence_score,
)

__all__ = [
    "AcceptanceRecord",
    "ConfidenceFactors",
    "ConfidenceResult",
    "ProviderAggregateConfidence",
    "RecalculationOutcome",
    "calculate_batch_confidence_scores",
    "calculate_confidence_score",
    "calculate_provider_aggregate_confidence",
    "get_confidence_level",
    "needs_reverification",
    "recalculate_confidence_scores",
]
