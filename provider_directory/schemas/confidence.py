"""
Confidence schemas — response shapes handed to the REST layer.

Serialise with model_dump(by_alias=True) to get the camelCase keys the
frontend reads (dataSourceScore, needsVerification, ...).
"""

from dataclasses import asdict

from provider_directory.schemas.common import CamelSchema
from provider_directory.services.confidence.aggregate import (
    ProviderAggregateConfidence,
    get_confidence_level,
)
from provider_directory.services.confidence.scorer import ConfidenceResult


class ConfidenceFactorsResponse(CamelSchema):
    data_source_score: int
    data_source_reason: str
    recency_score: int
    recency_reason: str
    verification_score: int
    verification_reason: str
    crowdsource_score: int
    crowdsource_reason: str


class ConfidenceResultResponse(CamelSchema):
    score: int
    level: str  # VERY_HIGH | HIGH | MEDIUM | LOW | VERY_LOW
    factors: ConfidenceFactorsResponse
    recommendation: str
    needs_verification: bool

    @classmethod
    def from_result(cls, result: ConfidenceResult) -> "ConfidenceResultResponse":
        return cls(
            score=result.score,
            level=get_confidence_level(result.score),
            factors=ConfidenceFactorsResponse(**asdict(result.factors)),
            recommendation=result.recommendation,
            needs_verification=result.needs_verification,
        )


class ProviderAggregateConfidenceResponse(CamelSchema):
    average: int
    min: int
    max: int
    needs_attention: bool

    @classmethod
    def from_aggregate(
        cls, aggregate: ProviderAggregateConfidence
    ) -> "ProviderAggregateConfidenceResponse":
        return cls(**asdict(aggregate))
