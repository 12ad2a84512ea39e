"""
Confidence Scoring Engine — deterministic, fully testable.

Scores one provider-plan acceptance record from 0–100:
    0–25:   Very low confidence (likely inaccurate)
    26–50:  Low confidence (needs verification)
    51–75:  Medium confidence (reasonable but not verified)
    76–90:  High confidence (verified through one source)
    91–100: Very high confidence (verified through multiple sources)

The score is the sum of four independent factors (data source, recency,
verification, crowdsource), each paired with a human-readable reason.

Design principle: pure function of (evidence, now). No I/O, no DB lookups,
never raises for missing data — an absent signal contributes 0 points and
says so in its reason. "now" is read once per call and threaded through
every factor so all age calculations agree.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal
from math import sqrt
from typing import Any, Iterable, Optional

from provider_directory.models.acceptance import AcceptanceStatus
from provider_directory.schemas.evidence import ProviderPlanEvidence
from provider_directory.services.confidence import weights

logger = logging.getLogger(__name__)


# ── Result types ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class FactorScore:
    score: float  # unrounded; rounded once when factors are assembled
    reason: str


@dataclass
class ConfidenceFactors:
    data_source_score: int
    data_source_reason: str
    recency_score: int
    recency_reason: str
    verification_score: int
    verification_reason: str
    crowdsource_score: int
    crowdsource_reason: str

    @property
    def total(self) -> int:
        return (
            self.data_source_score
            + self.recency_score
            + self.verification_score
            + self.crowdsource_score
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "dataSourceScore": self.data_source_score,
            "dataSourceReason": self.data_source_reason,
            "recencyScore": self.recency_score,
            "recencyReason": self.recency_reason,
            "verificationScore": self.verification_score,
            "verificationReason": self.verification_reason,
            "crowdsourceScore": self.crowdsource_score,
            "crowdsourceReason": self.crowdsource_reason,
        }


@dataclass
class ConfidenceResult:
    score: int  # 0..100
    factors: ConfidenceFactors
    recommendation: str
    needs_verification: bool

    def as_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "factors": self.factors.as_dict(),
            "recommendation": self.recommendation,
            "needsVerification": self.needs_verification,
        }


# ── Helpers ───────────────────────────────────────────────────────────────────


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 away from zero (22.5 -> 23, 7.5 -> 8)."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def resolve_now(now: Optional[datetime] = None) -> datetime:
    """Return `now` as an aware UTC datetime, reading the clock only if None."""
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def days_since(moment: datetime, now: datetime) -> int:
    """Whole days elapsed from `moment` to `now` (floored; negative if in the future)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (now - moment) // timedelta(days=1)


def as_evidence(evidence: Any) -> ProviderPlanEvidence:
    """Accept a ProviderPlanEvidence, a dict (snake or camel keys) or any attribute object."""
    if isinstance(evidence, ProviderPlanEvidence):
        return evidence
    return ProviderPlanEvidence.model_validate(evidence)


# ── Factor calculators ────────────────────────────────────────────────────────


def calculate_data_source_score(
    evidence: ProviderPlanEvidence, now: datetime
) -> FactorScore:
    """Base reliability of the official source, decayed by the age of its data (max 30)."""
    source = evidence.data_source
    if not source:
        return FactorScore(0, "No data source available")

    base = weights.DATA_SOURCE_WEIGHTS.get(source, 0)

    if evidence.data_source_date is None:
        return FactorScore(
            base * weights.UNKNOWN_DATE_MULTIPLIER, f"{source} data (unknown date)"
        )

    age_days = days_since(evidence.data_source_date, now)
    for max_age, multiplier, suffix in weights.DATA_SOURCE_DECAY:
        if age_days <= max_age:
            return FactorScore(base * multiplier, f"{source} {suffix}")

    return FactorScore(
        base * weights.DATA_SOURCE_EXPIRED_MULTIPLIER,
        f"{source} {weights.DATA_SOURCE_EXPIRED_REASON}",
    )


def calculate_recency_score(
    evidence: ProviderPlanEvidence, now: datetime
) -> FactorScore:
    """Verification recency (max 15) plus plan validity window (max 10)."""
    score = 0
    reasons: list[str] = []

    # ── Verification recency ──────────────────────────────────────────────────
    if evidence.last_verified_at is not None:
        age_days = days_since(evidence.last_verified_at, now)
        for max_age, points, reason in weights.VERIFICATION_RECENCY:
            if age_days <= max_age:
                score += points
                reasons.append(reason)
                break
        else:
            score += weights.STALE_VERIFICATION_POINTS
            reasons.append(weights.STALE_VERIFICATION_REASON)

    # ── Plan window ───────────────────────────────────────────────────────────
    effective = evidence.plan_effective_date
    terminated = evidence.plan_termination_date

    if effective is not None and effective <= now and (
        terminated is None or terminated >= now
    ):
        if terminated is not None:
            score += weights.PLAN_ACTIVE_POINTS
            reasons.append("Plan is currently active")
        else:
            score += weights.PLAN_OPEN_ENDED_POINTS
            reasons.append("Plan is effective (no termination date)")
    elif effective is not None and effective > now:
        score += weights.PLAN_NOT_YET_EFFECTIVE_POINTS
        reasons.append("Plan not yet effective")
    elif terminated is not None and terminated < now:
        score += weights.PLAN_TERMINATED_POINTS
        reasons.append("Plan has terminated")

    return FactorScore(
        score, "; ".join(reasons) if reasons else "No recency data available"
    )


def calculate_verification_score(
    evidence: ProviderPlanEvidence, now: datetime
) -> FactorScore:
    """Quality of the verifying source (max 15) plus verification count (max 10)."""
    score = 0.0
    reasons: list[str] = []

    source = evidence.verification_source
    if source:
        score += min(
            weights.DATA_SOURCE_WEIGHTS.get(source, 0) / 2,
            weights.VERIFICATION_SOURCE_CAP,
        )
        reasons.append(f"Verified via {source}")

    count = evidence.verification_count
    if count > 0:
        score += min(
            count * weights.POINTS_PER_VERIFICATION, weights.VERIFICATION_COUNT_CAP
        )
        reasons.append(f"{count} verification(s) on record")

    if evidence.is_deactivated:
        score = max(0.0, score - weights.DEACTIVATION_PENALTY)
        reasons.append("Warning: Provider NPI is deactivated")

    return FactorScore(
        score, "; ".join(reasons) if reasons else "No verification data"
    )


def volume_multiplier(total_votes: int) -> float:
    """0..1 weight for vote volume; non-decreasing in total_votes, 1.0 from 25 votes."""
    if total_votes <= 0:
        return 0.0
    return min(sqrt(total_votes) / weights.VOLUME_SQRT_DIVISOR, 1.0)


def calculate_crowdsource_score(
    evidence: ProviderPlanEvidence, now: datetime
) -> FactorScore:
    """Community vote ratio scaled by vote volume (max 15) plus submissions (max 5)."""
    upvotes = evidence.upvotes
    downvotes = evidence.downvotes
    submissions = evidence.user_submissions
    total_votes = upvotes + downvotes

    if total_votes == 0 and submissions == 0:
        return FactorScore(0, "No crowdsource data")

    score = 0.0
    reasons: list[str] = []

    if total_votes > 0:
        ratio = upvotes / total_votes
        for min_ratio, points, label in weights.VOTE_RATIO_BANDS:
            if ratio >= min_ratio:
                score += points * volume_multiplier(total_votes)
                reasons.append(f"{label} ({upvotes}/{total_votes} upvotes)")
                break
        else:
            reasons.append(
                f"{weights.NEGATIVE_FEEDBACK_LABEL} "
                f"({downvotes}/{total_votes} downvotes)"
            )

    if submissions > 0:
        score += min(submissions, weights.SUBMISSION_BONUS_CAP)
        reasons.append(f"{submissions} user submission(s)")

    return FactorScore(score, "; ".join(reasons))


# ── Recommendation ────────────────────────────────────────────────────────────


def generate_recommendation(score: int, evidence: ProviderPlanEvidence) -> str:
    """
    Plain-language next step for a patient.

    Priority (first match wins): deactivated NPI, explicit NOT_ACCEPTED,
    UNKNOWN acceptance, then banded by score.
    """
    if evidence.is_deactivated:
        return weights.DEACTIVATED_RECOMMENDATION

    if evidence.acceptance_status == AcceptanceStatus.NOT_ACCEPTED:
        if score < weights.UNCERTAIN_REJECTION_THRESHOLD:
            return weights.NOT_ACCEPTED_UNCERTAIN_RECOMMENDATION
        return weights.NOT_ACCEPTED_RECOMMENDATION

    if evidence.acceptance_status == AcceptanceStatus.UNKNOWN:
        return weights.UNKNOWN_ACCEPTANCE_RECOMMENDATION

    for min_score, recommendation in weights.RECOMMENDATION_BANDS:
        if score >= min_score:
            return recommendation
    return weights.VERY_LOW_RECOMMENDATION


# ── Public entry points ───────────────────────────────────────────────────────


def calculate_confidence_score(
    evidence: Any, now: Optional[datetime] = None
) -> ConfidenceResult:
    """
    Score one provider-plan acceptance record.

    Args:
        evidence: ProviderPlanEvidence, or a dict / attribute object that
                  validates into one.
        now:      Scoring instant. Defaults to the current UTC time, read once.

    Returns:
        ConfidenceResult with the 0–100 score, per-factor breakdown,
        recommendation and needs_verification flag.
    """
    evidence = as_evidence(evidence)
    now = resolve_now(now)

    data_source = calculate_data_source_score(evidence, now)
    recency = calculate_recency_score(evidence, now)
    verification = calculate_verification_score(evidence, now)
    crowdsource = calculate_crowdsource_score(evidence, now)

    factors = ConfidenceFactors(
        data_source_score=round_half_up(data_source.score),
        data_source_reason=data_source.reason,
        recency_score=round_half_up(recency.score),
        recency_reason=recency.reason,
        verification_score=round_half_up(verification.score),
        verification_reason=verification.reason,
        crowdsource_score=round_half_up(crowdsource.score),
        crowdsource_reason=crowdsource.reason,
    )

    score = max(0, min(weights.MAX_SCORE, factors.total))

    logger.debug(
        "Confidence %d (source=%d recency=%d verification=%d crowd=%d)",
        score,
        factors.data_source_score,
        factors.recency_score,
        factors.verification_score,
        factors.crowdsource_score,
    )

    return ConfidenceResult(
        score=score,
        factors=factors,
        recommendation=generate_recommendation(score, evidence),
        needs_verification=score < weights.NEEDS_VERIFICATION_THRESHOLD,
    )


def calculate_batch_confidence_scores(
    evidence_list: Iterable[Any], now: Optional[datetime] = None
) -> list[ConfidenceResult]:
    """Score each record in order, all against the same instant."""
    now = resolve_now(now)
    return [calculate_confidence_score(evidence, now=now) for evidence in evidence_list]
