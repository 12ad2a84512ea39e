"""
Confidence scoring policy — every weight, band and decay bucket in one place.

The scorer only walks these tables; changing how much a source or a vote is
worth never requires touching control flow.

Factor maxima:
  Data source     30   (base weight × age decay)
  Recency         25   (verification recency 15 + plan window 10)
  Verification    25   (source quality 15 + count bonus 10, minus deactivation)
  Crowdsource     20   (votes 15 × volume + submissions 5)
"""

from provider_directory.models.acceptance import ConfidenceLevel, VerificationSource

# ── Data source ───────────────────────────────────────────────────────────────
# Reliability ranking, higher = more authoritative. Also used (halved) to
# score the source of the most recent verification.
DATA_SOURCE_WEIGHTS: dict[str, int] = {
    VerificationSource.CMS_DATA: 30,
    VerificationSource.CARRIER_DATA: 28,
    VerificationSource.PROVIDER_PORTAL: 25,
    VerificationSource.PHONE_CALL: 22,
    VerificationSource.AUTOMATED: 15,
    VerificationSource.CROWDSOURCE: 10,
}

# (max_age_days inclusive, multiplier, reason suffix) — first match wins
DATA_SOURCE_DECAY: list[tuple[int, float, str]] = [
    (30, 1.0, "data from within last 30 days"),
    (90, 0.9, "data from within last 90 days"),
    (180, 0.75, "data from within last 6 months"),
    (365, 0.5, "data is 6-12 months old"),
]
DATA_SOURCE_EXPIRED_MULTIPLIER = 0.25
DATA_SOURCE_EXPIRED_REASON = "data is over 1 year old"
UNKNOWN_DATE_MULTIPLIER = 0.5

# ── Recency ───────────────────────────────────────────────────────────────────
# (max_days_since_verification inclusive, points, reason)
VERIFICATION_RECENCY: list[tuple[int, int, str]] = [
    (7, 15, "Verified within last week"),
    (30, 12, "Verified within last month"),
    (90, 8, "Verified within last 3 months"),
    (180, 4, "Verified within last 6 months"),
]
STALE_VERIFICATION_POINTS = 1
STALE_VERIFICATION_REASON = "Verification is stale (>6 months)"

PLAN_ACTIVE_POINTS = 10
PLAN_OPEN_ENDED_POINTS = 7
PLAN_NOT_YET_EFFECTIVE_POINTS = 5
PLAN_TERMINATED_POINTS = 0

# ── Verification ──────────────────────────────────────────────────────────────
VERIFICATION_SOURCE_CAP = 15
POINTS_PER_VERIFICATION = 2
VERIFICATION_COUNT_CAP = 10  # saturates at 5 verifications
DEACTIVATION_PENALTY = 10

# ── Crowdsource ───────────────────────────────────────────────────────────────
# (min upvote ratio, points at full volume, label) — first match wins
VOTE_RATIO_BANDS: list[tuple[float, int, str]] = [
    (0.8, 15, "Strong positive feedback"),
    (0.6, 10, "Mostly positive feedback"),
    (0.4, 5, "Mixed feedback"),
]
NEGATIVE_FEEDBACK_LABEL = "Negative feedback"

# Vote points scale by min(sqrt(total_votes) / 5, 1): full weight at 25 votes
VOLUME_SQRT_DIVISOR = 5.0
SUBMISSION_BONUS_CAP = 5

# ── Thresholds & bands ────────────────────────────────────────────────────────
MAX_SCORE = 100
NEEDS_VERIFICATION_THRESHOLD = 75  # needs_verification when score < this
UNCERTAIN_REJECTION_THRESHOLD = 75  # NOT_ACCEPTED below this is "uncertain"

# (min score, recommendation) — ACCEPTED / PENDING records only
RECOMMENDATION_BANDS: list[tuple[int, str]] = [
    (90, "High confidence that provider accepts this plan. Data is well-verified."),
    (
        75,
        "Good confidence in plan acceptance. "
        "Consider calling to confirm for important visits.",
    ),
    (
        50,
        "Moderate confidence. "
        "Recommend calling the provider to verify insurance acceptance.",
    ),
    (
        25,
        "Low confidence in data accuracy. "
        "Strongly recommend verifying with the provider.",
    ),
]
VERY_LOW_RECOMMENDATION = (
    "Very low confidence. Data may be outdated or incorrect. Verification required."
)
DEACTIVATED_RECOMMENDATION = (
    "Provider NPI is deactivated. "
    "Contact the practice directly to verify current status."
)
NOT_ACCEPTED_UNCERTAIN_RECOMMENDATION = (
    "Provider likely does not accept this plan, but data is uncertain. "
    "Verify before scheduling."
)
NOT_ACCEPTED_RECOMMENDATION = (
    "Provider does not accept this plan based on available data."
)
UNKNOWN_ACCEPTANCE_RECOMMENDATION = (
    "No acceptance data available. "
    "Contact the provider to verify insurance acceptance."
)

# (min score, multiplier applied to the baseline re-verification window)
REVERIFICATION_MULTIPLIERS: list[tuple[int, float]] = [
    (90, 2.0),
    (75, 1.5),
    (50, 1.0),
]
LOW_CONFIDENCE_REVERIFICATION_MULTIPLIER = 0.5

# Provider-level aggregate
ATTENTION_MIN_SCORE = 50
ATTENTION_AVERAGE_SCORE = 60

# (min score, level)
CONFIDENCE_LEVEL_BANDS: list[tuple[int, str]] = [
    (91, ConfidenceLevel.VERY_HIGH),
    (76, ConfidenceLevel.HIGH),
    (51, ConfidenceLevel.MEDIUM),
    (26, ConfidenceLevel.LOW),
]
