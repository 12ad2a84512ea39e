"""
ProviderPlanEvidence — the immutable snapshot the confidence scorer consumes.

One record describes everything known about one provider's acceptance of one
insurance plan at scoring time. Every field is optional: a missing value means
"no signal", never an error. Validation here only rejects values that are
malformed (unknown enum strings, negative counts).
"""

from datetime import date, datetime, timezone
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from provider_directory.models.acceptance import (
    AcceptanceStatus,
    ProviderStatus,
    VerificationSource,
)
from provider_directory.schemas.common import CamelSchema


def _normalise_choice(value, allowed: tuple, field_name: str) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip().upper()
    if not text:
        return None
    if text not in allowed:
        raise ValueError(
            f"{field_name} must be one of {', '.join(allowed)}; got {value!r}"
        )
    return text


class ProviderPlanEvidence(CamelSchema):
    model_config = ConfigDict(frozen=True)  # scoring input is a snapshot

    # ── Data source ────────────────────────────────────────────────────────
    data_source: Optional[str] = None
    data_source_date: Optional[datetime] = None

    # ── Verification ───────────────────────────────────────────────────────
    last_verified_at: Optional[datetime] = None
    verification_source: Optional[str] = None
    verification_count: int = Field(default=0, ge=0)

    # ── Crowdsource ────────────────────────────────────────────────────────
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    user_submissions: int = Field(default=0, ge=0)

    # ── Plan window ────────────────────────────────────────────────────────
    plan_effective_date: Optional[datetime] = None
    plan_termination_date: Optional[datetime] = None

    # ── Provider ───────────────────────────────────────────────────────────
    provider_last_update_date: Optional[datetime] = None  # reserved; not scored
    provider_status: str = ProviderStatus.ACTIVE

    acceptance_status: str = AcceptanceStatus.UNKNOWN

    @field_validator("data_source", "verification_source", mode="before")
    @classmethod
    def _check_source(cls, v, info):
        return _normalise_choice(v, VerificationSource.ALL, info.field_name)

    @field_validator("provider_status", mode="before")
    @classmethod
    def _check_provider_status(cls, v):
        return (
            _normalise_choice(v, ProviderStatus.ALL, "provider_status")
            or ProviderStatus.ACTIVE
        )

    @field_validator("acceptance_status", mode="before")
    @classmethod
    def _check_acceptance_status(cls, v):
        return (
            _normalise_choice(v, AcceptanceStatus.ALL, "acceptance_status")
            or AcceptanceStatus.UNKNOWN
        )

    @field_validator(
        "verification_count", "upvotes", "downvotes", "user_submissions", mode="before"
    )
    @classmethod
    def _none_count_is_zero(cls, v):
        return 0 if v is None else v

    @field_validator(
        "data_source_date",
        "last_verified_at",
        "plan_effective_date",
        "plan_termination_date",
        "provider_last_update_date",
        mode="before",
    )
    @classmethod
    def _date_to_datetime(cls, v):
        # Plan windows are often stored as bare dates
        if isinstance(v, date) and not isinstance(v, datetime):
            return datetime(v.year, v.month, v.day, tzinfo=timezone.utc)
        return v

    @field_validator(
        "data_source_date",
        "last_verified_at",
        "plan_effective_date",
        "plan_termination_date",
        "provider_last_update_date",
    )
    @classmethod
    def _as_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is None:
            return None
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @property
    def is_deactivated(self) -> bool:
        return self.provider_status == ProviderStatus.DEACTIVATED
