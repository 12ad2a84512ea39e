"""
Test fixtures and shared setup.

Everything under test is pure — no database, no network. Time is frozen by
passing NOW explicitly to every scoring call.
"""

import os
from datetime import datetime, timedelta, timezone

import pytest

# ── Override settings BEFORE importing package modules ────────────────────────
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("REVERIFICATION_BASELINE_DAYS", "90")
os.environ.setdefault("RECALCULATION_BATCH_SIZE", "100")

from provider_directory.schemas.evidence import ProviderPlanEvidence  # noqa: E402

NOW = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)


def days_ago(days: float) -> datetime:
    return NOW - timedelta(days=days)


def days_ahead(days: float) -> datetime:
    return NOW + timedelta(days=days)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_evidence():
    """Factory for ProviderPlanEvidence with everything defaulted to 'no signal'."""

    def _make(**overrides) -> ProviderPlanEvidence:
        return ProviderPlanEvidence(**overrides)

    return _make


@pytest.fixture
def well_verified_evidence() -> ProviderPlanEvidence:
    """Fresh CMS data, verified by phone this week, active plan, strong votes."""
    return ProviderPlanEvidence(
        data_source="CMS_DATA",
        data_source_date=days_ago(10),
        last_verified_at=days_ago(3),
        verification_source="PHONE_CALL",
        verification_count=5,
        upvotes=40,
        downvotes=2,
        plan_effective_date=days_ago(200),
        plan_termination_date=days_ahead(200),
        acceptance_status="ACCEPTED",
    )
