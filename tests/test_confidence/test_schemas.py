"""
Evidence validation and response schema tests.
"""

from datetime import date, datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from conftest import NOW
from provider_directory.schemas.confidence import (
    ConfidenceResultResponse,
    ProviderAggregateConfidenceResponse,
)
from provider_directory.schemas.evidence import ProviderPlanEvidence
from provider_directory.services.confidence.aggregate import (
    calculate_provider_aggregate_confidence,
)
from provider_directory.services.confidence.scorer import calculate_confidence_score


class TestProviderPlanEvidence:

    def test_defaults(self):
        evidence = ProviderPlanEvidence()
        assert evidence.data_source is None
        assert evidence.verification_count == 0
        assert evidence.provider_status == "ACTIVE"
        assert evidence.acceptance_status == "UNKNOWN"
        assert evidence.is_deactivated is False

    @pytest.mark.parametrize("raw", ["cms_data", " CMS_DATA ", "Cms_Data"])
    def test_source_normalised(self, raw):
        assert ProviderPlanEvidence(data_source=raw).data_source == "CMS_DATA"

    def test_blank_source_is_none(self):
        assert ProviderPlanEvidence(verification_source="  ").verification_source is None

    @pytest.mark.parametrize("field,value", [
        ("data_source", "FAX"),
        ("verification_source", "EMAIL"),
        ("provider_status", "RETIRED"),
        ("acceptance_status", "MAYBE"),
    ])
    def test_unknown_choice_rejected(self, field, value):
        with pytest.raises(ValidationError):
            ProviderPlanEvidence(**{field: value})

    @pytest.mark.parametrize("field", ["verification_count", "upvotes", "downvotes", "user_submissions"])
    def test_negative_count_rejected(self, field):
        with pytest.raises(ValidationError):
            ProviderPlanEvidence(**{field: -1})

    def test_none_count_is_zero(self):
        assert ProviderPlanEvidence(upvotes=None).upvotes == 0

    def test_status_defaults_when_none(self):
        evidence = ProviderPlanEvidence(provider_status=None, acceptance_status=None)
        assert evidence.provider_status == "ACTIVE"
        assert evidence.acceptance_status == "UNKNOWN"

    def test_deactivated(self):
        assert ProviderPlanEvidence(provider_status="deactivated").is_deactivated is True

    def test_bare_date_becomes_midnight_utc(self):
        evidence = ProviderPlanEvidence(plan_effective_date=date(2025, 1, 1))
        assert evidence.plan_effective_date == datetime(2025, 1, 1, tzinfo=timezone.utc)

    def test_naive_datetime_treated_as_utc(self):
        evidence = ProviderPlanEvidence(last_verified_at=datetime(2025, 6, 1, 8, 30))
        assert evidence.last_verified_at.tzinfo == timezone.utc
        assert evidence.last_verified_at.hour == 8

    def test_aware_datetime_converted_to_utc(self):
        eastern = timezone(timedelta(hours=-5))
        evidence = ProviderPlanEvidence(last_verified_at=datetime(2025, 6, 1, 8, 0, tzinfo=eastern))
        assert evidence.last_verified_at == datetime(2025, 6, 1, 13, 0, tzinfo=timezone.utc)
        assert evidence.last_verified_at.utcoffset() == timedelta(0)

    def test_iso_string_parsed(self):
        evidence = ProviderPlanEvidence(dataSourceDate="2025-06-01T00:00:00Z")
        assert evidence.data_source_date == datetime(2025, 6, 1, tzinfo=timezone.utc)

    def test_camel_and_snake_keys(self):
        camel = ProviderPlanEvidence.model_validate({"verificationCount": 3, "userSubmissions": 1})
        snake = ProviderPlanEvidence.model_validate({"verification_count": 3, "user_submissions": 1})
        assert camel == snake

    def test_from_attributes(self):
        row = SimpleNamespace(data_source="CARRIER_DATA", verification_count=2, upvotes=5)
        evidence = ProviderPlanEvidence.model_validate(row)
        assert evidence.data_source == "CARRIER_DATA"
        assert evidence.upvotes == 5

    def test_frozen(self):
        evidence = ProviderPlanEvidence()
        with pytest.raises(ValidationError):
            evidence.upvotes = 3


class TestResponseSchemas:

    def test_confidence_result_response(self, well_verified_evidence):
        result = calculate_confidence_score(well_verified_evidence, now=NOW)
        payload = ConfidenceResultResponse.from_result(result).model_dump(by_alias=True)
        assert payload["score"] == 91
        assert payload["level"] == "VERY_HIGH"
        assert payload["needsVerification"] is False
        assert payload["factors"] == result.factors.as_dict()
        assert payload["recommendation"] == result.recommendation

    def test_aggregate_response_matches_as_dict(self):
        aggregate = calculate_provider_aggregate_confidence([50, 70, 80])
        response = ProviderAggregateConfidenceResponse.from_aggregate(aggregate)
        assert response.model_dump(by_alias=True) == aggregate.as_dict()
