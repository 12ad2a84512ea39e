"""
Re-verification windows, provider-level rollups and confidence levels.
"""

import pytest

from conftest import NOW, days_ago
from provider_directory.services.confidence.aggregate import (
    ProviderAggregateConfidence,
    calculate_provider_aggregate_confidence,
    get_confidence_level,
    needs_reverification,
    reverification_window_days,
)
from provider_directory.settings import settings


class TestNeedsReverification:

    def test_never_verified(self):
        assert needs_reverification(None, 99, now=NOW) is True

    @pytest.mark.parametrize("score,age_days,expected", [
        # score >= 90 → 180 days
        (95, 170, False),
        (95, 180, False),
        (95, 181, True),
        (95, 190, True),
        # score >= 75 → 135 days
        (80, 135, False),
        (80, 136, True),
        # score >= 50 → 90 days
        (60, 90,  False),
        (60, 91,  True),
        # below 50 → 45 days
        (30, 45,  False),
        (30, 46,  True),
    ])
    def test_windows_scale_with_confidence(self, score, age_days, expected):
        assert needs_reverification(days_ago(age_days), score, now=NOW) is expected

    def test_days_since_update_overrides_baseline(self):
        assert needs_reverification(days_ago(10), 60, days_since_update=10, now=NOW) is False
        assert needs_reverification(days_ago(11), 60, days_since_update=10, now=NOW) is True

    def test_baseline_comes_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "reverification_baseline_days", 30)
        assert reverification_window_days(95) == 60
        assert needs_reverification(days_ago(61), 95, now=NOW) is True

    @pytest.mark.parametrize("score,expected", [
        (100, 180), (90, 180), (89, 135), (75, 135), (74, 90), (50, 90), (49, 45), (0, 45),
    ])
    def test_window_days(self, score, expected):
        assert reverification_window_days(score) == expected


class TestProviderAggregate:

    def test_mixed_scores(self):
        aggregate = calculate_provider_aggregate_confidence([50, 70, 80])
        assert aggregate == ProviderAggregateConfidence(
            average=67, min=50, max=80, needs_attention=False
        )

    def test_low_minimum_needs_attention(self):
        assert calculate_provider_aggregate_confidence([49, 90, 95]).needs_attention is True

    def test_low_average_needs_attention(self):
        aggregate = calculate_provider_aggregate_confidence([55, 58, 60])
        assert aggregate.average == 58
        assert aggregate.needs_attention is True

    def test_average_rounds_half_up(self):
        assert calculate_provider_aggregate_confidence([60, 61]).average == 61

    def test_empty_needs_attention(self):
        assert calculate_provider_aggregate_confidence([]) == ProviderAggregateConfidence(
            average=0, min=0, max=0, needs_attention=True
        )

    def test_single_score(self):
        aggregate = calculate_provider_aggregate_confidence([88])
        assert (aggregate.average, aggregate.min, aggregate.max) == (88, 88, 88)
        assert aggregate.needs_attention is False

    def test_as_dict(self):
        assert calculate_provider_aggregate_confidence([50, 70, 80]).as_dict() == {
            "average": 67,
            "min": 50,
            "max": 80,
            "needsAttention": False,
        }


class TestConfidenceLevel:

    @pytest.mark.parametrize("score,level", [
        (100, "VERY_HIGH"),
        (91,  "VERY_HIGH"),
        (90,  "HIGH"),
        (76,  "HIGH"),
        (75,  "MEDIUM"),
        (51,  "MEDIUM"),
        (50,  "LOW"),
        (26,  "LOW"),
        (25,  "VERY_LOW"),
        (0,   "VERY_LOW"),
    ])
    def test_bands(self, score, level):
        assert get_confidence_level(score) == level
