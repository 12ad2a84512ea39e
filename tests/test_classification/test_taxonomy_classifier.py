"""
Taxonomy classifier tests — static tables only, no DB required.
"""

import pytest

from provider_directory.services.classification.taxonomy_classifier import (
    SORTED_PREFIX_MAPPINGS,
    classify_taxonomy_code,
    get_specialty_category,
    get_taxonomy_description,
)
from provider_directory.taxonomy.constants import (
    PREFIX_MAPPINGS,
    SPECIALTY_CATEGORIES,
    TAXONOMY_DESCRIPTIONS,
    TAXONOMY_TO_SPECIALTY,
    SpecialtyCategory,
)


class TestGetSpecialtyCategory:

    # ── Exact codes ──────────────────────────────────────────────────────────

    @pytest.mark.parametrize("code,expected", [
        ("207RH0003X", "ONCOLOGY"),
        ("207RE0101X", "ENDOCRINOLOGY"),
        ("207R00000X", "INTERNAL_MEDICINE"),
        ("363L00000X", "NURSE_PRACTITIONER"),
        ("2084P0800X", "PSYCHIATRY"),
        ("2084N0400X", "NEUROLOGY"),
        ("208D00000X", "GENERAL_PRACTICE"),
        ("207X00000X", "ORTHOPEDICS"),
    ])
    def test_exact_codes(self, code, expected):
        assert get_specialty_category(code) == expected

    @pytest.mark.parametrize("code", ["207rh0003x", "  207RH0003X  ", "207Rh0003X\n"])
    def test_code_normalised(self, code):
        assert get_specialty_category(code) == "ONCOLOGY"

    # ── Prefix fallback ──────────────────────────────────────────────────────

    @pytest.mark.parametrize("code,expected", [
        ("207RC9999X", "CARDIOLOGY"),        # 207RC beats 207R
        ("2084N9999X", "NEUROLOGY"),         # 2084N beats 2084
        ("2084Z9999X", "PSYCHIATRY"),
        ("207RH0003Z", "ONCOLOGY"),          # 9-char prefix
        ("261QE0700Z", "ENDOCRINOLOGY"),     # 261QE0700 beats 261Q
        ("261QZ9999X", "CLINIC_FACILITY"),
        ("279999999X", "HOSPITAL"),
        ("103Z99999X", "PSYCHOLOGY"),
        ("207R99999X", "INTERNAL_MEDICINE"),
    ])
    def test_longest_prefix_wins(self, code, expected):
        assert code not in TAXONOMY_TO_SPECIALTY
        assert get_specialty_category(code) == expected

    # ── Fallback ─────────────────────────────────────────────────────────────

    @pytest.mark.parametrize("code", [None, "", "   ", "999999999X", "ZZZZ"])
    def test_other(self, code):
        assert get_specialty_category(code) == SpecialtyCategory.OTHER


class TestSortedPrefixMappings:

    def test_longest_first(self):
        lengths = [len(prefix) for prefix, _ in SORTED_PREFIX_MAPPINGS]
        assert lengths == sorted(lengths, reverse=True)

    def test_same_entries(self):
        assert sorted(SORTED_PREFIX_MAPPINGS) == sorted(PREFIX_MAPPINGS)

    def test_equal_length_keeps_listed_order(self):
        for length in {len(prefix) for prefix, _ in PREFIX_MAPPINGS}:
            listed = [m for m in PREFIX_MAPPINGS if len(m[0]) == length]
            in_sorted = [m for m in SORTED_PREFIX_MAPPINGS if len(m[0]) == length]
            assert listed == in_sorted


class TestGetTaxonomyDescription:

    @pytest.mark.parametrize("code,expected", [
        ("207RE0101X", "Endocrinology, Diabetes & Metabolism"),
        ("207RH0003X", "Hematology & Oncology"),
        ("363L00000X", "Nurse Practitioner"),
        ("207x00000x", "Orthopaedic Surgery"),
    ])
    def test_exact_description(self, code, expected):
        assert get_taxonomy_description(code) == expected

    @pytest.mark.parametrize("code,expected", [
        ("207RC9999X", "Cardiology"),
        ("207RI0200Z", "Infectious Disease"),
        ("261QZ9999X", "Clinic Facility"),
        ("207VZ9999X", "Ob Gyn"),
    ])
    def test_category_label_fallback(self, code, expected):
        assert code not in TAXONOMY_DESCRIPTIONS
        assert get_taxonomy_description(code) == expected

    @pytest.mark.parametrize("code", [None, "", "999999999X"])
    def test_none(self, code):
        assert get_taxonomy_description(code) is None


class TestClassifyTaxonomyCode:

    def test_exact_match(self):
        result = classify_taxonomy_code("207rh0003x")
        assert result.code == "207RH0003X"
        assert result.category == "ONCOLOGY"
        assert result.match_type == "exact_code"
        assert result.matched_prefix is None
        assert result.description == "Hematology & Oncology"

    def test_prefix_match(self):
        result = classify_taxonomy_code("2084N9999X")
        assert result.category == "NEUROLOGY"
        assert result.match_type == "prefix"
        assert result.matched_prefix == "2084N"
        assert result.description == "Neurology"

    def test_unrecognised(self):
        result = classify_taxonomy_code("999999999X")
        assert result.category == SpecialtyCategory.OTHER
        assert result.match_type is None
        assert result.matched_prefix is None
        assert result.description is None

    def test_blank(self):
        result = classify_taxonomy_code("  ")
        assert result.code is None
        assert result.category == SpecialtyCategory.OTHER

    def test_agrees_with_get_specialty_category(self):
        for code in list(TAXONOMY_TO_SPECIALTY)[:50] + ["207RC9999X", "ZZZZ"]:
            assert classify_taxonomy_code(code).category == get_specialty_category(code)


class TestTables:

    def test_every_mapped_category_is_declared(self):
        used = set(TAXONOMY_TO_SPECIALTY.values()) | {c for _, c in PREFIX_MAPPINGS}
        assert used <= set(SPECIALTY_CATEGORIES)

    def test_categories(self):
        assert len(SPECIALTY_CATEGORIES) == 57
        assert SpecialtyCategory.OTHER in SPECIALTY_CATEGORIES

    def test_codes_are_upper_case(self):
        assert all(code == code.upper() for code in TAXONOMY_TO_SPECIALTY)
        assert all(code == code.upper() for code in TAXONOMY_DESCRIPTIONS)
