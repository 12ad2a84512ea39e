"""
Taxonomy classifier — NUCC taxonomy code → specialty category.

Resolution order (highest to lowest specificity):
  1. EXACT_CODE — code is a key in TAXONOMY_TO_SPECIALTY
  2. PREFIX     — longest prefix in PREFIX_MAPPINGS the code starts with
  3. OTHER      — nothing matched

Both lookups are static tables loaded once at import. Never raises:
missing or unknown codes degrade to OTHER / None.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from provider_directory.taxonomy.constants import (
    PREFIX_MAPPINGS,
    TAXONOMY_DESCRIPTIONS,
    TAXONOMY_TO_SPECIALTY,
    SpecialtyCategory,
)

logger = logging.getLogger(__name__)


class TaxonomyMatchType:
    EXACT_CODE = "exact_code"
    PREFIX = "prefix"


@dataclass
class TaxonomyClassification:
    code: Optional[str]  # normalised code, None if blank
    category: str  # SpecialtyCategory value
    description: Optional[str]
    match_type: Optional[str]  # exact_code | prefix | None
    matched_prefix: Optional[str]  # PREFIX_MAPPINGS entry that won, if any


# ── Sorted prefix table ───────────────────────────────────────────────────────
# Longest prefix first; sorted() is stable so equal-length prefixes keep
# their listed order.
SORTED_PREFIX_MAPPINGS: list[tuple[str, str]] = sorted(
    PREFIX_MAPPINGS, key=lambda mapping: len(mapping[0]), reverse=True
)


def _normalise_code(taxonomy_code: Optional[str]) -> Optional[str]:
    if taxonomy_code is None:
        return None
    code = str(taxonomy_code).strip().upper()
    return code or None


def _match(code: str) -> tuple[str, Optional[str], Optional[str]]:
    """Return (category, match_type, matched_prefix) for a normalised code."""
    category = TAXONOMY_TO_SPECIALTY.get(code)
    if category is not None:
        return category, TaxonomyMatchType.EXACT_CODE, None

    for prefix, category in SORTED_PREFIX_MAPPINGS:
        if code.startswith(prefix):
            return category, TaxonomyMatchType.PREFIX, prefix

    return SpecialtyCategory.OTHER, None, None


def _category_label(category: str) -> str:
    # INFECTIOUS_DISEASE -> "Infectious Disease"
    return " ".join(word.capitalize() for word in category.split("_"))


# ── Public API ────────────────────────────────────────────────────────────────


def get_specialty_category(taxonomy_code: Optional[str]) -> str:
    """
    Map an NPI taxonomy code (e.g. "207RE0101X") to a SpecialtyCategory.
    None or blank → OTHER.
    """
    code = _normalise_code(taxonomy_code)
    if code is None:
        return SpecialtyCategory.OTHER
    return _match(code)[0]


def get_taxonomy_description(taxonomy_code: Optional[str]) -> Optional[str]:
    """
    Human-readable description for a taxonomy code.

    Exact description if one is on file, otherwise the category label
    ("Infectious Disease"). Codes that only map to OTHER return None.
    """
    code = _normalise_code(taxonomy_code)
    if code is None:
        return None

    description = TAXONOMY_DESCRIPTIONS.get(code)
    if description:
        return description

    category = get_specialty_category(code)
    if category == SpecialtyCategory.OTHER:
        return None
    return _category_label(category)


def classify_taxonomy_code(taxonomy_code: Optional[str]) -> TaxonomyClassification:
    """Category plus how it was reached — for ingestion audit trails."""
    code = _normalise_code(taxonomy_code)
    if code is None:
        return TaxonomyClassification(
            code=None,
            category=SpecialtyCategory.OTHER,
            description=None,
            match_type=None,
            matched_prefix=None,
        )

    category, match_type, matched_prefix = _match(code)
    if match_type is None:
        logger.debug("Unrecognised taxonomy code %r — classified as OTHER", code)

    return TaxonomyClassification(
        code=code,
        category=category,
        description=get_taxonomy_description(code),
        match_type=match_type,
        matched_prefix=matched_prefix,
    )
