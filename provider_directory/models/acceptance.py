"""
Provider-plan acceptance vocabularies.

Values match the strings the directory database stores for
provider_plan_acceptance rows and verification logs.
"""


# ── Constant classes (avoid Enum to keep stored values plain strings) ────────


class VerificationSource:
    CMS_DATA = "CMS_DATA"  # Official CMS / NPPES data
    CARRIER_DATA = "CARRIER_DATA"  # Insurance carrier directory feed
    PROVIDER_PORTAL = "PROVIDER_PORTAL"  # Self-reported by the practice
    PHONE_CALL = "PHONE_CALL"  # Confirmed by calling the office
    AUTOMATED = "AUTOMATED"  # Automated checks / scrapers
    CROWDSOURCE = "CROWDSOURCE"  # Patient-submitted

    ALL = (
        CMS_DATA,
        CARRIER_DATA,
        PROVIDER_PORTAL,
        PHONE_CALL,
        AUTOMATED,
        CROWDSOURCE,
    )


class AcceptanceStatus:
    ACCEPTED = "ACCEPTED"
    NOT_ACCEPTED = "NOT_ACCEPTED"
    PENDING = "PENDING"
    UNKNOWN = "UNKNOWN"  # Database default for a new acceptance row

    ALL = (ACCEPTED, NOT_ACCEPTED, PENDING, UNKNOWN)


class ProviderStatus:
    ACTIVE = "ACTIVE"
    DEACTIVATED = "DEACTIVATED"  # NPI deactivated in NPPES

    ALL = (ACTIVE, DEACTIVATED)


class ConfidenceLevel:
    VERY_HIGH = "VERY_HIGH"  # 91–100: verified through multiple sources
    HIGH = "HIGH"  # 76–90: verified through one source
    MEDIUM = "MEDIUM"  # 51–75: reasonable but not verified
    LOW = "LOW"  # 26–50: needs verification
    VERY_LOW = "VERY_LOW"  # 0–25: likely inaccurate

    ALL = (VERY_HIGH, HIGH, MEDIUM, LOW, VERY_LOW)
