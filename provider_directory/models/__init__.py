from provider_directory.models.acceptance import (  # noqa: F401
    AcceptanceStatus,
    ConfidenceLevel,
    ProviderStatus,
    VerificationSource,
)
