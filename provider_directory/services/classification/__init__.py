from provider_directory.services.classification.taxonomy_classifier import (  # noqa: F401
    TaxonomyClassification,
    classify_taxonomy_code,
    get_specialty_category,
    get_taxonomy_description,
)
