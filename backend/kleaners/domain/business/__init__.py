from .defaults import (
    apply_business_defaults,
    get_business_type_defaults,
    get_business_types,
    get_contract_options,
    get_floor_type_options,
    get_priority_options,
)
from .models import BusinessDetails, BusinessType, Cadence, FrequencyRecommendation, ValidationResult
from .validation import (
    get_cleaning_count_limits,
    get_recommended_frequency,
    get_visitor_count_limits,
    validate_business_details,
    validate_business_type_frequency,
    validate_frequency_visitor_match,
)

__all__ = [
    "BusinessDetails",
    "BusinessType",
    "Cadence",
    "FrequencyRecommendation",
    "ValidationResult",
    "apply_business_defaults",
    "get_business_type_defaults",
    "get_business_types",
    "get_cleaning_count_limits",
    "get_contract_options",
    "get_floor_type_options",
    "get_priority_options",
    "get_recommended_frequency",
    "get_visitor_count_limits",
    "validate_business_details",
    "validate_business_type_frequency",
    "validate_frequency_visitor_match",
]
