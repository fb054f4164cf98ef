from __future__ import annotations

from kleaners.domain.pricing.models import (
    PropertyConstraints,
    PropertyDetails,
    PropertyValidationResult,
)

# (min sqm inclusive, max sqm inclusive, max bedrooms, max bathrooms, description)
_CONSTRAINT_BANDS: tuple[tuple[float, float, int, int, str], ...] = (
    (50, 69, 2, 1, "Studio/1BR - Up to 2 bedrooms, 1 bathroom"),
    (70, 89, 2, 2, "2BR - Up to 2 bedrooms, 2 bathrooms"),
    (90, 109, 3, 2, "3BR - Up to 3 bedrooms, 2 bathrooms"),
    (110, 129, 4, 3, "4BR - Up to 4 bedrooms, 3 bathrooms"),
    (130, 150, 4, 4, "Large 4BR - Up to 4 bedrooms, 4 bathrooms"),
)

LARGE_PROPERTY_CONSTRAINTS = PropertyConstraints(
    max_bedrooms=5,
    max_bathrooms=5,
    description="Large Property - Up to 5 bedrooms, 5 bathrooms",
)


def get_property_constraints(square_footage: float) -> PropertyConstraints:
    for low, high, max_bedrooms, max_bathrooms, description in _CONSTRAINT_BANDS:
        if low <= square_footage <= high:
            return PropertyConstraints(
                max_bedrooms=max_bedrooms,
                max_bathrooms=max_bathrooms,
                description=description,
            )
    return LARGE_PROPERTY_CONSTRAINTS.model_copy()


def validate_property_details(property_data: PropertyDetails) -> PropertyValidationResult:
    constraints = get_property_constraints(property_data.square_footage)
    errors: list[str] = []

    if property_data.bedrooms > constraints.max_bedrooms:
        errors.append(f"Maximum {constraints.max_bedrooms} bedrooms allowed for this property size")
    if property_data.bathrooms > constraints.max_bathrooms:
        errors.append(f"Maximum {constraints.max_bathrooms} bathrooms allowed for this property size")

    return PropertyValidationResult(
        is_valid=not errors,
        errors=errors,
        constraints=constraints,
    )
