from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, Optional

from kleaners.domain.business.models import (
    BusinessDetails,
    BusinessType,
    Cadence,
    FrequencyRecommendation,
    RangeLimits,
    ValidationResult,
)
from kleaners.domain.rounding import round_half_up

MIN_SQUARE_FOOTAGE = 50
MAX_SQUARE_FOOTAGE = 1000
MIN_CLEANING_COUNT = 1
MAX_CLEANING_COUNT = 20

DAYS_PER_PERIOD: Mapping[Cadence, int] = MappingProxyType(
    {
        Cadence.daily: 1,
        Cadence.weekly: 7,
        Cadence.monthly: 30,
    }
)

VISITOR_COUNT_LIMITS: Mapping[Cadence, RangeLimits] = MappingProxyType(
    {
        Cadence.daily: RangeLimits(min=1, max=200, step=1),
        Cadence.weekly: RangeLimits(min=1, max=500, step=10),
        Cadence.monthly: RangeLimits(min=1, max=1000, step=25),
    }
)
DEFAULT_VISITOR_COUNT_LIMITS = RangeLimits(min=1, max=1000, step=10)

CLEANING_COUNT_LIMITS: Mapping[Cadence, RangeLimits] = MappingProxyType(
    {
        Cadence.daily: RangeLimits(min=1, max=5, step=1),
        Cadence.weekly: RangeLimits(min=1, max=14, step=1),
        Cadence.monthly: RangeLimits(min=1, max=8, step=1),
    }
)
DEFAULT_CLEANING_COUNT_LIMITS = RangeLimits(min=1, max=20, step=1)

HYGIENE_CRITICAL_TYPES = frozenset({BusinessType.medical.value, BusinessType.restaurant.value})


def _as_cadence(value: Cadence | str | None) -> Cadence | None:
    try:
        return Cadence(value)
    except ValueError:
        return None


def _type_name(business_type: BusinessType | str | None) -> str:
    if isinstance(business_type, BusinessType):
        return business_type.value
    return str(business_type) if business_type is not None else ""


def to_daily_visitors(visitor_count: float, visitor_frequency: Cadence | str) -> float:
    # Anything that is not daily or weekly is treated as a monthly count.
    days = DAYS_PER_PERIOD.get(_as_cadence(visitor_frequency), DAYS_PER_PERIOD[Cadence.monthly])
    return visitor_count / days


def get_visitor_count_limits(cleaning_frequency: Cadence | str | None) -> RangeLimits:
    return VISITOR_COUNT_LIMITS.get(_as_cadence(cleaning_frequency), DEFAULT_VISITOR_COUNT_LIMITS).model_copy()


def get_cleaning_count_limits(cleaning_frequency: Cadence | str | None) -> RangeLimits:
    return CLEANING_COUNT_LIMITS.get(_as_cadence(cleaning_frequency), DEFAULT_CLEANING_COUNT_LIMITS).model_copy()


def validate_frequency_visitor_match(
    cleaning_frequency: Cadence | str,
    visitor_count: float,
    visitor_frequency: Cadence | str,
) -> Optional[str]:
    """Flag cleaning schedules that do not fit the visitor load."""
    daily_visitors = to_daily_visitors(visitor_count, visitor_frequency)
    shown = round_half_up(daily_visitors)
    frequency = _as_cadence(cleaning_frequency)

    if frequency is Cadence.monthly and daily_visitors > 20:
        return (
            f"High daily visitor count ({shown}) with monthly cleaning may not provide adequate "
            "maintenance. Consider weekly cleaning for better results."
        )
    if frequency is Cadence.weekly and daily_visitors > 100:
        return (
            f"Very high daily visitor count ({shown}) with weekly cleaning may require more frequent "
            "service. Consider daily cleaning for optimal maintenance."
        )
    if frequency is Cadence.daily and daily_visitors < 5:
        return (
            f"Low daily visitor count ({shown}) with daily cleaning may be excessive. "
            "Consider weekly cleaning for cost efficiency."
        )
    return None


def validate_business_type_frequency(
    business_type: BusinessType | str, cleaning_frequency: Cadence | str
) -> Optional[str]:
    type_name = _type_name(business_type)
    frequency = _as_cadence(cleaning_frequency)

    if type_name in HYGIENE_CRITICAL_TYPES and frequency is Cadence.monthly:
        return (
            f"{type_name} businesses typically require more frequent cleaning for hygiene and safety. "
            "Consider daily or weekly cleaning."
        )
    if type_name == BusinessType.warehouse.value and frequency is Cadence.daily:
        return (
            "Warehouses typically require less frequent cleaning. "
            "Consider weekly or monthly cleaning for cost efficiency."
        )
    return None


def validate_business_details(data: BusinessDetails) -> ValidationResult:
    errors: List[str] = []
    warnings: List[str] = []

    if not data.business_type:
        errors.append("Please select your business type")
    if not data.square_footage or not MIN_SQUARE_FOOTAGE <= data.square_footage <= MAX_SQUARE_FOOTAGE:
        errors.append(f"Please enter a valid business size ({MIN_SQUARE_FOOTAGE}-{MAX_SQUARE_FOOTAGE} sqm)")
    if not data.cleaning_frequency:
        errors.append("Please select cleaning frequency")
    if not data.cleaning_count or not MIN_CLEANING_COUNT <= data.cleaning_count <= MAX_CLEANING_COUNT:
        errors.append(f"Please enter a valid cleaning count ({MIN_CLEANING_COUNT}-{MAX_CLEANING_COUNT})")
    if not data.floor_type:
        errors.append("Please select your floor type")
    if not data.visitor_count or data.visitor_count < 1:
        errors.append("Please enter a valid visitor count")
    if not data.visitor_frequency:
        errors.append("Please select visitor frequency")
    if not data.priority:
        errors.append("Please select your priority")

    if data.cleaning_frequency and data.visitor_count and data.visitor_frequency:
        warning = validate_frequency_visitor_match(
            data.cleaning_frequency, data.visitor_count, data.visitor_frequency
        )
        if warning:
            warnings.append(warning)

    if data.business_type and data.cleaning_frequency:
        warning = validate_business_type_frequency(data.business_type, data.cleaning_frequency)
        if warning:
            warnings.append(warning)

    return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)


def get_recommended_frequency(
    visitor_count: float,
    visitor_frequency: Cadence | str,
    business_type: BusinessType | str | None,
) -> FrequencyRecommendation:
    daily_visitors = to_daily_visitors(visitor_count, visitor_frequency)
    shown = round_half_up(daily_visitors)
    type_name = _type_name(business_type)

    if type_name in HYGIENE_CRITICAL_TYPES:
        return FrequencyRecommendation(
            recommended=Cadence.daily,
            reason=f"{type_name} businesses require daily cleaning for hygiene and safety standards",
            confidence="high",
        )
    if type_name == BusinessType.warehouse.value:
        return FrequencyRecommendation(
            recommended=Cadence.monthly,
            reason="Warehouses typically require less frequent cleaning due to lower foot traffic",
            confidence="high",
        )

    if daily_visitors >= 50:
        return FrequencyRecommendation(
            recommended=Cadence.daily,
            reason=f"High daily traffic ({shown} visitors) requires daily maintenance",
            confidence="medium",
        )
    if daily_visitors >= 20:
        return FrequencyRecommendation(
            recommended=Cadence.weekly,
            reason=f"Moderate daily traffic ({shown} visitors) is well-suited for weekly cleaning",
            confidence="medium",
        )
    return FrequencyRecommendation(
        recommended=Cadence.monthly,
        reason=f"Low daily traffic ({shown} visitors) can be maintained with monthly cleaning",
        confidence="low",
    )
