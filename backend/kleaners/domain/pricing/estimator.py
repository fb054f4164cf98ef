from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from types import MappingProxyType
from typing import Iterable, Mapping

from kleaners.domain.errors import PricingInputError
from kleaners.domain.pricing.catalog import resolve_add_ons, resolve_discounts
from kleaners.domain.pricing.models import (
    CleaningFrequency,
    Estimate,
    EstimateAddOn,
    EstimateBreakdown,
    EstimateDiscount,
    OfficeDetails,
    PropertyDetails,
    ServiceType,
)
from kleaners.domain.rounding import round_half_up

DEFAULT_SQUARE_FOOTAGE = 1000
DEFAULT_FLOORS = 1
MINIMUM_BASE_PRICE = 80
TAX_RATE = 0.08
BASE_DURATION_MINUTES = 120
ESTIMATE_VALID_DAYS = 7
DEFAULT_CURRENCY = "EUR"

RATE_PER_SQUARE_UNIT: Mapping[ServiceType, float] = MappingProxyType(
    {
        ServiceType.home_cleaning: 0.15,
        ServiceType.office_cleaning: 0.12,
        ServiceType.deep_cleaning: 0.25,
    }
)

FREQUENCY_MULTIPLIERS: Mapping[CleaningFrequency, float] = MappingProxyType(
    {
        CleaningFrequency.weekly: 0.8,
        CleaningFrequency.bi_weekly: 0.9,
    }
)


def _coerce_service_type(value: ServiceType | str) -> ServiceType:
    try:
        return ServiceType(value)
    except ValueError as exc:
        raise PricingInputError(
            detail=f"Unknown service type: {value!r}",
            errors=[{"field": "service_type", "message": "Unknown service type"}],
        ) from exc


def _coerce_frequency(value: CleaningFrequency | str) -> CleaningFrequency:
    try:
        return CleaningFrequency(value)
    except ValueError as exc:
        raise PricingInputError(
            detail=f"Unknown cleaning frequency: {value!r}",
            errors=[{"field": "frequency", "message": "Unknown cleaning frequency"}],
        ) from exc


def calculate_base_price(
    property_data: PropertyDetails | OfficeDetails | None, service_type: ServiceType | str
) -> float:
    square_footage = getattr(property_data, "square_footage", None) or DEFAULT_SQUARE_FOOTAGE
    floors = getattr(property_data, "floors", None) or DEFAULT_FLOORS
    rate = RATE_PER_SQUARE_UNIT.get(_coerce_service_type(service_type), 0.0)
    base_price = max(square_footage * rate * floors, MINIMUM_BASE_PRICE)
    if not math.isfinite(base_price):
        raise PricingInputError(
            detail="Property size is too large to price",
            errors=[{"field": "square_footage", "message": "Property size is too large to price"}],
        )
    return base_price


def get_frequency_multiplier(frequency: CleaningFrequency | str) -> float:
    return FREQUENCY_MULTIPLIERS.get(_coerce_frequency(frequency), 1.0)


def net_total(subtotal: float, discount_total: float) -> float:
    return max(subtotal - discount_total, 0.0)


def compute_estimate(
    property_data: PropertyDetails | OfficeDetails | None,
    service_type: ServiceType | str,
    frequency: CleaningFrequency | str,
    selected_add_on_ids: Iterable[str] | None = None,
    selected_discount_ids: Iterable[str] | None = None,
    *,
    now: datetime | None = None,
    currency: str = DEFAULT_CURRENCY,
) -> Estimate:
    """Build a fresh estimate for the booking session.

    Percentage discounts apply to base price plus add-ons before the frequency
    multiplier; the pre-tax total never drops below zero. ``total_price`` is the
    rounded pre-tax total while ``breakdown.total`` is rounded separately from the
    unrounded total with tax, so the two may differ from ``total_price + taxes``
    by one unit.

    Add-on ids are matched against the catalog: unknown ids are ignored and a
    repeated id counts once, so each matched add-on adds its 30 minutes to the
    120-minute base duration.
    """
    frequency = _coerce_frequency(frequency)
    base_price = calculate_base_price(property_data, service_type)
    frequency_multiplier = get_frequency_multiplier(frequency)

    add_ons = resolve_add_ons(selected_add_on_ids)
    add_ons_total = float(sum(addon.price for addon in add_ons))

    discounts = resolve_discounts(selected_discount_ids)
    pre_discount = base_price + add_ons_total
    discount_total = 0.0
    for discount in discounts:
        if discount.type == "percentage":
            discount_total += pre_discount * discount.value / 100
        else:
            discount_total += discount.value

    subtotal = pre_discount * frequency_multiplier
    total = net_total(subtotal, discount_total)
    duration = BASE_DURATION_MINUTES + sum(addon.duration for addon in add_ons)
    issued_at = now or datetime.now(timezone.utc)

    breakdown = EstimateBreakdown(
        base_service=round_half_up(base_price),
        add_ons=round_half_up(add_ons_total),
        frequency_multiplier=frequency_multiplier,
        discounts=round_half_up(discount_total),
        taxes=round_half_up(total * TAX_RATE),
        total=round_half_up(total * (1 + TAX_RATE)),
    )

    return Estimate(
        base_price=breakdown.base_service,
        duration=duration,
        frequency=frequency,
        add_ons=[
            EstimateAddOn(
                id=addon.id,
                name=addon.name,
                description=addon.description,
                price=addon.price,
                duration=addon.duration,
                is_selected=True,
            )
            for addon in add_ons
        ],
        discounts=[
            EstimateDiscount(
                id=discount.id,
                name=discount.name,
                type=discount.type,
                value=discount.value,
                description=discount.description,
            )
            for discount in discounts
        ],
        total_price=round_half_up(total),
        currency=currency,
        valid_until=issued_at + timedelta(days=ESTIMATE_VALID_DAYS),
        breakdown=breakdown,
    )
