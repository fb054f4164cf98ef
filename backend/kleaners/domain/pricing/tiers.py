from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from kleaners.domain.errors import PricingInputError
from kleaners.domain.pricing.models import (
    EffortLevel,
    EffortPrices,
    PricingBreakdown,
    PropertyDetails,
    PropertySizeTier,
)
from kleaners.domain.rounding import round_half_up


@dataclass(frozen=True)
class SizeTierInfo:
    min: float
    max: float
    name: str
    base_price: int


@dataclass(frozen=True)
class EffortLevelInfo:
    name: str
    tagline: str
    duration: str
    description: str


SIZE_TIERS: Mapping[PropertySizeTier, SizeTierInfo] = MappingProxyType(
    {
        PropertySizeTier.tier_1: SizeTierInfo(min=50, max=70, name="50-70sqm", base_price=60),
        PropertySizeTier.tier_2: SizeTierInfo(min=70, max=90, name="70-90sqm", base_price=80),
        PropertySizeTier.tier_3: SizeTierInfo(min=90, max=110, name="90-110sqm", base_price=100),
        PropertySizeTier.tier_4: SizeTierInfo(min=110, max=130, name="110-130sqm", base_price=120),
        PropertySizeTier.tier_5: SizeTierInfo(min=130, max=150, name="130-150sqm", base_price=140),
        PropertySizeTier.tier_6: SizeTierInfo(min=150, max=math.inf, name="150+sqm", base_price=0),
    }
)

CUSTOM_QUOTE_TIER = PropertySizeTier.tier_6
CUSTOM_QUOTE_MIN_SQUARE_FOOTAGE = 150

EFFORT_MULTIPLIERS: Mapping[EffortLevel, float] = MappingProxyType(
    {
        EffortLevel.basic: 1.0,
        EffortLevel.standard: 1.5,
        EffortLevel.kleaners: 2.0,
    }
)

EFFORT_LEVEL_INFO: Mapping[EffortLevel, EffortLevelInfo] = MappingProxyType(
    {
        EffortLevel.basic: EffortLevelInfo(
            name="BASIC",
            tagline="The Essentials",
            duration="2-3 hours",
            description="Essential cleaning done efficiently",
        ),
        EffortLevel.standard: EffortLevelInfo(
            name="STANDARD",
            tagline="Professional Quality",
            duration="3-4 hours",
            description="Professional quality you can trust",
        ),
        EffortLevel.kleaners: EffortLevelInfo(
            name="KLEANERS",
            tagline="Luxury Experience",
            duration="4-6 hours",
            description="Luxury transformation you've never experienced",
        ),
    }
)


def _coerce_tier(value: PropertySizeTier | str) -> PropertySizeTier:
    if isinstance(value, PropertySizeTier):
        return value
    if isinstance(value, str):
        try:
            return PropertySizeTier(value)
        except ValueError:
            pass
    raise PricingInputError(
        detail=f"Unknown property size tier: {value!r}",
        errors=[{"field": "tier", "message": "Unknown property size tier"}],
    )


def _coerce_effort(value: EffortLevel | str) -> EffortLevel:
    if isinstance(value, EffortLevel):
        return value
    if isinstance(value, str):
        try:
            return EffortLevel(value)
        except ValueError:
            pass
    raise PricingInputError(
        detail=f"Unknown effort level: {value!r}",
        errors=[{"field": "effort_level", "message": "Unknown effort level"}],
    )


def get_size_tier(square_footage: float) -> PropertySizeTier:
    # Anything outside the catalogued bands, including sizes below 50, needs a custom quote.
    for tier, info in SIZE_TIERS.items():
        if tier is CUSTOM_QUOTE_TIER:
            continue
        if info.min <= square_footage < info.max:
            return tier
    return CUSTOM_QUOTE_TIER


def requires_custom_quote(square_footage: float) -> bool:
    return square_footage >= CUSTOM_QUOTE_MIN_SQUARE_FOOTAGE


def get_size_tier_info(size_tier: PropertySizeTier | str) -> SizeTierInfo:
    return SIZE_TIERS[_coerce_tier(size_tier)]


def get_effort_level_info(effort_level: EffortLevel | str) -> EffortLevelInfo:
    return EFFORT_LEVEL_INFO[_coerce_effort(effort_level)]


def calculate_price(size_tier: PropertySizeTier | str, effort_level: EffortLevel | str) -> int:
    """Price a size tier at an effort level.

    The custom-quote tier always prices at 0; callers should check
    ``requires_custom_quote`` before presenting a price.
    """
    tier = _coerce_tier(size_tier)
    effort = _coerce_effort(effort_level)
    if tier is CUSTOM_QUOTE_TIER:
        return 0
    return round_half_up(SIZE_TIERS[tier].base_price * EFFORT_MULTIPLIERS[effort])


def get_price_for_all_efforts(size_tier: PropertySizeTier | str) -> EffortPrices:
    return EffortPrices(
        basic=calculate_price(size_tier, EffortLevel.basic),
        standard=calculate_price(size_tier, EffortLevel.standard),
        kleaners=calculate_price(size_tier, EffortLevel.kleaners),
    )


def get_pricing_breakdown(property_data: PropertyDetails, effort_level: EffortLevel | str) -> PricingBreakdown:
    effort = _coerce_effort(effort_level)
    size_tier = get_size_tier(property_data.square_footage)
    tier_info = SIZE_TIERS[size_tier]
    return PricingBreakdown(
        size_tier=size_tier,
        tier_name=tier_info.name,
        effort_level=effort,
        effort_name=EFFORT_LEVEL_INFO[effort].name,
        base_price=tier_info.base_price,
        effort_multiplier=EFFORT_MULTIPLIERS[effort],
        final_price=calculate_price(size_tier, effort),
        is_custom_quote=size_tier is CUSTOM_QUOTE_TIER,
    )
