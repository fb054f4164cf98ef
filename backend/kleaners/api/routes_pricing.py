import math

from fastapi import APIRouter, Query
from pydantic import BaseModel

from kleaners.domain.pricing.constraints import get_property_constraints, validate_property_details
from kleaners.domain.pricing.models import (
    MAX_SQUARE_FOOTAGE,
    EffortLevel,
    EffortPrices,
    PricingBreakdown,
    PricingBreakdownRequest,
    PropertyConstraints,
    PropertyDetails,
    PropertySizeTier,
    PropertyValidationResult,
)
from kleaners.domain.pricing.tiers import (
    SIZE_TIERS,
    calculate_price,
    get_price_for_all_efforts,
    get_pricing_breakdown,
    get_size_tier,
    requires_custom_quote,
)

router = APIRouter()


class SizeTierResponse(BaseModel):
    tier: PropertySizeTier
    name: str
    min_square_footage: float
    max_square_footage: float | None
    base_price: int
    prices: EffortPrices


class PriceQuoteResponse(BaseModel):
    square_footage: float
    size_tier: PropertySizeTier
    requires_custom_quote: bool
    prices: EffortPrices
    constraints: PropertyConstraints


class PriceResponse(BaseModel):
    tier: PropertySizeTier
    effort_level: EffortLevel
    price: int


@router.get("/v1/pricing/tiers", response_model=list[SizeTierResponse])
async def list_size_tiers() -> list[SizeTierResponse]:
    return [
        SizeTierResponse(
            tier=tier,
            name=info.name,
            min_square_footage=info.min,
            max_square_footage=None if math.isinf(info.max) else info.max,
            base_price=info.base_price,
            prices=get_price_for_all_efforts(tier),
        )
        for tier, info in SIZE_TIERS.items()
    ]


@router.get("/v1/pricing/quote", response_model=PriceQuoteResponse)
async def get_price_quote(
    square_footage: float = Query(..., gt=0, le=MAX_SQUARE_FOOTAGE),
) -> PriceQuoteResponse:
    tier = get_size_tier(square_footage)
    return PriceQuoteResponse(
        square_footage=square_footage,
        size_tier=tier,
        requires_custom_quote=requires_custom_quote(square_footage),
        prices=get_price_for_all_efforts(tier),
        constraints=get_property_constraints(square_footage),
    )


@router.get("/v1/pricing/price", response_model=PriceResponse)
async def get_price(tier: PropertySizeTier, effort_level: EffortLevel) -> PriceResponse:
    return PriceResponse(tier=tier, effort_level=effort_level, price=calculate_price(tier, effort_level))


@router.post("/v1/pricing/property/validate", response_model=PropertyValidationResult)
async def validate_property(property_data: PropertyDetails) -> PropertyValidationResult:
    return validate_property_details(property_data)


@router.post("/v1/pricing/breakdown", response_model=PricingBreakdown)
async def create_pricing_breakdown(request: PricingBreakdownRequest) -> PricingBreakdown:
    return get_pricing_breakdown(request.property_data, request.effort_level)
