import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from kleaners.dependencies import get_app_settings
from kleaners.domain.pricing.catalog import AddOnDefinition, DiscountDefinition, list_add_ons, list_discounts
from kleaners.domain.pricing.estimator import compute_estimate
from kleaners.domain.pricing.models import Estimate, EstimateRequest
from kleaners.settings import Settings

router = APIRouter()
logger = logging.getLogger(__name__)


class EstimateCatalogResponse(BaseModel):
    add_ons: list[AddOnDefinition]
    discounts: list[DiscountDefinition]


@router.get("/v1/estimate/catalog", response_model=EstimateCatalogResponse)
async def get_estimate_catalog() -> EstimateCatalogResponse:
    return EstimateCatalogResponse(add_ons=list_add_ons(), discounts=list_discounts())


@router.post("/v1/estimate", response_model=Estimate)
async def create_estimate(
    request: EstimateRequest,
    app_settings: Settings = Depends(get_app_settings),
) -> Estimate:
    estimate = compute_estimate(
        request.property_data,
        request.service_type,
        request.frequency,
        request.add_ons,
        request.discounts,
        currency=app_settings.estimate_currency,
    )
    logger.info(
        "estimate_computed",
        extra={
            "extra": {
                "service_type": request.service_type.value,
                "frequency": estimate.frequency.value,
                "add_ons": [addon.id for addon in estimate.add_ons],
                "discounts": [discount.id for discount in estimate.discounts],
                "total_price": estimate.total_price,
            }
        },
    )
    return estimate
