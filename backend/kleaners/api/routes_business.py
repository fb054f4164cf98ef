import logging

from fastapi import APIRouter, Query

from kleaners.domain.business import defaults as business_defaults
from kleaners.domain.business import validation as business_validation
from kleaners.domain.business.models import (
    ApplyDefaultsRequest,
    BusinessDetails,
    BusinessOptions,
    BusinessType,
    BusinessTypeDefaults,
    BusinessTypeOption,
    Cadence,
    CountLimits,
    FrequencyRecommendation,
    ValidationResult,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/v1/business/types", response_model=list[BusinessTypeOption])
async def list_business_types() -> list[BusinessTypeOption]:
    return business_defaults.get_business_types()


@router.get("/v1/business/options", response_model=BusinessOptions)
async def list_business_options() -> BusinessOptions:
    return BusinessOptions(
        floor_types=business_defaults.get_floor_type_options(),
        priorities=business_defaults.get_priority_options(),
        contracts=business_defaults.get_contract_options(),
    )


@router.get("/v1/business/types/{business_type}/defaults", response_model=BusinessTypeDefaults)
async def get_business_type_defaults(business_type: str) -> BusinessTypeDefaults:
    return business_defaults.get_business_type_defaults(business_type)


@router.post("/v1/business/defaults", response_model=BusinessDetails)
async def apply_business_defaults(request: ApplyDefaultsRequest) -> BusinessDetails:
    return business_defaults.apply_business_defaults(request.business_type, request.current)


@router.get("/v1/business/limits", response_model=CountLimits)
async def get_count_limits(frequency: Cadence) -> CountLimits:
    return CountLimits(
        visitor_count=business_validation.get_visitor_count_limits(frequency),
        cleaning_count=business_validation.get_cleaning_count_limits(frequency),
    )


@router.post("/v1/business/validate", response_model=ValidationResult)
async def validate_business(details: BusinessDetails) -> ValidationResult:
    result = business_validation.validate_business_details(details)
    logger.info(
        "business_details_validated",
        extra={
            "extra": {
                "business_type": details.business_type.value if details.business_type else None,
                "is_valid": result.is_valid,
                "error_count": len(result.errors),
                "warning_count": len(result.warnings),
            }
        },
    )
    return result


@router.get("/v1/business/recommendation", response_model=FrequencyRecommendation)
async def recommend_frequency(
    visitor_count: int = Query(..., ge=1),
    visitor_frequency: Cadence = Query(...),
    business_type: BusinessType = Query(BusinessType.other),
) -> FrequencyRecommendation:
    return business_validation.get_recommended_frequency(visitor_count, visitor_frequency, business_type)
