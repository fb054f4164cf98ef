from datetime import datetime
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, confloat, conint

MAX_SQUARE_FOOTAGE = 100_000
MAX_FLOORS = 100


class ServiceType(str, Enum):
    home_cleaning = "home_cleaning"
    office_cleaning = "office_cleaning"
    deep_cleaning = "deep_cleaning"
    move_in_out = "move_in_out"
    post_construction = "post_construction"


class CleaningFrequency(str, Enum):
    one_time = "one_time"
    weekly = "weekly"
    bi_weekly = "bi_weekly"
    monthly = "monthly"
    custom = "custom"


class PropertySizeTier(str, Enum):
    tier_1 = "tier_1"
    tier_2 = "tier_2"
    tier_3 = "tier_3"
    tier_4 = "tier_4"
    tier_5 = "tier_5"
    tier_6 = "tier_6"


class EffortLevel(str, Enum):
    basic = "basic"
    standard = "standard"
    kleaners = "kleaners"


class OfficeBusinessType(str, Enum):
    startup = "startup"
    corporate = "corporate"
    retail = "retail"
    medical = "medical"
    other = "other"


class PropertyDetails(BaseModel):
    model_config = ConfigDict(extra="forbid")

    property_type: Optional[Literal["apartment", "house", "office", "commercial"]] = None
    bedrooms: conint(ge=0)
    bathrooms: conint(ge=0)
    square_footage: confloat(gt=0, le=MAX_SQUARE_FOOTAGE, allow_inf_nan=False)
    floors: Optional[conint(ge=1, le=MAX_FLOORS)] = None
    has_basement: bool = False
    has_attic: bool = False
    has_garage: bool = False
    pets: bool = False
    access_instructions: Optional[str] = None
    size_tier: Optional[PropertySizeTier] = None


class OfficeDetails(BaseModel):
    model_config = ConfigDict(extra="forbid")

    workstations: conint(ge=0) = 0
    meeting_rooms: conint(ge=0) = 0
    common_areas: conint(ge=0) = 0
    has_kitchen: bool = False
    has_reception: bool = False
    business_type: OfficeBusinessType = OfficeBusinessType.other
    square_footage: Optional[confloat(gt=0, le=MAX_SQUARE_FOOTAGE, allow_inf_nan=False)] = None
    floors: Optional[conint(ge=1, le=MAX_FLOORS)] = None
    access_instructions: Optional[str] = None


class PropertyConstraints(BaseModel):
    max_bedrooms: int
    max_bathrooms: int
    description: str


class PropertyValidationResult(BaseModel):
    is_valid: bool
    errors: List[str] = Field(default_factory=list)
    constraints: PropertyConstraints


class EffortPrices(BaseModel):
    basic: int
    standard: int
    kleaners: int


class PricingBreakdown(BaseModel):
    size_tier: PropertySizeTier
    tier_name: str
    effort_level: EffortLevel
    effort_name: str
    base_price: int
    effort_multiplier: float
    final_price: int
    is_custom_quote: bool


class EstimateAddOn(BaseModel):
    id: str
    name: str
    description: str
    price: int
    duration: int
    is_selected: bool = True


class EstimateDiscount(BaseModel):
    id: str
    name: str
    type: Literal["percentage", "fixed"]
    value: int
    description: str


class EstimateBreakdown(BaseModel):
    base_service: int
    add_ons: int
    frequency_multiplier: float
    package_multiplier: Optional[float] = None
    discounts: int
    taxes: int
    total: int


class Estimate(BaseModel):
    base_price: int
    duration: int
    frequency: CleaningFrequency
    add_ons: List[EstimateAddOn] = Field(default_factory=list)
    discounts: List[EstimateDiscount] = Field(default_factory=list)
    total_price: int
    currency: str
    valid_until: datetime
    breakdown: EstimateBreakdown


class EstimateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    property_data: Optional[PropertyDetails | OfficeDetails] = None
    service_type: ServiceType = ServiceType.home_cleaning
    frequency: CleaningFrequency = CleaningFrequency.one_time
    add_ons: List[str] = Field(default_factory=list)
    discounts: List[str] = Field(default_factory=list)


class PricingBreakdownRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    property_data: PropertyDetails
    effort_level: EffortLevel = EffortLevel.standard
