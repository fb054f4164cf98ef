from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class BusinessType(str, Enum):
    office = "office"
    medical = "medical"
    retail = "retail"
    restaurant = "restaurant"
    gym = "gym"
    salon = "salon"
    warehouse = "warehouse"
    other = "other"


class Cadence(str, Enum):
    daily = "daily"
    weekly = "weekly"
    monthly = "monthly"


class FloorType(str, Enum):
    vinyl = "vinyl"
    laminate = "laminate"
    wooden = "wooden"
    tiles = "tiles"
    carpet = "carpet"
    concrete = "concrete"


class Priority(str, Enum):
    quality = "quality"
    price = "price"
    reliability = "reliability"


class ContractType(str, Enum):
    one_time = "one-time"
    six_month = "6-month"
    twelve_month = "12-month"


class BusinessDetails(BaseModel):
    """Commercial booking inputs as collected by the wizard.

    Every field is optional so partially-filled forms can be validated; range
    checks live in ``validate_business_details`` rather than on the model so they
    come back as user-facing messages instead of 422s.
    """

    model_config = ConfigDict(extra="forbid")

    business_type: Optional[BusinessType] = None
    square_footage: Optional[float] = None
    cleaning_frequency: Optional[Cadence] = None
    cleaning_count: Optional[int] = None
    floor_type: Optional[FloorType] = None
    visitor_count: Optional[int] = None
    visitor_frequency: Optional[Cadence] = None
    priority: Optional[Priority] = None
    contract_type: Optional[ContractType] = None


class BusinessTypeDefaults(BaseModel):
    cleaning_frequency: Cadence
    priority: Priority
    floor_type: FloorType
    cleaning_count: int
    contract_type: ContractType
    description: str
    features: tuple[str, ...]


class BusinessTypeOption(BusinessTypeDefaults):
    value: BusinessType
    label: str


class SelectOption(BaseModel):
    value: str
    label: str
    description: str


class ContractOption(SelectOption):
    discount: int
    badge: Optional[str] = None


class BusinessOptions(BaseModel):
    floor_types: List[SelectOption]
    priorities: List[SelectOption]
    contracts: List[ContractOption]


class RangeLimits(BaseModel):
    min: int
    max: int
    step: int


class CountLimits(BaseModel):
    visitor_count: RangeLimits
    cleaning_count: RangeLimits


class ValidationResult(BaseModel):
    is_valid: bool
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


class FrequencyRecommendation(BaseModel):
    recommended: Cadence
    reason: str
    confidence: Literal["low", "medium", "high"]


class ApplyDefaultsRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    business_type: BusinessType
    current: BusinessDetails = Field(default_factory=BusinessDetails)
