from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping

from kleaners.domain.business.models import (
    BusinessDetails,
    BusinessType,
    BusinessTypeDefaults,
    BusinessTypeOption,
    Cadence,
    ContractOption,
    ContractType,
    FloorType,
    Priority,
    SelectOption,
)

BUSINESS_TYPE_DEFAULTS: Mapping[BusinessType, BusinessTypeDefaults] = MappingProxyType(
    {
        BusinessType.office: BusinessTypeDefaults(
            cleaning_frequency=Cadence.weekly,
            priority=Priority.quality,
            floor_type=FloorType.vinyl,
            cleaning_count=2,
            contract_type=ContractType.six_month,
            description="Professional office cleaning for corporate environments",
            features=("Desk sanitization", "Meeting room cleaning", "Reception area maintenance"),
        ),
        BusinessType.medical: BusinessTypeDefaults(
            cleaning_frequency=Cadence.daily,
            priority=Priority.quality,
            floor_type=FloorType.vinyl,
            cleaning_count=1,
            contract_type=ContractType.twelve_month,
            description="Medical-grade cleaning for healthcare facilities",
            features=("Disinfection protocols", "Sterile environment maintenance", "Compliance standards"),
        ),
        BusinessType.retail: BusinessTypeDefaults(
            cleaning_frequency=Cadence.weekly,
            priority=Priority.price,
            floor_type=FloorType.laminate,
            cleaning_count=2,
            contract_type=ContractType.six_month,
            description="Retail store cleaning for customer-facing spaces",
            features=("Display area cleaning", "Customer restroom maintenance", "Floor polishing"),
        ),
        BusinessType.restaurant: BusinessTypeDefaults(
            cleaning_frequency=Cadence.daily,
            priority=Priority.reliability,
            floor_type=FloorType.tiles,
            cleaning_count=2,
            contract_type=ContractType.twelve_month,
            description="Restaurant cleaning for food service environments",
            features=("Kitchen deep cleaning", "Dining area sanitization", "Grease removal"),
        ),
        BusinessType.gym: BusinessTypeDefaults(
            cleaning_frequency=Cadence.daily,
            priority=Priority.quality,
            floor_type=FloorType.concrete,
            cleaning_count=2,
            contract_type=ContractType.six_month,
            description="Fitness center cleaning for high-traffic areas",
            features=("Equipment sanitization", "Locker room cleaning", "Floor maintenance"),
        ),
        BusinessType.salon: BusinessTypeDefaults(
            cleaning_frequency=Cadence.daily,
            priority=Priority.quality,
            floor_type=FloorType.tiles,
            cleaning_count=1,
            contract_type=ContractType.six_month,
            description="Beauty salon cleaning for client comfort",
            features=("Station sanitization", "Tool sterilization", "Client area maintenance"),
        ),
        BusinessType.warehouse: BusinessTypeDefaults(
            cleaning_frequency=Cadence.monthly,
            priority=Priority.price,
            floor_type=FloorType.concrete,
            cleaning_count=1,
            contract_type=ContractType.twelve_month,
            description="Warehouse cleaning for industrial spaces",
            features=("Dust removal", "Floor sweeping", "Equipment cleaning"),
        ),
        BusinessType.other: BusinessTypeDefaults(
            cleaning_frequency=Cadence.weekly,
            priority=Priority.quality,
            floor_type=FloorType.vinyl,
            cleaning_count=2,
            contract_type=ContractType.six_month,
            description="Custom business cleaning solutions",
            features=("Flexible scheduling", "Customized cleaning plans", "Professional service"),
        ),
    }
)

FLOOR_TYPE_OPTIONS: tuple[SelectOption, ...] = (
    SelectOption(value="vinyl", label="Vinyl", description="Easy to clean, durable, common in offices"),
    SelectOption(value="laminate", label="Laminate", description="Wood-like appearance, easy maintenance"),
    SelectOption(value="wooden", label="Wooden", description="Natural wood floors, requires special care"),
    SelectOption(value="tiles", label="Tiles", description="Ceramic or stone tiles, waterproof"),
    SelectOption(value="carpet", label="Carpet", description="Soft flooring, requires deep cleaning"),
    SelectOption(value="concrete", label="Concrete", description="Industrial flooring, durable and practical"),
)

PRIORITY_OPTIONS: tuple[SelectOption, ...] = (
    SelectOption(value="quality", label="Quality", description="Premium service and attention to detail"),
    SelectOption(value="price", label="Price", description="Cost-effective solutions and competitive rates"),
    SelectOption(
        value="reliability", label="Reliability", description="Consistent service and dependable scheduling"
    ),
)

CONTRACT_OPTIONS: tuple[ContractOption, ...] = (
    ContractOption(value="one-time", label="One-time", description="Single cleaning service", discount=0),
    ContractOption(
        value="6-month",
        label="6-month Contract",
        description="6 months of regular service",
        discount=10,
        badge="Save 10%",
    ),
    ContractOption(
        value="12-month",
        label="12-month Contract",
        description="12 months of regular service",
        discount=20,
        badge="Save 20%",
    ),
)


def resolve_business_type(business_type: BusinessType | str | None) -> BusinessType:
    """Map any input onto a known business type, falling back to ``other``."""
    if isinstance(business_type, BusinessType):
        return business_type
    try:
        return BusinessType(business_type)
    except ValueError:
        return BusinessType.other


def get_business_type_defaults(business_type: BusinessType | str | None) -> BusinessTypeDefaults:
    return BUSINESS_TYPE_DEFAULTS[resolve_business_type(business_type)]


def get_business_types() -> List[BusinessTypeOption]:
    return [
        BusinessTypeOption(value=key, label=key.value.capitalize(), **defaults.model_dump())
        for key, defaults in BUSINESS_TYPE_DEFAULTS.items()
    ]


def get_floor_type_options() -> List[SelectOption]:
    return list(FLOOR_TYPE_OPTIONS)


def get_priority_options() -> List[SelectOption]:
    return list(PRIORITY_OPTIONS)


def get_contract_options() -> List[ContractOption]:
    return list(CONTRACT_OPTIONS)


def apply_business_defaults(
    business_type: BusinessType | str | None, current: BusinessDetails | None = None
) -> BusinessDetails:
    """Fill unset fields of ``current`` from the business type defaults.

    Fields already set on ``current`` are kept; ``business_type`` is always
    replaced with the requested type.
    """
    resolved = resolve_business_type(business_type)
    defaults = BUSINESS_TYPE_DEFAULTS[resolved]
    current = current or BusinessDetails()

    return current.model_copy(
        update={
            "business_type": resolved,
            "cleaning_frequency": (
                current.cleaning_frequency if current.cleaning_frequency is not None else defaults.cleaning_frequency
            ),
            "priority": current.priority if current.priority is not None else defaults.priority,
            "floor_type": current.floor_type if current.floor_type is not None else defaults.floor_type,
            "cleaning_count": (
                current.cleaning_count if current.cleaning_count is not None else defaults.cleaning_count
            ),
            "contract_type": (
                current.contract_type if current.contract_type is not None else defaults.contract_type
            ),
        }
    )
