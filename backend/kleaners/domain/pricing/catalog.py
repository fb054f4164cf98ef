from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Literal, Mapping

ADD_ON_DURATION_MINUTES = 30


@dataclass(frozen=True)
class AddOnDefinition:
    id: str
    name: str
    description: str
    price: int
    duration: int = ADD_ON_DURATION_MINUTES


@dataclass(frozen=True)
class DiscountDefinition:
    id: str
    name: str
    type: Literal["percentage", "fixed"]
    value: int
    description: str


ADD_ONS: Mapping[str, AddOnDefinition] = MappingProxyType(
    {
        addon.id: addon
        for addon in (
            AddOnDefinition(
                id="window_cleaning",
                name="Window Cleaning",
                description="Interior window and sill cleaning",
                price=25,
            ),
            AddOnDefinition(
                id="appliance_cleaning",
                name="Appliance Cleaning",
                description="Exterior wipe-down of kitchen appliances",
                price=35,
            ),
            AddOnDefinition(
                id="cabinet_cleaning",
                name="Cabinet Cleaning",
                description="Inside and outside of kitchen cabinets",
                price=30,
            ),
            AddOnDefinition(
                id="fridge_cleaning",
                name="Fridge Cleaning",
                description="Refrigerator interior cleaning",
                price=40,
            ),
            AddOnDefinition(
                id="oven_cleaning",
                name="Oven Cleaning",
                description="Deep oven degreasing",
                price=45,
            ),
            AddOnDefinition(
                id="garage_cleaning",
                name="Garage Cleaning",
                description="Sweeping and tidying of the garage",
                price=50,
            ),
        )
    }
)

DISCOUNTS: Mapping[str, DiscountDefinition] = MappingProxyType(
    {
        discount.id: discount
        for discount in (
            DiscountDefinition(
                id="first_time",
                name="First-time Customer",
                type="percentage",
                value=15,
                description="15% off your first cleaning",
            ),
            DiscountDefinition(
                id="regular_cleaning",
                name="Regular Cleaning",
                type="percentage",
                value=10,
                description="10% off for regular bookings",
            ),
            DiscountDefinition(
                id="referral",
                name="Referral Bonus",
                type="fixed",
                value=20,
                description="20 off with a referral code",
            ),
        )
    }
)


def _unique(ids: Iterable[str]) -> List[str]:
    seen: set[str] = set()
    ordered: List[str] = []
    for item in ids:
        if item not in seen:
            seen.add(item)
            ordered.append(item)
    return ordered


def resolve_add_ons(selected_ids: Iterable[str] | None) -> List[AddOnDefinition]:
    """Catalog entries for the selected ids, in selection order; unknown ids are skipped."""
    return [ADD_ONS[addon_id] for addon_id in _unique(selected_ids or []) if addon_id in ADD_ONS]


def resolve_discounts(selected_ids: Iterable[str] | None) -> List[DiscountDefinition]:
    return [DISCOUNTS[discount_id] for discount_id in _unique(selected_ids or []) if discount_id in DISCOUNTS]


def list_add_ons() -> List[AddOnDefinition]:
    return list(ADD_ONS.values())


def list_discounts() -> List[DiscountDefinition]:
    return list(DISCOUNTS.values())
