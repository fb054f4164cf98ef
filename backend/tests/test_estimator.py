from datetime import timedelta

import pytest
from pydantic import ValidationError

from kleaners.domain.errors import PricingInputError
from kleaners.domain.pricing.catalog import ADD_ONS, DISCOUNTS
from kleaners.domain.pricing.estimator import compute_estimate, net_total
from kleaners.domain.pricing.models import (
    CleaningFrequency,
    OfficeDetails,
    PropertyDetails,
    ServiceType,
)


def _home(square_footage: float = 1000, floors: int | None = 1) -> PropertyDetails:
    return PropertyDetails(bedrooms=2, bathrooms=1, square_footage=square_footage, floors=floors)


def test_weekly_home_cleaning_example(fixed_now):
    estimate = compute_estimate(_home(), ServiceType.home_cleaning, CleaningFrequency.weekly, now=fixed_now)
    assert estimate.base_price == 150
    assert estimate.breakdown.frequency_multiplier == 0.8
    assert estimate.total_price == 120
    assert estimate.breakdown.taxes == 10
    assert estimate.breakdown.total == 130
    assert estimate.breakdown.add_ons == 0
    assert estimate.breakdown.discounts == 0
    assert estimate.duration == 120
    assert estimate.currency == "EUR"
    assert estimate.frequency == CleaningFrequency.weekly


def test_valid_until_is_seven_days_out(fixed_now):
    estimate = compute_estimate(_home(), ServiceType.home_cleaning, CleaningFrequency.monthly, now=fixed_now)
    assert estimate.valid_until == fixed_now + timedelta(days=7)


@pytest.mark.parametrize(
    "service_type, expected",
    [
        (ServiceType.home_cleaning, 150),
        (ServiceType.office_cleaning, 120),
        (ServiceType.deep_cleaning, 250),
        (ServiceType.move_in_out, 80),
        (ServiceType.post_construction, 80),
    ],
)
def test_base_rate_by_service_type(service_type, expected, fixed_now):
    estimate = compute_estimate(_home(), service_type, CleaningFrequency.one_time, now=fixed_now)
    assert estimate.base_price == expected


def test_floors_multiply_base_price(fixed_now):
    estimate = compute_estimate(
        _home(square_footage=400, floors=3), ServiceType.home_cleaning, CleaningFrequency.one_time, now=fixed_now
    )
    assert estimate.base_price == 180


@pytest.mark.parametrize("square_footage", [1, 50, 300, 533])
@pytest.mark.parametrize("service_type", list(ServiceType))
def test_base_price_never_below_minimum(square_footage, service_type, fixed_now):
    estimate = compute_estimate(
        _home(square_footage=square_footage), service_type, CleaningFrequency.one_time, now=fixed_now
    )
    assert estimate.base_price >= 80


def test_missing_property_data_uses_defaults(fixed_now):
    estimate = compute_estimate(None, ServiceType.home_cleaning, CleaningFrequency.one_time, now=fixed_now)
    assert estimate.base_price == 150


def test_office_without_square_footage_uses_default(fixed_now):
    office = OfficeDetails(workstations=12, meeting_rooms=2)
    estimate = compute_estimate(office, ServiceType.office_cleaning, CleaningFrequency.one_time, now=fixed_now)
    assert estimate.base_price == 120


@pytest.mark.parametrize(
    "frequency, multiplier",
    [
        (CleaningFrequency.weekly, 0.8),
        (CleaningFrequency.bi_weekly, 0.9),
        (CleaningFrequency.monthly, 1.0),
        (CleaningFrequency.one_time, 1.0),
        (CleaningFrequency.custom, 1.0),
    ],
)
def test_frequency_multiplier(frequency, multiplier, fixed_now):
    estimate = compute_estimate(_home(), ServiceType.home_cleaning, frequency, now=fixed_now)
    assert estimate.breakdown.frequency_multiplier == multiplier


def test_add_ons_are_priced_and_extend_duration(fixed_now):
    estimate = compute_estimate(
        _home(),
        ServiceType.home_cleaning,
        CleaningFrequency.one_time,
        ["oven_cleaning", "window_cleaning"],
        now=fixed_now,
    )
    assert [addon.id for addon in estimate.add_ons] == ["oven_cleaning", "window_cleaning"]
    assert all(addon.is_selected for addon in estimate.add_ons)
    assert estimate.breakdown.add_ons == 70
    assert estimate.total_price == 220
    assert estimate.duration == 180


def test_unknown_and_repeated_add_ons_are_ignored(fixed_now):
    estimate = compute_estimate(
        _home(),
        ServiceType.home_cleaning,
        CleaningFrequency.one_time,
        ["garage_cleaning", "jacuzzi", "garage_cleaning"],
        now=fixed_now,
    )
    assert [addon.id for addon in estimate.add_ons] == ["garage_cleaning"]
    assert estimate.breakdown.add_ons == 50
    assert estimate.duration == 150


def test_percentage_discount_applies_to_base_plus_add_ons(fixed_now):
    estimate = compute_estimate(
        _home(),
        ServiceType.home_cleaning,
        CleaningFrequency.weekly,
        ["fridge_cleaning"],
        ["first_time"],
        now=fixed_now,
    )
    # (150 + 40) * 0.8 = 152; 15% of 190 = 28.5
    assert estimate.breakdown.discounts == 29
    assert estimate.total_price == 124
    assert estimate.breakdown.taxes == 10
    assert estimate.breakdown.total == 133


def test_fixed_discount_applies_literal_value(fixed_now):
    estimate = compute_estimate(
        _home(), ServiceType.home_cleaning, CleaningFrequency.one_time, [], ["referral"], now=fixed_now
    )
    assert estimate.breakdown.discounts == 20
    assert estimate.total_price == 130
    assert estimate.discounts[0].type == "fixed"


def test_total_never_negative(fixed_now):
    estimate = compute_estimate(
        _home(square_footage=10),
        ServiceType.move_in_out,
        CleaningFrequency.weekly,
        [],
        list(DISCOUNTS),
        now=fixed_now,
    )
    # 80 * 0.8 = 64; discounts = 12 + 8 + 20 = 40
    assert estimate.total_price == 24

    for add_ons in ([], list(ADD_ONS)):
        estimate = compute_estimate(
            _home(square_footage=1),
            ServiceType.post_construction,
            CleaningFrequency.weekly,
            add_ons,
            ["first_time", "regular_cleaning", "referral"],
            now=fixed_now,
        )
        assert estimate.total_price >= 0
        assert estimate.breakdown.taxes >= 0


@pytest.mark.parametrize(
    "subtotal, discount_total, expected",
    [(64.0, 40.0, 24.0), (64.0, 64.0, 0.0), (64.0, 500.0, 0.0), (0.0, 20.0, 0.0)],
)
def test_net_total_clamps_at_zero(subtotal, discount_total, expected):
    assert net_total(subtotal, discount_total) == expected


def test_catalogs_are_read_only():
    with pytest.raises(TypeError):
        DISCOUNTS["staff_voucher"] = DISCOUNTS["referral"]
    with pytest.raises(TypeError):
        del ADD_ONS["oven_cleaning"]
    assert len(DISCOUNTS) == 3


@pytest.mark.parametrize(
    "field, value",
    [("square_footage", 1e308), ("square_footage", float("inf")), ("square_footage", 100_001), ("floors", 101)],
)
def test_oversized_property_is_rejected_by_the_model(field, value):
    values = {"bedrooms": 1, "bathrooms": 1, "square_footage": 1000, "floors": 10, field: value}
    with pytest.raises(ValidationError):
        PropertyDetails(**values)


def test_largest_accepted_property_still_prices(fixed_now):
    estimate = compute_estimate(
        _home(square_footage=100_000, floors=100), ServiceType.deep_cleaning, CleaningFrequency.weekly, now=fixed_now
    )
    assert estimate.base_price == 2_500_000
    assert estimate.total_price == 2_000_000


def test_unvalidated_overflowing_size_raises_domain_error(fixed_now):
    property_data = PropertyDetails.model_construct(bedrooms=1, bathrooms=1, square_footage=1e308, floors=10)
    with pytest.raises(PricingInputError):
        compute_estimate(property_data, ServiceType.deep_cleaning, CleaningFrequency.weekly, now=fixed_now)


def test_breakdown_total_uses_separate_rounding_path(fixed_now):
    # 421.6 * 0.25 = 105.4 pre-tax: total_price 105, taxes round(8.432) = 8, breakdown.total round(113.832) = 114.
    estimate = compute_estimate(
        _home(square_footage=421.6), ServiceType.deep_cleaning, CleaningFrequency.one_time, now=fixed_now
    )
    assert estimate.total_price == 105
    assert estimate.breakdown.taxes == 8
    assert estimate.breakdown.total == 114


def test_estimates_are_idempotent_for_the_same_clock(fixed_now):
    args = (_home(), ServiceType.deep_cleaning, CleaningFrequency.bi_weekly, ["cabinet_cleaning"], ["referral"])
    first = compute_estimate(*args, now=fixed_now)
    second = compute_estimate(*args, now=fixed_now)
    assert first == second


def test_estimates_differ_only_in_valid_until_across_clocks(fixed_now):
    args = (_home(), ServiceType.deep_cleaning, CleaningFrequency.bi_weekly, ["cabinet_cleaning"], ["referral"])
    first = compute_estimate(*args, now=fixed_now)
    second = compute_estimate(*args)
    assert first.model_dump(exclude={"valid_until"}) == second.model_dump(exclude={"valid_until"})


def test_string_enum_values_are_accepted(fixed_now):
    estimate = compute_estimate(_home(), "office_cleaning", "bi_weekly", now=fixed_now)
    assert estimate.base_price == 120
    assert estimate.breakdown.frequency_multiplier == 0.9


@pytest.mark.parametrize(
    "service_type, frequency",
    [("window_washing", CleaningFrequency.weekly), (ServiceType.home_cleaning, "fortnightly")],
)
def test_unknown_enum_strings_are_rejected(service_type, frequency, fixed_now):
    with pytest.raises(PricingInputError):
        compute_estimate(_home(), service_type, frequency, now=fixed_now)


def test_currency_can_be_overridden(fixed_now):
    estimate = compute_estimate(
        _home(), ServiceType.home_cleaning, CleaningFrequency.one_time, now=fixed_now, currency="CAD"
    )
    assert estimate.currency == "CAD"
