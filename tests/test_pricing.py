import pytest

from canship.models.domain import Location
from canship.services.geospatial import distance_km
from canship.services.pricing import (
    RATE_TABLE,
    ShippingTier,
    ShippingValidationError,
    calculate_shipping_cost,
    validate_quote_request,
)


def _location(lid: str, lat: float, lng: float, name: str | None = None) -> Location:
    return Location(
        id=lid,
        display_name=name or f"Place {lid}",
        full_address=f"{name or lid}, Canada",
        lat=lat,
        lng=lng,
    )


TORONTO = _location("101", 43.65, -79.38, "Toronto, Ontario")
MONTREAL = _location("202", 45.50, -73.57, "Montreal, Quebec")


def test_toronto_to_montreal_standard_quote():
    quote = calculate_shipping_cost(TORONTO, MONTREAL, 10, "standard")

    assert quote.distance_km == 504
    assert quote.cost == pytest.approx(18 + 504 * 0.65 + 10 * 0.15)
    assert quote.delivery_days == (3, 5)
    assert quote.tier is ShippingTier.STANDARD


@pytest.mark.parametrize("tier", list(ShippingTier))
def test_cost_formula_holds_for_every_tier(tier):
    rate = RATE_TABLE[tier]
    weight = 12.5

    quote = calculate_shipping_cost(TORONTO, MONTREAL, weight, tier)

    distance = distance_km(TORONTO, MONTREAL)
    assert quote.cost == rate.base_cost + distance * rate.per_km + weight * rate.per_weight
    assert quote.delivery_days == rate.delivery_days


def test_delivery_days_do_not_depend_on_distance():
    nearby = _location("303", 43.70, -79.40, "North York, Ontario")

    short = calculate_shipping_cost(TORONTO, nearby, 5, "express")
    long = calculate_shipping_cost(TORONTO, MONTREAL, 5, "express")

    assert short.delivery_days == long.delivery_days == (1, 2)


def test_tier_names_are_case_insensitive():
    quote = calculate_shipping_cost(TORONTO, MONTREAL, 1, " Overnight ")
    assert quote.tier is ShippingTier.OVERNIGHT


def test_unknown_tier_is_rejected():
    with pytest.raises(ShippingValidationError, match="Unknown shipping tier"):
        calculate_shipping_cost(TORONTO, MONTREAL, 1, "freight")


@pytest.mark.parametrize("weight", [0, -3, None, float("nan")])
def test_validation_rejects_non_positive_or_missing_weight(weight):
    with pytest.raises(ShippingValidationError, match="fill in all fields"):
        validate_quote_request(TORONTO, MONTREAL, weight, "standard")


def test_validation_requires_both_locations():
    with pytest.raises(ShippingValidationError):
        validate_quote_request(None, MONTREAL, 10, "standard")
    with pytest.raises(ShippingValidationError):
        validate_quote_request(TORONTO, None, 10, "standard")


def test_validation_rejects_identical_origin_and_destination():
    same_place = _location("101", 43.66, -79.39, "Toronto, Ontario")

    with pytest.raises(ShippingValidationError, match="cannot be the same"):
        validate_quote_request(TORONTO, same_place, 10, "standard")


def test_validation_returns_resolved_tier():
    assert validate_quote_request(TORONTO, MONTREAL, 10, "EXPRESS") is ShippingTier.EXPRESS


def test_validation_error_is_a_value_error():
    assert issubclass(ShippingValidationError, ValueError)
