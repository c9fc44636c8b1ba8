import pytest

from canship.models.domain import GeoPoint, Location
from canship.services.geospatial import distance_km, haversine_km, round_km

TORONTO = GeoPoint(lat=43.65, lng=-79.38)
MONTREAL = GeoPoint(lat=45.50, lng=-73.57)


def test_identical_points_are_zero_km_apart():
    assert distance_km(TORONTO, TORONTO) == 0


def test_distance_is_symmetric():
    assert distance_km(TORONTO, MONTREAL) == distance_km(MONTREAL, TORONTO)


def test_toronto_to_montreal_reference_distance():
    assert haversine_km(43.65, -79.38, 45.50, -73.57) == pytest.approx(503.92, abs=0.01)
    assert distance_km(TORONTO, MONTREAL) == 504


def test_antipodal_points_span_half_the_circumference():
    assert distance_km(GeoPoint(0.0, 0.0), GeoPoint(0.0, 180.0)) == 20015


def test_locations_are_accepted_as_points():
    origin = Location(id="1", display_name="Toronto, Ontario", full_address="Toronto", lat=43.65, lng=-79.38)
    destination = Location(id="2", display_name="Montreal, Quebec", full_address="Montreal", lat=45.50, lng=-73.57)

    assert distance_km(origin, destination) == 504


def test_round_km_rounds_half_up():
    assert round_km(0.5) == 1
    assert round_km(2.5) == 3
    assert round_km(2.49) == 2


@pytest.mark.parametrize("lat,lng", [(91.0, 0.0), (-90.5, 0.0), (0.0, 180.5), (0.0, -181.0)])
def test_geopoint_rejects_out_of_range_coordinates(lat, lng):
    with pytest.raises(ValueError):
        GeoPoint(lat=lat, lng=lng)
