import pytest
import requests

from forest_sentinel.errors import LocationNotFound
from forest_sentinel.location import parse_coordinates, resolve_location

from .conftest import FakeResponse


def test_coordinates_are_parsed_with_a_tenth_degree_box():
    loc = resolve_location("34.0459, -118.5275")
    assert loc.lat == pytest.approx(34.0459)
    assert loc.lon == pytest.approx(-118.5275)
    assert loc.name == "Location (34.0459, -118.5275)"
    west, south, east, north = loc.bbox
    assert west == pytest.approx(-118.6275)
    assert east == pytest.approx(-118.4275)
    assert south == pytest.approx(33.9459)
    assert north == pytest.approx(34.1459)


def test_non_coordinate_text_is_not_parsed():
    assert parse_coordinates("Paradise, CA") is None
    assert parse_coordinates("34.0, west") is None


def test_gazetteer_match_is_case_insensitive_substring(fake_http):
    loc = resolve_location("the PALISADES area")
    assert loc.name == "Palisades Fire, Los Angeles"
    assert loc.active is True
    assert loc.bbox == pytest.approx([-118.6275, 33.9459, -118.4275, 34.1459])
    assert fake_http.calls == []


def test_geocoder_first_result_and_bbox_reordered(fake_http):
    fake_http.route("nominatim", FakeResponse([
        {"lat": "44.4280", "lon": "-110.5885", "display_name": "Yellowstone National Park",
         "boundingbox": ["44.1", "45.1", "-111.2", "-109.8"]},
        {"lat": "0", "lon": "0", "display_name": "ignored", "boundingbox": ["0", "0", "0", "0"]},
    ]))
    loc = resolve_location("Yellowstone National Park")
    assert loc.name == "Yellowstone National Park"
    assert loc.lat == pytest.approx(44.428)
    assert loc.bbox == pytest.approx([-111.2, 44.1, -109.8, 45.1])
    assert fake_http.calls[0]["params"]["q"] == "Yellowstone National Park"


def test_no_geocoder_match_raises(fake_http):
    fake_http.route("nominatim", FakeResponse([]))
    with pytest.raises(LocationNotFound):
        resolve_location("Nowhere In Particular")


def test_geocoder_error_object_raises_location_not_found(fake_http):
    fake_http.route("nominatim", FakeResponse({"error": "Unable to geocode"}))
    with pytest.raises(LocationNotFound):
        resolve_location("Atlantis Lost City")


def test_geocoder_failure_raises_location_not_found(fake_http):
    fake_http.route("nominatim", requests.ConnectionError("down"))
    with pytest.raises(LocationNotFound):
        resolve_location("Congo Basin Forest")
