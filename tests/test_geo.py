from __future__ import annotations

import math
from types import SimpleNamespace

import pytest

from transit_api.models.errors import CoordinateOutOfRangeError
from transit_api.models.transit_models import GeoCoordinate
from transit_api.utils import geo
from transit_api.utils.geo import (
    EARTH_RADIUS_M,
    great_circle_distance_m,
    haversine_m,
    lnglat_bbox,
    polyline_length_m,
    validate_coordinate,
)


def test_one_degree_of_latitude() -> None:
    d = haversine_m(0.0, 0.0, 0.0, 1.0)
    assert d == pytest.approx(111195, rel=0.01)


def test_distance_is_symmetric() -> None:
    a = GeoCoordinate(lng=13.4050, lat=52.5200)
    b = GeoCoordinate(lng=2.3522, lat=48.8566)
    assert great_circle_distance_m(a, b) == pytest.approx(great_circle_distance_m(b, a), rel=1e-12)


def test_distance_to_self_is_zero() -> None:
    a = GeoCoordinate(lng=-73.9857, lat=40.7484)
    assert great_circle_distance_m(a, a) == 0.0


def test_antipodal_points_stay_finite() -> None:
    d = haversine_m(0.0, 0.0, 180.0, 0.0)
    assert not math.isnan(d)
    assert d == pytest.approx(math.pi * EARTH_RADIUS_M)


@pytest.mark.parametrize("eps", [0.0, 1e-12, 1e-9, 1e-7, 1e-5])
def test_near_antipodal_points_stay_within_half_circumference(eps: float) -> None:
    for a_lat, b_lon in [(eps, 180.0), (-eps, 180.0 - eps), (eps, -180.0 + eps)]:
        d = haversine_m(0.0, a_lat, b_lon, -a_lat)
        assert math.isfinite(d)
        assert d <= math.pi * EARTH_RADIUS_M


def test_rounding_overshoot_is_clamped(monkeypatch) -> None:
    # cos slightly above 1 pushes the haversine term past 1 for antipodal points
    skewed = SimpleNamespace(
        radians=math.radians,
        sin=math.sin,
        sqrt=math.sqrt,
        atan2=math.atan2,
        cos=lambda x: math.cos(x) * (1 + 1e-12),
    )
    monkeypatch.setattr(geo, "math", skewed)
    d = haversine_m(0.0, 0.0, 180.0, 0.0)
    assert d == pytest.approx(math.pi * EARTH_RADIUS_M)


def test_out_of_range_input_is_not_rejected() -> None:
    d = haversine_m(0.0, 0.0, 540.0, 0.0)
    assert math.isfinite(d)


def test_polyline_length_sums_segments() -> None:
    pts = [GeoCoordinate(lng=0.0, lat=0.0), GeoCoordinate(lng=0.0, lat=1.0), GeoCoordinate(lng=0.0, lat=2.0)]
    assert polyline_length_m(pts) == pytest.approx(2 * haversine_m(0.0, 0.0, 0.0, 1.0))
    assert polyline_length_m(pts[:1]) == 0.0


def test_bbox() -> None:
    assert lnglat_bbox([(1.0, 5.0), (-2.0, 7.0), (3.0, 6.0)]) == [-2.0, 5.0, 3.0, 7.0]


def test_validate_coordinate() -> None:
    validate_coordinate(180.0, -90.0)
    with pytest.raises(CoordinateOutOfRangeError):
        validate_coordinate(181.0, 0.0)
    with pytest.raises(CoordinateOutOfRangeError):
        validate_coordinate(0.0, 90.5)
