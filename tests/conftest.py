from __future__ import annotations

import pytest

from transit_api.models.transit_models import GeoCoordinate, Route, Section


@pytest.fixture
def s1() -> Section:
    return Section(
        id=1,
        start_stop_id=10,
        end_stop_id=11,
        path=[GeoCoordinate(lng=0.0, lat=0.0), GeoCoordinate(lng=0.0, lat=1.0)],
    )


@pytest.fixture
def s2() -> Section:
    return Section(
        id=2,
        start_stop_id=11,
        end_stop_id=12,
        path=[GeoCoordinate(lng=0.0, lat=1.0), GeoCoordinate(lng=1.0, lat=1.0)],
    )


@pytest.fixture
def route() -> Route:
    return Route(id=7, name="Line 7", section_ids=[1, 2], stop_ids=[10, 11, 12])


@pytest.fixture
def network_document() -> dict:
    return {
        "stops": [
            {"id": 10, "name": "Depot", "location": {"lng": 0.0, "lat": 0.0}},
            {"id": 11, "name": "Market", "location": {"lng": 0.0, "lat": 1.0}},
            {"id": 12, "name": "Harbour", "location": {"lng": 1.0, "lat": 1.0}},
        ],
        "buses": [{"id": 100, "plate": "AB-123", "location": {"lng": 0.0, "lat": 0.0}}],
        "sections": [
            {
                "id": 1,
                "startStopId": 10,
                "endStopId": 11,
                "path": [{"lng": 0.0, "lat": 0.0}, {"lng": 0.0, "lat": 1.0}],
            },
            {
                "id": 2,
                "startStopId": 11,
                "endStopId": 12,
                "path": [{"lng": 0.0, "lat": 1.0}, {"lng": 1.0, "lat": 1.0}],
                "length": 5000,
            },
        ],
        "routes": [{"id": 7, "name": "Line 7", "sections": [1, 2], "stops": [10, 11, 12]}],
        "rides": [{"id": 500, "busId": 100, "routeId": 7, "startTime": "2024-05-01T08:00:00Z"}],
    }
