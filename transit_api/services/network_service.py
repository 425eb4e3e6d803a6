# path: transit-api/transit_api/services/network_service.py

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional
import logging

from transit_api.models.errors import EntityNotFoundError
from transit_api.models.transit_models import Bus, GeoCoordinate, Ride, Route, Section, Stop
from transit_api.utils.geo import lnglat_bbox

logger = logging.getLogger(__name__)


def feature_collection(features: List[Dict[str, Any]]) -> Dict[str, Any]:
    points = [tuple(c) for f in features for c in f["geometry"]["coordinates"]]
    collection: Dict[str, Any] = {"type": "FeatureCollection", "features": features}
    if points:
        collection["bbox"] = lnglat_bbox(points)
    return collection


class TransitNetwork:
    """In-memory id -> entity tables for one transit network.

    Routes and rides only carry ids; this class resolves them. It does no
    locking, so callers must serialize writes to the same ride.
    """

    def __init__(self, dedupe_route_endpoints: bool = False, strict_ride_transitions: bool = False):
        self.dedupe_route_endpoints = dedupe_route_endpoints
        self.strict_ride_transitions = strict_ride_transitions

        self.stops: Dict[int, Stop] = {}
        self.buses: Dict[int, Bus] = {}
        self.sections: Dict[int, Section] = {}
        self.routes: Dict[int, Route] = {}
        self.rides: Dict[int, Ride] = {}

    def _register(self, table: Dict[int, Any], kind: str, entity: Any) -> None:
        if entity.id in table:
            logger.warning("Replacing %s %s", kind, entity.id)
        table[entity.id] = entity

    def add_stop(self, stop: Stop) -> Stop:
        self._register(self.stops, "stop", stop)
        return stop

    def add_bus(self, bus: Bus) -> Bus:
        self._register(self.buses, "bus", bus)
        return bus

    def add_section(self, section: Section) -> Section:
        self._register(self.sections, "section", section)
        return section

    def add_route(self, route: Route) -> Route:
        self._register(self.routes, "route", route)
        missing = [sid for sid in route.section_ids if sid not in self.sections]
        if missing:
            logger.debug("Route %s references unknown sections %s", route.id, missing)
        return route

    def add_ride(self, ride: Ride) -> Ride:
        self._register(self.rides, "ride", ride)
        return ride

    def get_section(self, section_id: int) -> Section:
        try:
            return self.sections[section_id]
        except KeyError:
            raise EntityNotFoundError("section", section_id) from None

    def get_route(self, route_id: int) -> Route:
        try:
            return self.routes[route_id]
        except KeyError:
            raise EntityNotFoundError("route", route_id) from None

    def get_ride(self, ride_id: int) -> Ride:
        try:
            return self.rides[ride_id]
        except KeyError:
            raise EntityNotFoundError("ride", ride_id) from None

    # --- geometry ---

    def _dedupe(self, dedupe: Optional[bool]) -> bool:
        return self.dedupe_route_endpoints if dedupe is None else dedupe

    def section_geojson(self, section_id: int) -> Dict[str, Any]:
        return self.get_section(section_id).to_geojson()

    def route_coordinates(self, route_id: int, dedupe: Optional[bool] = None) -> List[GeoCoordinate]:
        route = self.get_route(route_id)
        return route.get_coordinates(self.sections, dedupe_endpoints=self._dedupe(dedupe))

    def route_geojson(self, route_id: int, dedupe: Optional[bool] = None) -> Dict[str, Any]:
        route = self.get_route(route_id)
        return route.to_geojson(self.sections, dedupe_endpoints=self._dedupe(dedupe))

    def sections_feature_collection(self) -> Dict[str, Any]:
        return feature_collection([s.to_geojson() for s in self.sections.values()])

    def routes_feature_collection(self, dedupe: Optional[bool] = None) -> Dict[str, Any]:
        dedupe_endpoints = self._dedupe(dedupe)
        return feature_collection(
            [r.to_geojson(self.sections, dedupe_endpoints=dedupe_endpoints) for r in self.routes.values()]
        )

    # --- ride lifecycle ---

    def start_ride(self, ride_id: int, at: Optional[datetime] = None) -> Ride:
        ride = self.get_ride(ride_id)
        ride.start(at=at, strict=self.strict_ride_transitions)
        logger.info("Ride %s started (bus=%s route=%s)", ride.id, ride.bus_id, ride.route_id)
        return ride

    def complete_ride(self, ride_id: int, at: Optional[datetime] = None) -> Ride:
        ride = self.get_ride(ride_id)
        ride.complete(at=at, strict=self.strict_ride_transitions)
        logger.info("Ride %s completed after %s min", ride.id, ride.duration_minutes())
        return ride

    def cancel_ride(self, ride_id: int, reason: str = "", at: Optional[datetime] = None) -> Ride:
        ride = self.get_ride(ride_id)
        ride.cancel(reason, at=at, strict=self.strict_ride_transitions)
        logger.info("Ride %s cancelled: %s", ride.id, reason or "no reason given")
        return ride
