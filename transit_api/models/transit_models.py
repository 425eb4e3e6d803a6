# path: transit-api/transit_api/models/transit_models.py

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Protocol, Sequence
import math

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from transit_api.models.errors import InvalidRideTransitionError
from transit_api.utils.geo import polyline_length_m


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class TransitModel(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GeoCoordinate(BaseModel):
    """A (longitude, latitude) pair in decimal degrees. Range is not checked here."""

    model_config = ConfigDict(frozen=True)

    lng: float
    lat: float

    def to_lnglat(self) -> List[float]:
        return [self.lng, self.lat]


class HasPath(Protocol):
    path: Sequence[GeoCoordinate]


class Stop(TransitModel):
    id: int
    name: str
    location: GeoCoordinate

    def get_coordinates(self) -> Dict[str, float]:
        return {"lng": self.location.lng, "lat": self.location.lat}


class Bus(TransitModel):
    id: int
    plate: str
    location: GeoCoordinate

    def get_coordinates(self) -> Dict[str, float]:
        return {"lng": self.location.lng, "lat": self.location.lat}

    def update_location(self, location: GeoCoordinate) -> None:
        self.location = location

    def update_position(self, lng: float, lat: float) -> None:
        self.location = GeoCoordinate(lng=lng, lat=lat)


class Section(TransitModel):
    """Physical path between two stops.

    ``length`` is in metres. When it is not supplied it is derived from the
    path as the sum of great-circle distances between consecutive points, so a
    path with fewer than two points has length 0.
    """

    id: int
    start_stop_id: int
    end_stop_id: int
    path: List[GeoCoordinate] = Field(default_factory=list)
    length: Optional[float] = None

    @model_validator(mode="after")
    def derive_length(self):
        if self.length is None:
            self.length = polyline_length_m(self.path)
        return self

    def to_geojson(self) -> Dict[str, Any]:
        return {
            "type": "Feature",
            "properties": {
                "id": self.id,
                "startStopId": self.start_stop_id,
                "endStopId": self.end_stop_id,
                "length": self.length,
            },
            "geometry": {
                "type": "LineString",
                "coordinates": [c.to_lnglat() for c in self.path],
            },
        }


class Route(TransitModel):
    """Ordered chain of section ids and the stops along it.

    A route holds no geometry; callers pass a section lookup whenever the path
    is needed. Chain connectivity is not checked.
    """

    id: int
    name: str
    section_ids: List[int] = Field(default_factory=list, alias="sections")
    stop_ids: List[int] = Field(default_factory=list, alias="stops")

    @field_validator("section_ids", "stop_ids", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def add_section(self, section_id: int) -> "Route":
        self.section_ids.append(section_id)
        return self

    def add_stop(self, stop_id: int) -> "Route":
        self.stop_ids.append(stop_id)
        return self

    def get_coordinates(
        self,
        section_lookup: Mapping[int, HasPath],
        dedupe_endpoints: bool = False,
    ) -> List[GeoCoordinate]:
        """Concatenate section paths in route order.

        Ids missing from ``section_lookup`` are skipped. With
        ``dedupe_endpoints`` a section's first point is dropped when it equals
        the last point already emitted.
        """
        coords: List[GeoCoordinate] = []
        for section_id in self.section_ids:
            section = section_lookup.get(section_id)
            if section is None:
                continue
            path = list(section.path)
            if dedupe_endpoints and coords and path and path[0] == coords[-1]:
                path = path[1:]
            coords.extend(path)
        return coords

    def to_geojson(
        self,
        section_lookup: Mapping[int, HasPath],
        dedupe_endpoints: bool = False,
    ) -> Dict[str, Any]:
        coords = self.get_coordinates(section_lookup, dedupe_endpoints=dedupe_endpoints)
        return {
            "type": "Feature",
            "properties": {
                "id": self.id,
                "name": self.name,
                "sections": list(self.section_ids),
                "stops": list(self.stop_ids),
            },
            "geometry": {
                "type": "LineString",
                "coordinates": [c.to_lnglat() for c in coords],
            },
        }


class RideStatus(str, Enum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


STRICT_TRANSITIONS: Dict[RideStatus, FrozenSet[RideStatus]] = {
    RideStatus.SCHEDULED: frozenset({RideStatus.IN_PROGRESS, RideStatus.CANCELLED}),
    RideStatus.IN_PROGRESS: frozenset({RideStatus.COMPLETED, RideStatus.CANCELLED}),
}


class Ride(TransitModel):
    """One traversal of a route by a bus.

    Transitions are unrestricted unless called with ``strict=True``, in which
    case only scheduled -> in_progress -> completed/cancelled (and
    scheduled -> cancelled) are allowed.
    """

    id: int
    bus_id: int
    route_id: int
    start_time: datetime = Field(default_factory=utcnow)
    end_time: Optional[datetime] = None
    status: RideStatus = RideStatus.SCHEDULED

    @field_validator("start_time", mode="before")
    @classmethod
    def null_start_is_now(cls, value: Any) -> Any:
        return utcnow() if value in (None, "") else value

    @field_validator("status", mode="before")
    @classmethod
    def null_status_is_scheduled(cls, value: Any) -> Any:
        return RideStatus.SCHEDULED if value in (None, "") else value

    @field_validator("start_time", "end_time")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value) if value is not None else None

    def _check(self, target: RideStatus, strict: bool) -> None:
        if strict and target not in STRICT_TRANSITIONS.get(self.status, frozenset()):
            raise InvalidRideTransitionError(self.id, self.status.value, target.value)

    def start(self, at: Optional[datetime] = None, strict: bool = False) -> None:
        self._check(RideStatus.IN_PROGRESS, strict)
        self.start_time = as_utc(at) if at is not None else utcnow()
        self.status = RideStatus.IN_PROGRESS

    def complete(self, at: Optional[datetime] = None, strict: bool = False) -> None:
        self._check(RideStatus.COMPLETED, strict)
        self.end_time = as_utc(at) if at is not None else utcnow()
        self.status = RideStatus.COMPLETED

    def cancel(self, reason: str = "", at: Optional[datetime] = None, strict: bool = False) -> None:
        self._check(RideStatus.CANCELLED, strict)
        self.end_time = as_utc(at) if at is not None else utcnow()
        self.status = RideStatus.CANCELLED

    def duration_minutes(self) -> Optional[int]:
        if self.end_time is None:
            return None
        duration_ms = (self.end_time - self.start_time).total_seconds() * 1000
        # half-up, so 1.5 minutes reads as 2
        return int(math.floor(duration_ms / 60000 + 0.5))
