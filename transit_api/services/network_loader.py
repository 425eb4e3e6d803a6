# path: transit-api/transit_api/services/network_loader.py

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping, Type, TypeVar
import json
import logging

from pydantic import BaseModel, ValidationError

from transit_api.models.errors import InvalidTypeError, MissingFieldError
from transit_api.models.transit_models import Bus, GeoCoordinate, Ride, Route, Section, Stop
from transit_api.services.network_service import TransitNetwork
from transit_api.utils.geo import validate_coordinate

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _parse(model: Type[M], kind: str, obj: Any) -> M:
    if not isinstance(obj, Mapping):
        raise InvalidTypeError(kind, kind, f"expected an object, got {type(obj).__name__}")
    try:
        return model.model_validate(obj)
    except ValidationError as e:
        # report the first problem only
        err = e.errors()[0]
        field = ".".join(str(p) for p in err["loc"]) or kind
        if err["type"] == "missing":
            raise MissingFieldError(kind, field) from e
        raise InvalidTypeError(kind, field, err["msg"]) from e


def _check_coordinates(coords: Iterable[GeoCoordinate]) -> None:
    for c in coords:
        validate_coordinate(c.lng, c.lat)


def parse_stop(obj: Any, validate_coordinates: bool = True) -> Stop:
    stop = _parse(Stop, "stop", obj)
    if validate_coordinates:
        _check_coordinates([stop.location])
    return stop


def parse_bus(obj: Any, validate_coordinates: bool = True) -> Bus:
    bus = _parse(Bus, "bus", obj)
    if validate_coordinates:
        _check_coordinates([bus.location])
    return bus


def parse_section(obj: Any, validate_coordinates: bool = True) -> Section:
    section = _parse(Section, "section", obj)
    if validate_coordinates:
        _check_coordinates(section.path)
    return section


def parse_route(obj: Any) -> Route:
    return _parse(Route, "route", obj)


def parse_ride(obj: Any) -> Ride:
    return _parse(Ride, "ride", obj)


def load_network(
    document: Mapping[str, Any],
    validate_coordinates: bool = True,
    dedupe_route_endpoints: bool = False,
    strict_ride_transitions: bool = False,
) -> TransitNetwork:
    network = TransitNetwork(
        dedupe_route_endpoints=dedupe_route_endpoints,
        strict_ride_transitions=strict_ride_transitions,
    )
    for obj in document.get("stops") or []:
        network.add_stop(parse_stop(obj, validate_coordinates))
    for obj in document.get("buses") or []:
        network.add_bus(parse_bus(obj, validate_coordinates))
    for obj in document.get("sections") or []:
        network.add_section(parse_section(obj, validate_coordinates))
    for obj in document.get("routes") or []:
        network.add_route(parse_route(obj))
    for obj in document.get("rides") or []:
        network.add_ride(parse_ride(obj))

    logger.info(
        "Loaded network: %d stops, %d buses, %d sections, %d routes, %d rides",
        len(network.stops),
        len(network.buses),
        len(network.sections),
        len(network.routes),
        len(network.rides),
    )
    return network


def load_network_file(path: Path, **kwargs: Any) -> TransitNetwork:
    with open(path, "r", encoding="utf-8") as f:
        document = json.load(f)
    if not isinstance(document, Mapping):
        raise InvalidTypeError("network", str(path), "expected a JSON object at top level")
    return load_network(document, **kwargs)
