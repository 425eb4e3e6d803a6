# path: transit-api/transit_api/models/errors.py

from __future__ import annotations


class TransitModelError(ValueError):
    """Base class for invalid transit input or state."""


class MissingFieldError(TransitModelError):
    def __init__(self, kind: str, field: str):
        self.kind = kind
        self.field = field
        super().__init__(f"{kind}: missing field '{field}'")


class InvalidTypeError(TransitModelError):
    def __init__(self, kind: str, field: str, detail: str):
        self.kind = kind
        self.field = field
        self.detail = detail
        super().__init__(f"{kind}: invalid value for '{field}': {detail}")


class CoordinateOutOfRangeError(TransitModelError):
    pass


class InvalidRideTransitionError(TransitModelError):
    def __init__(self, ride_id: int, current: str, target: str):
        self.ride_id = ride_id
        self.current = current
        self.target = target
        super().__init__(f"ride {ride_id}: cannot go from {current} to {target}")


class EntityNotFoundError(LookupError):
    def __init__(self, kind: str, entity_id: int):
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind} {entity_id} not found")
