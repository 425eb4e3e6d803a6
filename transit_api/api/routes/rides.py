# path: transit-api/transit_api/api/routes/rides.py

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from transit_api.api.deps import get_network
from transit_api.models.errors import EntityNotFoundError, InvalidRideTransitionError
from transit_api.models.transit_models import Ride, TransitModel
from transit_api.services.network_loader import parse_ride
from transit_api.services.network_service import TransitNetwork

router = APIRouter(prefix="/rides", tags=["rides"])


class RideResponse(TransitModel):
    ride: Ride
    duration_minutes: Optional[int] = None


class CancelRideRequest(BaseModel):
    reason: str = ""


def _response(ride: Ride) -> RideResponse:
    return RideResponse(ride=ride, duration_minutes=ride.duration_minutes())


@router.post("", response_model=RideResponse)
def create_ride(payload: Dict[str, Any], network: TransitNetwork = Depends(get_network)) -> RideResponse:
    try:
        ride = parse_ride(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _response(network.add_ride(ride))


@router.get("/{ride_id}", response_model=RideResponse)
def get_ride(ride_id: int, network: TransitNetwork = Depends(get_network)) -> RideResponse:
    try:
        return _response(network.get_ride(ride_id))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


def _transition(action, ride_id: int, **kwargs) -> RideResponse:
    try:
        return _response(action(ride_id, **kwargs))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidRideTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/{ride_id}/start", response_model=RideResponse)
def start_ride(ride_id: int, network: TransitNetwork = Depends(get_network)) -> RideResponse:
    return _transition(network.start_ride, ride_id)


@router.post("/{ride_id}/complete", response_model=RideResponse)
def complete_ride(ride_id: int, network: TransitNetwork = Depends(get_network)) -> RideResponse:
    return _transition(network.complete_ride, ride_id)


@router.post("/{ride_id}/cancel", response_model=RideResponse)
def cancel_ride(
    ride_id: int,
    body: Optional[CancelRideRequest] = None,
    network: TransitNetwork = Depends(get_network),
) -> RideResponse:
    reason = body.reason if body is not None else ""
    return _transition(network.cancel_ride, ride_id, reason=reason)
