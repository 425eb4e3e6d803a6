# path: transit-api/transit_api/api/routes/routes.py

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException

from transit_api.api.deps import get_network
from transit_api.models.errors import EntityNotFoundError
from transit_api.models.geojson_models import FeatureCollection, LineStringFeature
from transit_api.services.network_loader import parse_route
from transit_api.services.network_service import TransitNetwork

router = APIRouter(prefix="/routes", tags=["routes"])


@router.post("", response_model=LineStringFeature)
def create_route(payload: Dict[str, Any], network: TransitNetwork = Depends(get_network)) -> Dict[str, Any]:
    try:
        route = parse_route(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    network.add_route(route)
    return network.route_geojson(route.id)


@router.get("/geojson", response_model=FeatureCollection, response_model_exclude_none=True)
def routes_geojson(
    dedupe: Optional[bool] = None,
    network: TransitNetwork = Depends(get_network),
) -> Dict[str, Any]:
    return network.routes_feature_collection(dedupe=dedupe)


@router.get("/{route_id}/geojson", response_model=LineStringFeature)
def route_geojson(
    route_id: int,
    dedupe: Optional[bool] = None,
    network: TransitNetwork = Depends(get_network),
) -> Dict[str, Any]:
    try:
        return network.route_geojson(route_id, dedupe=dedupe)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
