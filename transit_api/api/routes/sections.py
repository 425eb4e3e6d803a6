# path: transit-api/transit_api/api/routes/sections.py

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from transit_api.api.deps import get_app_settings, get_network
from transit_api.config.settings import Settings
from transit_api.models.errors import EntityNotFoundError
from transit_api.models.geojson_models import FeatureCollection, LineStringFeature
from transit_api.services.network_loader import parse_section
from transit_api.services.network_service import TransitNetwork

router = APIRouter(prefix="/sections", tags=["sections"])


@router.post("", response_model=LineStringFeature)
def create_section(
    payload: Dict[str, Any],
    network: TransitNetwork = Depends(get_network),
    settings: Settings = Depends(get_app_settings),
) -> Dict[str, Any]:
    try:
        section = parse_section(payload, validate_coordinates=settings.validate_coordinates)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return network.add_section(section).to_geojson()


@router.get("/geojson", response_model=FeatureCollection, response_model_exclude_none=True)
def sections_geojson(network: TransitNetwork = Depends(get_network)) -> Dict[str, Any]:
    return network.sections_feature_collection()


@router.get("/{section_id}/geojson", response_model=LineStringFeature)
def section_geojson(section_id: int, network: TransitNetwork = Depends(get_network)) -> Dict[str, Any]:
    try:
        return network.section_geojson(section_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
