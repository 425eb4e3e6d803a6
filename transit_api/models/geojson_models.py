# path: transit-api/transit_api/models/geojson_models.py

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field


class LineStringGeometry(BaseModel):
    type: Literal["LineString"]
    coordinates: List[Tuple[float, float]]  # (lng, lat)


class LineStringFeature(BaseModel):
    type: Literal["Feature"]
    properties: Dict[str, Any] = Field(default_factory=dict)
    geometry: LineStringGeometry


class FeatureCollection(BaseModel):
    type: Literal["FeatureCollection"]
    features: List[LineStringFeature]
    bbox: Optional[List[float]] = None  # [min_lng, min_lat, max_lng, max_lat]

