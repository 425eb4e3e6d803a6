# path: transit-api/transit_api/api/deps.py

from __future__ import annotations

from fastapi import Request

from transit_api.config.settings import Settings
from transit_api.services.network_service import TransitNetwork


def get_network(request: Request) -> TransitNetwork:
    return request.app.state.network


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
