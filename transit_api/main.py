# path: transit-api/transit_api/main.py

from __future__ import annotations

from typing import Optional
import logging

from fastapi import FastAPI

from transit_api.api.routes.rides import router as rides_router
from transit_api.api.routes.routes import router as routes_router
from transit_api.api.routes.sections import router as sections_router
from transit_api.config.settings import Settings, get_settings
from transit_api.services.network_loader import load_network_file
from transit_api.services.network_service import TransitNetwork
from transit_api.utils.logging import configure_logging

logger = logging.getLogger(__name__)


def build_network(settings: Settings) -> TransitNetwork:
    if settings.network_file is None:
        return TransitNetwork(
            dedupe_route_endpoints=settings.dedupe_route_endpoints,
            strict_ride_transitions=settings.strict_ride_transitions,
        )
    logger.info("Seeding network from %s", settings.network_file)
    return load_network_file(
        settings.network_file,
        validate_coordinates=settings.validate_coordinates,
        dedupe_route_endpoints=settings.dedupe_route_endpoints,
        strict_ride_transitions=settings.strict_ride_transitions,
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(title=settings.app_name)
    app.state.settings = settings
    app.state.network = build_network(settings)

    app.include_router(sections_router)
    app.include_router(routes_router)
    app.include_router(rides_router)
    return app


app = create_app()
