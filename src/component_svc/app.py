"""FastAPI entry point for the component catalog service.

Start with:
    component-svc                 # host/port from the ``server`` config section
    uvicorn component_svc.app:app --host 0.0.0.0 --port 8060

Endpoints:
- GET  /components                          — catalog view grouped by source
- GET  /components/i18n                     — merged locale bundle
- GET  /components/{source}/{domain}/{name} — single component lookup
- POST /components/batch                    — batch component lookup
- POST /nodes/classify                      — reserved data source node check
- GET  /health

The catalog is rebuilt from configuration on every start.
"""
from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from . import _bootstrap as bs
from .api import routes as component_routes
from .errors import ComponentServiceError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build sources, policy and service once per process."""
    logger.info("Starting component service...")

    config, _config_path = bs.load_config()
    service = bs.build_service(config)
    component_routes.configure(service=service)

    logger.info("Component service started")
    yield

    component_routes.configure(service=None)
    logger.info("Component service stopped")


def create_app(use_lifespan: bool = True) -> FastAPI:
    """Create the FastAPI application.

    Pass ``use_lifespan=False`` when the caller wires the service itself
    through ``component_routes.configure()``.
    """
    application = FastAPI(
        title="Component Catalog",
        description="Read-only component catalog, lookup and i18n bundles.",
        version="0.1.0",
        lifespan=lifespan if use_lifespan else None,
        openapi_tags=[
            {"name": "Components", "description": "Component catalog and i18n"},
            {"name": "Health", "description": "Liveness"},
        ],
    )
    application.add_exception_handler(ComponentServiceError, component_routes.component_error_handler)
    application.include_router(component_routes.router)

    @application.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return application


app = create_app()


def main(config_path: str | None = None) -> None:
    """Run the service with uvicorn on the configured host and port."""
    logging.basicConfig(level=logging.INFO)
    config, config_path = bs.load_config(config_path)
    # the lifespan reloads config from the same file
    os.environ["COMPONENT_SVC_CONFIG"] = config_path
    logger.info("Serving on %s:%d", config.server.host, config.server.port)
    uvicorn.run(app, host=config.server.host, port=config.server.port)


if __name__ == "__main__":
    main()
