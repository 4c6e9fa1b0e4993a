"""Read endpoints for catalog browsing, component lookup and locale bundles."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

from ..catalog import ComponentKey
from ..errors import ComponentNotFound, ComponentServiceError, LocaleLoadError, SchemaDecodeError
from ..service import ComponentService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Components"])

# Set by the app lifespan
_service: ComponentService | None = None


class ComponentKeyModel(BaseModel):
    source: str
    domain: str
    name: str


def configure(service: ComponentService | None) -> None:
    """Wire the router with its runtime dependencies."""
    global _service
    _service = service


def _get_service() -> ComponentService:
    if _service is None:
        raise HTTPException(status_code=503, detail="Component service not initialised")
    return _service


_ERROR_STATUS: dict[type[ComponentServiceError], int] = {
    ComponentNotFound: 404,
    SchemaDecodeError: 400,
    LocaleLoadError: 500,
}


async def component_error_handler(request: Request, exc: ComponentServiceError) -> JSONResponse:
    """Map service errors to JSON error responses."""
    status_code = _ERROR_STATUS.get(type(exc), 500)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status_code,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


@router.get("/components")
async def list_components() -> dict[str, Any]:
    views = _get_service().list_components()
    return {name: view.to_dict() for name, view in views.items()}


@router.get("/components/i18n")
async def list_component_i18n() -> dict[str, Any]:
    # blocking file reads
    return await run_in_threadpool(_get_service().list_component_i18n)


@router.post("/components/batch")
async def batch_get_component(keys: list[ComponentKeyModel]) -> list[dict[str, Any]]:
    components = _get_service().batch_get_component(
        [ComponentKey(k.source, k.domain, k.name) for k in keys]
    )
    return [c.to_dict() for c in components]


@router.get("/components/{source}/{domain}/{name}")
async def get_component(source: str, domain: str, name: str) -> dict[str, Any]:
    return _get_service().get_component(ComponentKey(source, domain, name)).to_dict()


@router.post("/nodes/classify")
async def classify_node(node_def: Any = Body(default=None)) -> dict[str, bool]:
    return {"reserved": _get_service().is_secretpad_component(node_def)}
