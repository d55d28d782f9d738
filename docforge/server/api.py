"""FastAPI application exposing every docforge operation over HTTP."""

from __future__ import annotations

from typing import Any

from fastapi import Body, FastAPI
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from .. import __version__
from ..core.utils import get_logger
from ..tools import registry

LOGGER = get_logger("docforge.api")

app = FastAPI(title="docforge API", version=__version__)


def _is_argument_error(name: str, message: str) -> bool:
    return message.startswith(f"Invalid arguments for {name}:")


@app.get("/health", response_class=JSONResponse)
async def health() -> dict[str, str]:
    """Lightweight health endpoint for uptime checks."""
    return {"status": "ok"}


@app.get("/operations", response_class=JSONResponse)
async def list_operations() -> list[dict[str, Any]]:
    """Return the name, description and input schema of every operation."""
    return registry.descriptors()


@app.post("/operations/{name}", response_class=JSONResponse)
async def run_operation(
    name: str,
    arguments: dict[str, Any] | None = Body(default=None),
) -> JSONResponse:
    """Dispatch ``name`` with the JSON body as its argument bag."""

    result = await run_in_threadpool(registry.dispatch, name, arguments)
    if name not in registry:
        return JSONResponse(result.to_response(), status_code=404)
    if result.success:
        return JSONResponse(result.to_response())

    status_code = 422 if _is_argument_error(name, result.message) else 400
    LOGGER.info("Operation %s failed with status %s: %s", name, status_code, result.message)
    return JSONResponse(result.to_response(), status_code=status_code)


__all__ = ["app"]
