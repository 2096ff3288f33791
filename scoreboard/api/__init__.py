"""API assembly helpers."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core import ScoreboardError
from .routers import ALL_ROUTERS


async def _scoreboard_error_handler(request: Request, exc: ScoreboardError) -> JSONResponse:
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if not errors:
        return JSONResponse({"error": "Invalid request."}, status_code=400)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "Invalid request")
    return JSONResponse({"error": f"{location}: {message}"}, status_code=400)


def register_routes(app: FastAPI) -> None:
    """Attach all application routers and the error handlers to the given app."""

    app.add_exception_handler(ScoreboardError, _scoreboard_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    for router in ALL_ROUTERS:
        app.include_router(router)


__all__ = ["register_routes"]
