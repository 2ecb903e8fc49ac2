"""
registry_services.api.errors

Uniform error bodies for both services.

Responsibilities:
- Render every HTTP error as `{"error": <message>}`.
- Turn request parsing failures into 400s instead of FastAPI's default 422.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_400_BAD_REQUEST

_PARAM_MESSAGES = {
    "order_id": "Invalid order ID",
    "user_id": "Invalid user ID",
}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def _request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(HTTP_400_BAD_REQUEST, validation_message(exc.errors()))


def validation_message(errors) -> str:
    for err in errors:
        loc = tuple(err.get("loc", ()))
        if loc and loc[0] in ("path", "query") and len(loc) > 1:
            name = str(loc[1])
            return _PARAM_MESSAGES.get(name, f"Invalid {name}")
    # Anything else is a body that did not decode into the request model.
    return "Invalid JSON"


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
