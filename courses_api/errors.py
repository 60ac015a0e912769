"""
Error taxonomy for the API and the handlers that turn it into responses.

Validation and authentication failures are raised by the component that
detects them; everything else reaches the catch-all handler as a 500.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

ACCESS_DENIED_MESSAGE = "Access Denied"


class ValidationFailed(Exception):
    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = errors


class AuthenticationFailed(Exception):
    """Carries the detailed reason, which is logged and never sent to the client."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class AuthorizationDenied(Exception):
    pass


class RecordNotFound(LookupError):
    pass


class MalformedBody(Exception):
    pass


async def _validation_failed(_: Request, exc: ValidationFailed) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": exc.errors})


async def _authentication_failed(_: Request, exc: AuthenticationFailed) -> JSONResponse:
    logger.warning(exc.reason)
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"message": ACCESS_DENIED_MESSAGE},
    )


async def _authorization_denied(_: Request, __: AuthorizationDenied) -> Response:
    return Response(status_code=status.HTTP_403_FORBIDDEN)


async def _malformed_body(_: Request, exc: MalformedBody) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": str(exc)})


async def _route_not_found(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": "Route Not Found"})
    return await http_exception_handler(request, exc)


async def _unexpected_failure(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationFailed, _validation_failed)
    app.add_exception_handler(AuthenticationFailed, _authentication_failed)
    app.add_exception_handler(AuthorizationDenied, _authorization_denied)
    app.add_exception_handler(MalformedBody, _malformed_body)
    app.add_exception_handler(StarletteHTTPException, _route_not_found)
    app.add_exception_handler(Exception, _unexpected_failure)
