"""Error Handlers: global exception handlers mapping errors to plain-text responses.

Invariants:
    - CondoApiError -> its http_status with exc.message as a text/plain body
    - RequestValidationError -> 400; path-parameter failures become
      InvalidParameterError, everything else InvalidPayloadError
    - Exception (catch-all) -> 500, never leaks internal details
"""

import logging
from typing import Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from condo_api.core.errors import (
    CondoApiError,
    InvalidParameterError,
    InvalidPayloadError,
)

logger = logging.getLogger(__name__)

# Path parameter name -> error raised when it does not parse
_PATH_PARAM_ERRORS: dict[str, Callable[[], InvalidParameterError]] = {
    "condo_id": InvalidParameterError.condo_id,
    "listing_id": InvalidParameterError.listing_id,
    "status": InvalidParameterError.status,
    "type_id": InvalidParameterError.type_id,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def error_response(exc: CondoApiError) -> PlainTextResponse:
    return PlainTextResponse(
        exc.message,
        status_code=exc.http_status,
        headers={"X-Content-Type-Options": "nosniff"},
    )


def domain_error_from_validation(exc: RequestValidationError) -> CondoApiError:
    """Pick the first failing path parameter, or fall back to a payload error."""
    for err in exc.errors():
        loc = err.get("loc", ())
        if len(loc) > 1 and loc[0] == "path":
            factory = _PATH_PARAM_ERRORS.get(str(loc[1]))
            if factory is not None:
                return factory()
    return InvalidPayloadError()


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(CondoApiError)
    async def condo_api_error_handler(request: Request, exc: CondoApiError):
        level = logging.WARNING if exc.http_status == 403 else logging.INFO
        logger.log(
            level, f"{exc.code}: {exc.message}",
            extra={**exc.to_log_extra(), "path": request.url.path, "method": request.method},
        )
        return error_response(exc)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        domain_error = domain_error_from_validation(exc)
        logger.info(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={**domain_error.to_log_extra(), "path": request.url.path},
        )
        return error_response(domain_error)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return PlainTextResponse(
            "Internal Server Error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
