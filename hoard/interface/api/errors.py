"""Translation of domain errors into HTTP responses."""

import logfire
from fastapi import FastAPI, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.types import ASGIApp, Receive, Scope, Send

from hoard.domain.error import (
    AccessDeniedError,
    ConflictError,
    DomainError,
    ExpiredError,
    NotFoundError,
    ValidationError,
)

# Most specific first; ForbiddenError is covered by AccessDeniedError
STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AccessDeniedError, status.HTTP_403_FORBIDDEN),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ExpiredError, status.HTTP_410_GONE),
]


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def domain_error_response(exc: DomainError, path: str) -> JSONResponse:
    """Render a domain error as `{"detail": message}`."""
    status_code = status_for(exc)
    logfire.warn(
        "Domain error",
        error_type=type(exc).__name__,
        error=str(exc),
        path=path,
        status_code=status_code,
    )
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def model_validation_error_response(
    exc: PydanticValidationError, path: str
) -> JSONResponse:
    """Render a model rejected inside a route as 422."""
    logfire.warn("Request validation error", error=str(exc), path=path)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": exc.errors(include_url=False, include_context=False)},
    )


class DomainErrorMiddleware:
    """Turn domain and model errors into JSON responses.

    Runs outside the DI container middleware: the error first closes the
    request scope, which rolls the request's transaction back, and only
    then becomes a response.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        try:
            await self.app(scope, receive, send)
        except DomainError as e:
            response = domain_error_response(e, scope["path"])
        except PydanticValidationError as e:
            response = model_validation_error_response(e, scope["path"])
        else:
            return
        await response(scope, receive, send)


def register_error_handlers(app: FastAPI) -> None:
    """Install domain error translation on the app.

    Must be called after `setup_di` so the middleware wraps the container's.

    Args:
        app: FastAPI application
    """
    app.add_middleware(DomainErrorMiddleware)
