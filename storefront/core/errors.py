# storefront/core/errors.py
import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """
    Base class for errors surfaced to clients.

    Rendered as `{"message": ..., "error": ...}` by `api_error_handler`;
    `error` is omitted when there is no extra detail.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "internal error"

    def __init__(self, message: str | None = None, error: str | None = None):
        self.message = message or self.default_message
        self.error = error
        super().__init__(self.message)

    def to_body(self) -> dict[str, str]:
        body = {"message": self.message}
        if self.error:
            body["error"] = self.error
        return body


class BadRequest(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "bad request"


class Unauthenticated(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "unauthorized access"


class Forbidden(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "forbidden access"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "not found"


class Internal(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "internal error"


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Store failures outside `store_write` (reads, gate lookups) as a 500 body."""
    logger.error("Store error on %s %s: %s", request.method, request.url.path, exc)
    error = Internal("store operation failed", error=str(exc))
    return JSONResponse(status_code=error.status_code, content=error.to_body())
