"""
API error handling utilities.

Provides a decorator for consistent error handling across the chunk, stats
and query endpoints, and the handler rendering HTTP errors in the
{"success": false, "error": ...} envelope the admin frontend expects.

Dependencies: fastapi, backend.core.exceptions, backend.models.common
System role: Exception-to-HTTP mapping
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from backend.core.exceptions import (
    ChunkNotFoundError,
    InvalidArgumentError,
    UpstreamError,
)
from backend.models.common import ErrorResponse

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_api_errors(func: F) -> F:
    """
    Decorator transforming domain errors into HTTPExceptions.

    - InvalidArgumentError -> 400
    - ChunkNotFoundError -> 404
    - UpstreamError (provider failures, missing configuration) -> 500
    - anything else -> 500
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except InvalidArgumentError as e:
            logger.warning("Invalid request", extra={"error": e.message, "details": e.details})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except ChunkNotFoundError as e:
            logger.warning("Chunk not found", extra={"chunk_id": e.chunk_id})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except UpstreamError as e:
            logger.error(
                "Upstream provider failure",
                extra={"error_type": type(e).__name__, "error": e.message, "details": e.details},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=e.message,
            )

        except Exception as e:
            logger.exception("Unexpected failure in request", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Internal server error: {str(e)}",
            )

    return wrapper  # type: ignore


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Render HTTPException as the error envelope."""
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    body = ErrorResponse(error=detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request body/parameter validation failures as a 400 envelope."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    error = f"{location}: {message}" if location else message
    logger.warning("Request validation failed", extra={"error": error, "path": request.url.path})
    body = ErrorResponse(error=error)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(exclude_none=True),
    )
