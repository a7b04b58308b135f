"""Middleware and exception handlers for the FastAPI application."""

import time
import traceback
import uuid
from typing import Union

from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from themegallery.core.config import settings
from themegallery.core.exceptions import (
    MissingCredentialsError,
    SubmissionPayloadError,
    ThemeGalleryException,
    unpack_validation_error,
)
from themegallery.core.logging import logger


async def add_request_id(request: Request, call_next: callable) -> Response:
    """Middleware to generate and add a request ID to the request for tracing.

    Args:
    ----
        request (Request): The incoming request.
        call_next (callable): The next middleware in the chain.

    Returns:
    -------
        Response: The response to the incoming request.

    """
    request.state.request_id = str(uuid.uuid4())
    response = await call_next(request)
    response.headers["X-Request-ID"] = request.state.request_id
    return response


async def log_requests(request: Request, call_next: callable) -> Response:
    """Middleware to log incoming requests with their duration and status code."""
    start_time = time.time()
    response = await call_next(request)
    duration = time.time() - start_time
    logger.info(
        f"Handled request {request.method} {request.url.path} in {duration:.2f} seconds. "
        f"Response code: {response.status_code}"
    )
    return response


async def exception_logging_middleware(request: Request, call_next: callable) -> Response:
    """Middleware to log unhandled exceptions.

    Args:
    ----
        request (Request): The incoming request.
        call_next (callable): The next middleware in the chain.

    Returns:
    -------
        Response: A 500 response carrying the exception name when the chain raised.

    """
    try:
        return await call_next(request)
    except Exception as exc:
        logger.error(f"Unhandled exception: {exc}\n{traceback.format_exc()}")

        response_content = {
            "detail": f"Internal Server Error: {exc.__class__.__name__}: {str(exc)}"
        }
        if settings.DEBUG:
            response_content["trace"] = traceback.format_exc()

        return JSONResponse(status_code=500, content=response_content)


async def validation_exception_handler(
    request: Request, exc: Union[RequestValidationError, ValidationError]
) -> JSONResponse:
    """Exception handler for validation errors that occur during request processing.

    Args:
    ----
        request (Request): The incoming request that triggered the exception.
        exc (Union[RequestValidationError, ValidationError]): The exception object that was raised.

    Returns:
    -------
        JSONResponse: A 422 Unprocessable Entity status response listing each invalid field,
            e.g. ``{"errors": [{"mainPreviewImage": "Field required"}]}``.

    """
    error_messages = unpack_validation_error(exc)
    logger.error(f"Validation error: {error_messages}")
    return JSONResponse(status_code=422, content=error_messages)


async def submission_payload_exception_handler(
    request: Request, exc: SubmissionPayloadError
) -> JSONResponse:
    """Exception handler for SubmissionPayloadError, answering 400 Bad Request."""
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def missing_credentials_exception_handler(
    request: Request, exc: MissingCredentialsError
) -> JSONResponse:
    """Exception handler for MissingCredentialsError, answering 503 Service Unavailable."""
    logger.error(f"Submission rejected: {exc}")
    return JSONResponse(status_code=503, content={"detail": str(exc)})


async def theme_gallery_exception_handler(
    request: Request, exc: ThemeGalleryException
) -> JSONResponse:
    """Exception handler for any other ThemeGalleryException, answering 500."""
    logger.error(f"{exc.__class__.__name__}: {exc}")
    return JSONResponse(status_code=500, content={"detail": str(exc)})
