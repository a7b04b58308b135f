"""Main module of the FastAPI application.

This module sets up the FastAPI application and the middleware to log incoming requests
and unhandled exceptions.
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from themegallery.api.middleware import (
    add_request_id,
    exception_logging_middleware,
    log_requests,
    missing_credentials_exception_handler,
    submission_payload_exception_handler,
    theme_gallery_exception_handler,
    validation_exception_handler,
)
from themegallery.api.v1.api import api_router
from themegallery.core.config import settings
from themegallery.core.exceptions import (
    MissingCredentialsError,
    SubmissionPayloadError,
    ThemeGalleryException,
)

# Endpoints register their slashed variants themselves
app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url="/openapi.json",
    redirect_slashes=False,
)

app.include_router(api_router)

# Register middleware directly
app.middleware("http")(add_request_id)
app.middleware("http")(log_requests)
app.middleware("http")(exception_logging_middleware)

# Register exception handlers
app.exception_handler(RequestValidationError)(validation_exception_handler)
app.exception_handler(ValidationError)(validation_exception_handler)
app.exception_handler(SubmissionPayloadError)(submission_payload_exception_handler)
app.exception_handler(MissingCredentialsError)(missing_credentials_exception_handler)
app.exception_handler(ThemeGalleryException)(theme_gallery_exception_handler)
