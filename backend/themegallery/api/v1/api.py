"""API routes for the FastAPI application."""

from fastapi import APIRouter

from themegallery.api.v1.endpoints import health, theme_submissions

api_router = APIRouter()
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    theme_submissions.router, prefix="/theme-submissions", tags=["theme-submissions"]
)
