"""Health check schema."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthStatus(BaseModel):
    """Service health, as far as accepting theme submissions is concerned."""

    status: Literal["healthy", "degraded"]
    github_token_configured: bool
    repository: str = Field(..., description="Repository receiving the pull requests.")
