"""Health check endpoint."""

from fastapi import APIRouter, Depends

from themegallery import schemas
from themegallery.api.deps import get_submission_pipeline
from themegallery.core.config import settings
from themegallery.submissions.pipeline import ThemeSubmissionPipeline

router = APIRouter()


@router.get("", response_model=schemas.HealthStatus)
@router.get("/", response_model=schemas.HealthStatus, include_in_schema=False)
async def health_check(
    pipeline: ThemeSubmissionPipeline = Depends(get_submission_pipeline),
) -> schemas.HealthStatus:
    """Report whether theme submissions can be accepted.

    Without a GitHub token the service is ``degraded``: it stays up, but submissions
    are answered with 503.
    """
    token_configured = bool(pipeline.token)
    return schemas.HealthStatus(
        status="healthy" if token_configured else "degraded",
        github_token_configured=token_configured,
        repository=f"{settings.THEME_REPO_OWNER}/{settings.THEME_REPO_NAME}",
    )
