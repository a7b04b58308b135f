"""Theme submission endpoint.

HTTP front of the background function: the payload is decoded and validated while
the caller waits, the clone/commit/push/pull-request work runs after the response.
"""

from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Header, Query, Request

from themegallery import schemas
from themegallery.api.deps import get_submission_pipeline
from themegallery.core.exceptions import MissingCredentialsError, SubmissionPayloadError
from themegallery.core.logging import logger
from themegallery.submissions.naming import derive_identifiers
from themegallery.submissions.payload import parse_submission
from themegallery.submissions.pipeline import ThemeSubmissionPipeline

router = APIRouter()


@router.post("", status_code=202, response_model=schemas.SubmissionAccepted)
# Slashed variant, served without a redirect
@router.post(
    "/", status_code=202, response_model=schemas.SubmissionAccepted, include_in_schema=False
)
async def submit_theme(
    request: Request,
    background_tasks: BackgroundTasks,
    base64_encoded: bool = Query(False, alias="base64", description="Body is base64 encoded."),
    x_body_encoding: Optional[str] = Header(None),
    pipeline: ThemeSubmissionPipeline = Depends(get_submission_pipeline),
) -> schemas.SubmissionAccepted:
    """Accept a theme submission and open a pull request for it in the background.

    Args:
        request: Raw HTTP request; its body is the JSON document ``{"data": {...}}``.
        background_tasks: Queue running the submission pipeline after the response.
        base64_encoded: Whether the body is base64 encoded.
        x_body_encoding: ``base64`` also marks the body as encoded.
        pipeline: The submission pipeline.

    Returns:
        The branch and file names the submission will be written to.

    Raises:
        SubmissionPayloadError: If the body is missing, is not UTF-8 or cannot be decoded (400).
        ValidationError: If the submission does not match the schema (422).
        MissingCredentialsError: If no GitHub token is configured (503).
    """
    try:
        body = (await request.body()).decode("utf-8")
    except UnicodeDecodeError as e:
        raise SubmissionPayloadError(f"Body is not valid UTF-8: {e}") from e
    event = schemas.SubmissionEvent(
        body=body,
        is_base64_encoded=base64_encoded or (x_body_encoding or "").lower() == "base64",
    )

    submission = parse_submission(event)
    if not pipeline.token:
        raise MissingCredentialsError()

    identifiers = derive_identifiers(submission)
    logger.info(
        f"Queued theme submission '{submission.theme_name}' on {identifiers.branch_name}"
    )
    background_tasks.add_task(pipeline.run, submission, identifiers)

    return schemas.SubmissionAccepted(
        theme_name=submission.theme_name,
        branch_name=identifiers.branch_name,
        file_name=identifiers.file_name,
    )
