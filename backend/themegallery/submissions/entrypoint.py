"""Background function entry point for theme submissions."""

from typing import Optional, Union

from themegallery.schemas import PullRequest, SubmissionEvent
from themegallery.submissions.naming import derive_identifiers
from themegallery.submissions.payload import parse_submission
from themegallery.submissions.pipeline import ThemeSubmissionPipeline


async def handler(
    event: Union[SubmissionEvent, dict],
    pipeline: Optional[ThemeSubmissionPipeline] = None,
) -> PullRequest:
    """Validate a submission event and turn it into a pull request.

    Validation runs before anything touches the filesystem or the network. The
    timestamp used in branch and file names is taken here, once per invocation.

    Args:
        event: The platform event, with ``body`` and optional ``isBase64Encoded``.
        pipeline: Pipeline to run; a default one is built from settings when omitted.

    Returns:
        The opened pull request.
    """
    submission = parse_submission(event)
    identifiers = derive_identifiers(submission)
    pipeline = pipeline or ThemeSubmissionPipeline()
    return await pipeline.run(submission, identifiers)
