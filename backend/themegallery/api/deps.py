"""Dependencies that are used in the API endpoints."""

from themegallery.submissions.pipeline import ThemeSubmissionPipeline


def get_submission_pipeline() -> ThemeSubmissionPipeline:
    """Pipeline configured from settings; overridden in tests."""
    return ThemeSubmissionPipeline()
