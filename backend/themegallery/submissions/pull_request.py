"""Pull request text for theme submissions."""

from typing import Optional

from themegallery.schemas import ThemeSubmission

NOT_AVAILABLE = "N/A"


def _or_na(value: Optional[str]) -> str:
    return NOT_AVAILABLE if value is None else value


def build_pull_request_title(submission: ThemeSubmission) -> str:
    """Title shown in the pull request list, e.g. ``THEME: My Cool Theme``."""
    return f"THEME: {submission.theme_name}"


def build_pull_request_body(submission: ThemeSubmission) -> str:
    """Markdown body summarising the submission for reviewers."""
    return "\n".join(
        [
            f"**Author**: {_or_na(submission.author_name)}",
            f"**Paid or Free**: {_or_na(submission.paid_status)}",
            f"**Repo Link**: {_or_na(submission.repo_url)}",
            f"**Purchase Link**: {_or_na(submission.purchase_url)}",
            f"**Live Demo Link**: {_or_na(submission.live_demo_url)}",
            f"**Preview Image**: {_or_na(submission.main_preview_image.url)}",
            "",
            submission.short_description,
        ]
    )
