"""Mapping of a submission onto the theme data file stored in the website repository."""

import json

from themegallery.schemas import LocalThemeRecord, ThemeImage, ThemeLink, ThemeSubmission

REPO_LINK_TEXT = "View Repo"
DEMO_LINK_TEXT = "View Demo"


def build_local_theme_record(submission: ThemeSubmission) -> LocalThemeRecord:
    """Build the theme data record for a submission.

    Gallery images keep the form's slot order and skip empty slots. Links are only
    added for non-empty URLs. The purchase URL is not part of the record; it only
    appears in the pull request body.
    """
    gallery = tuple(
        ThemeImage(src=preview.url, alt="") for preview in submission.preview_images if preview
    )

    repo_link = (
        ThemeLink(href=submission.repo_url, text=REPO_LINK_TEXT) if submission.repo_url else None
    )
    demo_link = (
        ThemeLink(href=submission.live_demo_url, text=DEMO_LINK_TEXT)
        if submission.live_demo_url
        else None
    )

    return LocalThemeRecord(
        title=submission.theme_name,
        description=submission.short_description,
        full_description="",
        image=ThemeImage(
            src=submission.main_preview_image.url,
            alt=f"Preview for {submission.theme_name}",
        ),
        images=gallery,
        categories=(),
        slug="",
        repo_url=repo_link,
        demo_url=demo_link,
    )


def render_theme_record(record: LocalThemeRecord) -> str:
    """Serialize a record as two-space indented JSON."""
    return json.dumps(record.to_json_dict(), indent=2, ensure_ascii=False)
