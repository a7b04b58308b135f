"""Unit tests for the theme data record."""

import json

import pytest
from pydantic import ValidationError as PydanticValidationError

from themegallery.schemas import ThemeSubmission
from themegallery.submissions.records import build_local_theme_record, render_theme_record
from tests.fixtures.common import make_image


def test_minimal_submission_record(submission):
    """A minimal submission yields the bare theme record."""
    record = build_local_theme_record(submission)

    assert json.loads(render_theme_record(record)) == {
        "title": "My Cool Theme",
        "description": "desc",
        "fullDescription": "",
        "image": {
            "src": "https://uploads.example.com/main.png",
            "alt": "Preview for My Cool Theme",
        },
        "images": [],
        "categories": [],
        "slug": "",
    }


def test_gallery_skips_empty_slots_and_keeps_order(submission_data):
    """Empty preview slots are dropped; the others keep their slot order."""
    submission = ThemeSubmission.model_validate(
        {
            **submission_data,
            "previewImage1": make_image("one.png"),
            "previewImage2": "",
            "previewImage3": make_image("three.png"),
            "previewImage4": make_image("four.png"),
        }
    )

    record = build_local_theme_record(submission)

    assert [image.src for image in record.images] == [
        "https://uploads.example.com/one.png",
        "https://uploads.example.com/three.png",
        "https://uploads.example.com/four.png",
    ]
    assert all(image.alt == "" for image in record.images)


def test_links_are_added_only_when_present(submission_data):
    """Repo and demo links carry fixed labels; the purchase URL stays out."""
    submission = ThemeSubmission.model_validate(
        {
            **submission_data,
            "repoUrl": "https://github.com/jo/theme",
            "liveDemoUrl": "https://theme.example.com",
            "purchaseUrl": "https://shop.example.com/theme",
        }
    )

    data = build_local_theme_record(submission).to_json_dict()

    assert data["repoUrl"] == {"href": "https://github.com/jo/theme", "text": "View Repo"}
    assert data["demoUrl"] == {"href": "https://theme.example.com", "text": "View Demo"}
    assert "https://shop.example.com/theme" not in json.dumps(data)


def test_empty_urls_produce_no_links(submission_data):
    """Empty strings count as absent links."""
    submission = ThemeSubmission.model_validate(
        {**submission_data, "repoUrl": "", "liveDemoUrl": ""}
    )

    data = build_local_theme_record(submission).to_json_dict()

    assert "repoUrl" not in data
    assert "demoUrl" not in data


def test_rendered_json_is_indented_and_keeps_unicode(submission_data):
    """The data file is two-space indented and keeps non-ASCII text readable."""
    submission = ThemeSubmission.model_validate({**submission_data, "themeName": "Crème"})

    rendered = render_theme_record(build_local_theme_record(submission))

    assert rendered.startswith('{\n  "title": "Crème",\n  "description": "desc",')
    assert list(json.loads(rendered)) == [
        "title",
        "description",
        "fullDescription",
        "image",
        "images",
        "categories",
        "slug",
    ]


def test_record_is_immutable(submission):
    """Records cannot be modified after construction."""
    record = build_local_theme_record(submission)

    with pytest.raises(PydanticValidationError):
        record.title = "Other"
