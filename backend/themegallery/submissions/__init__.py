# flake8: noqa: F401
"""Theme submission background function."""

from .entrypoint import handler
from .naming import derive_identifiers, kebab_case
from .payload import decode_event, parse_submission
from .pipeline import ThemeSubmissionPipeline
from .pull_request import build_pull_request_body, build_pull_request_title
from .records import build_local_theme_record, render_theme_record
