# flake8: noqa: F401
"""Schemas for the application."""

from .health import HealthStatus
from .theme import LocalThemeRecord, PullRequest, ThemeImage, ThemeLink
from .theme_submission import (
    FormImage,
    SubmissionAccepted,
    SubmissionEvent,
    SubmissionIdentifiers,
    ThemeSubmission,
)
