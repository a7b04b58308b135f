"""Identifier helpers for theme submissions."""

import re
import unicodedata
from typing import Optional

from themegallery.core.datetime_utils import epoch_millis
from themegallery.schemas import SubmissionIdentifiers, ThemeSubmission

BRANCH_PREFIX = "theme-submissions"
FALLBACK_SLUG = "theme"

# Upper-case runs (acronyms), capitalised or lower-case words, digit runs
_WORD_PATTERN = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")


def kebab_case(text: str) -> str:
    """Convert a display name into a lower-case, hyphenated ASCII identifier.

    Accents are folded to their base letter and any other non-ASCII character is
    dropped. Words break on whitespace, punctuation, case changes and digit runs:

        >>> kebab_case("My Cool Theme")
        'my-cool-theme'
        >>> kebab_case("AstroWind v2")
        'astro-wind-v-2'
    """
    folded = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    return "-".join(word.lower() for word in _WORD_PATTERN.findall(folded))


def derive_identifiers(
    submission: ThemeSubmission, timestamp: Optional[int] = None
) -> SubmissionIdentifiers:
    """Derive the branch and data file names for a submission.

    Args:
        submission: The validated submission.
        timestamp: Milliseconds since the epoch; taken now when omitted.

    Returns:
        The slug, timestamp, branch name and file name.
    """
    if timestamp is None:
        timestamp = epoch_millis()

    slug = kebab_case(submission.theme_name) or FALLBACK_SLUG
    return SubmissionIdentifiers(
        slug=slug,
        timestamp=timestamp,
        branch_name=f"{BRANCH_PREFIX}/{slug}-{timestamp}",
        file_name=f"{slug}-{timestamp}.json",
    )
