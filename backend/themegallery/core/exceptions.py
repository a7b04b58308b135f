"""Shared exceptions module."""

from typing import Optional, Sequence

from pydantic import ValidationError


class ThemeGalleryException(Exception):
    """Base exception for theme gallery services."""

    pass


class SubmissionPayloadError(ThemeGalleryException):
    """Exception raised when a submission event body cannot be read."""

    def __init__(self, message: Optional[str] = "Invalid submission payload"):
        """Create a new SubmissionPayloadError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class MissingCredentialsError(ThemeGalleryException):
    """Exception raised when the GitHub token is not configured."""

    def __init__(self, message: Optional[str] = "GITHUB_TOKEN is not configured"):
        """Create a new MissingCredentialsError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class GitCommandError(ThemeGalleryException):
    """Exception raised when a git subprocess exits with a non-zero status."""

    def __init__(self, args: Sequence[str], returncode: int, stderr: str = ""):
        """Create a new GitCommandError instance.

        Args:
        ----
            args (Sequence[str]): The git command line, credentials already redacted.
            returncode (int): The process exit status.
            stderr (str): Whatever the process wrote to stderr.

        """
        self.args_redacted = list(args)
        self.returncode = returncode
        self.stderr = stderr
        self.message = f"git {' '.join(self.args_redacted)} failed with exit code {returncode}"
        if stderr:
            self.message = f"{self.message}: {stderr.strip()}"
        super().__init__(self.message)


class TabMarkupError(ThemeGalleryException):
    """Exception raised when tab widget markup does not follow the expected structure."""

    pass


def unpack_validation_error(exc: ValidationError) -> dict:
    """Unpack a Pydantic validation error into a dictionary.

    Args:
    ----
        exc (ValidationError): The Pydantic validation error.

    Returns:
    -------
        dict: The dictionary representation of the validation error.

    """
    error_messages = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"])
        error_messages.append({field: error["msg"]})

    return {"errors": error_messages}
