"""Configuration settings for the theme gallery backend.

Wraps environment variables and provides defaults.
"""

from typing import Optional

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Pydantic settings class.

    Attributes:
    ----------
        PROJECT_NAME (str): The name of the project.
        LOCAL_DEVELOPMENT (bool): Whether the application is running locally.
        DEBUG (bool): Whether debug mode is enabled.
        LOG_LEVEL (str): The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        GITHUB_TOKEN (Optional[str]): Token used to push branches and open pull requests.
        GITHUB_API_URL (str): Base URL of the GitHub REST API.
        THEME_REPO_OWNER (str): Owner of the website repository receiving submissions.
        THEME_REPO_NAME (str): Name of the website repository receiving submissions.
        THEME_REPO_BASE_BRANCH (str): Branch the submission pull requests target.
        THEME_REPO_URL (Optional[str]): Clone URL, derived from owner and name when unset.
        THEME_DATA_DIR (str): Directory inside the repository holding theme data files.
        BOT_NAME (str): Commit author name and push username.
        BOT_EMAIL (str): Commit author email.
        WORKSPACE_ROOT (Optional[str]): Parent directory for temporary clones.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    PROJECT_NAME: str = "Theme Gallery"
    LOCAL_DEVELOPMENT: bool = False

    # Debug configuration
    DEBUG: bool = False

    # Logging configuration
    LOG_LEVEL: str = "INFO"

    GITHUB_TOKEN: Optional[str] = None
    GITHUB_API_URL: str = "https://api.github.com"

    THEME_REPO_OWNER: str = "withastro"
    THEME_REPO_NAME: str = "astro.build"
    THEME_REPO_BASE_BRANCH: str = "main"
    THEME_REPO_URL: Optional[str] = Field(default=None, validate_default=True)
    THEME_DATA_DIR: str = "src/data/themes"

    BOT_NAME: str = "astrobot"
    BOT_EMAIL: str = "astrobot@astro.build"

    # None means the system temporary directory
    WORKSPACE_ROOT: Optional[str] = None

    @field_validator("LOG_LEVEL")
    def validate_log_level(cls, v: str) -> str:
        """Reject log levels the logging module does not know."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("THEME_REPO_URL", mode="before")
    def assemble_repo_url(cls, v: Optional[str], info: ValidationInfo) -> str:
        """Build the clone URL of the website repository.

        Args:
            v: The explicitly configured clone URL, if any.
            info: Validation context containing all field values.
        """
        if isinstance(v, str) and v:
            return v
        owner = info.data.get("THEME_REPO_OWNER", "withastro")
        name = info.data.get("THEME_REPO_NAME", "astro.build")
        return f"https://github.com/{owner}/{name}.git"


settings = Settings()
