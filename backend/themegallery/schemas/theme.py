"""Theme data schemas, as stored in the website repository."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ThemeImage(BaseModel):
    """An image reference inside a theme data file."""

    model_config = ConfigDict(frozen=True)

    src: str
    alt: str = ""


class ThemeLink(BaseModel):
    """A labelled outbound link inside a theme data file."""

    model_config = ConfigDict(frozen=True)

    href: str
    text: str


class LocalThemeRecord(BaseModel):
    """The JSON document written to the theme data directory for a submission.

    Optional links are omitted from the serialized output when absent.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    description: str
    full_description: str = Field("", alias="fullDescription")
    image: ThemeImage
    images: tuple[ThemeImage, ...] = ()
    categories: tuple[str, ...] = ()
    slug: str = ""
    repo_url: Optional[ThemeLink] = Field(None, alias="repoUrl")
    demo_url: Optional[ThemeLink] = Field(None, alias="demoUrl")

    def to_json_dict(self) -> dict:
        """Dump with wire names, dropping absent optional links."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class PullRequest(BaseModel):
    """The subset of a GitHub pull request the pipeline reports back."""

    number: int
    url: str
    title: str
    head: str
    base: str
