"""Theme submission schemas.

Mirror the payload posted by the website's theme submission form. Field names on
the wire are camelCase.
"""

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class FormImage(BaseModel):
    """An image uploaded through the submission form."""

    model_config = ConfigDict(frozen=True)

    filename: str = Field(..., description="Original file name of the upload.")
    type: str = Field(
        ..., description="MIME type reported by the form host.", examples=["image/png"]
    )
    size: float = Field(..., description="Size of the upload in bytes.")
    url: str = Field(..., description="Public URL of the stored upload.")


# The form sends "" for a preview slot the submitter left empty
OptionalFormImage = Optional[Union[FormImage, Literal[""]]]


class ThemeSubmission(BaseModel):
    """A validated theme submission."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    main_preview_image: FormImage = Field(..., alias="mainPreviewImage")
    preview_image_1: OptionalFormImage = Field(None, alias="previewImage1")
    preview_image_2: OptionalFormImage = Field(None, alias="previewImage2")
    preview_image_3: OptionalFormImage = Field(None, alias="previewImage3")
    preview_image_4: OptionalFormImage = Field(None, alias="previewImage4")
    author_name: str = Field(..., alias="authorName")
    author_email: str = Field(..., alias="authorEmail")
    theme_name: str = Field(..., alias="themeName", examples=["My Cool Theme"])
    paid_status: str = Field(..., alias="paidStatus", examples=["free", "paid"])
    repo_url: Optional[str] = Field(None, alias="repoUrl")
    purchase_url: Optional[str] = Field(None, alias="purchaseUrl")
    live_demo_url: Optional[str] = Field(None, alias="liveDemoUrl")
    short_description: str = Field(..., alias="shortDescription")

    @property
    def preview_images(self) -> tuple[OptionalFormImage, ...]:
        """The four optional gallery slots, in form order."""
        return (
            self.preview_image_1,
            self.preview_image_2,
            self.preview_image_3,
            self.preview_image_4,
        )


class SubmissionEvent(BaseModel):
    """The event handed to the background function by the hosting platform."""

    model_config = ConfigDict(populate_by_name=True)

    body: Optional[str] = None
    is_base64_encoded: bool = Field(False, alias="isBase64Encoded")


class SubmissionIdentifiers(BaseModel):
    """Names derived from a submission for its branch and data file."""

    model_config = ConfigDict(frozen=True)

    slug: str
    timestamp: int
    branch_name: str
    file_name: str


class SubmissionAccepted(BaseModel):
    """Response returned when a submission has been queued."""

    status: Literal["accepted"] = "accepted"
    theme_name: str
    branch_name: str
    file_name: str
