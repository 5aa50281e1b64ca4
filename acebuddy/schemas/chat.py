"""
Homework Chat Schemas

Messages exchanged in a homework-help session and the image payload a
student may attach to a question.
"""

import base64

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from acebuddy.errors import PreconditionError
from acebuddy.schemas.base import MAX_IMAGE_BYTES, Sender


class ChatMessage(BaseModel):
    """A single transcript entry. Transcripts are append-only."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    sender: Sender = Field(description="Who wrote the message")
    text: str = Field(description="Message body (may be empty for image-only turns)")
    image_url: str | None = Field(
        default=None,
        alias="imageUrl",
        description="Preview URL of an attached image"
    )


class ImageInput(BaseModel):
    """Raw image bytes plus MIME type, as supplied by the presentation layer."""
    model_config = ConfigDict(frozen=True)

    data: bytes = Field(description="Raw image bytes")
    mime_type: str = Field(description="MIME type, e.g. 'image/png'")

    @field_validator("mime_type")
    @classmethod
    def validate_mime_type(cls, value: str) -> str:
        if not value.startswith("image/"):
            raise ValueError("Please upload an image file (e.g., JPEG, PNG).")
        return value

    @field_validator("data")
    @classmethod
    def validate_size(cls, value: bytes) -> bytes:
        if not value:
            raise ValueError("Image is empty.")
        if len(value) > MAX_IMAGE_BYTES:
            raise ValueError("Image size exceeds 5MB limit.")
        return value

    @classmethod
    def from_upload(cls, data: bytes, mime_type: str) -> "ImageInput":
        """Build from an upload, reporting bad input as a precondition failure."""
        try:
            return cls(data=data, mime_type=mime_type)
        except ValidationError as e:
            raise PreconditionError(e.errors()[0]["msg"].removeprefix("Value error, ")) from e

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    def to_data_url(self) -> str:
        """Data URL suitable for previews and OpenAI-style image parts."""
        return f"data:{self.mime_type};base64,{self.to_base64()}"
