"""
Platform input capabilities.

Speech recognition and image capture belong to the presentation layer's
runtime. The core only sees these narrow interfaces.
"""

from typing import Protocol, runtime_checkable

from acebuddy.schemas.chat import ImageInput


@runtime_checkable
class SpeechToText(Protocol):
    """Produces one transcript from the user's microphone."""

    async def speech_to_text(self) -> str:
        ...


@runtime_checkable
class ImageSource(Protocol):
    """Produces one image chosen or captured by the user."""

    async def image_to_bytes(self) -> ImageInput:
        ...
