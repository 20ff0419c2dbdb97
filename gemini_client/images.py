"""Normalization of user supplied base64 images."""

from dataclasses import dataclass

from gemini_client.models.enums import ImageMimeType

DATA_URI_PREFIX = "data:image"


@dataclass(frozen=True)
class ImageData:
    mime_type: ImageMimeType
    base64_data: str


def _match_mime_type(image_format: str) -> ImageMimeType:
    image_format = image_format.strip().lower()
    if image_format:
        for mime_type in ImageMimeType:
            if mime_type.value.lower().endswith(image_format):
                return mime_type
    # Unknown formats fall back to JPEG
    return ImageMimeType.JPEG


def as_image_data(base64_image: str) -> ImageData:
    """Split a bare base64 string or a data URI into mime type and payload.

    ``data:image/png;base64,AAAA`` gives ``(image/png, "AAAA")``. Anything that
    is not an image data URI is treated as JPEG.
    """
    header, comma, payload = base64_image.partition(",")

    if base64_image[: len(DATA_URI_PREFIX)].lower() == DATA_URI_PREFIX:
        image_format = header.split(";", 1)[0].rsplit("/", 1)[-1]
        mime_type = _match_mime_type(image_format)
    else:
        mime_type = ImageMimeType.JPEG

    return ImageData(
        mime_type=mime_type,
        base64_data=payload if comma else base64_image,
    )
