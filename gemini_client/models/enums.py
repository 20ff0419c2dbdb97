"""Enumerations used on the wire."""

from enum import Enum


class ImageMimeType(str, Enum):
    """Image formats accepted as inline data."""

    PNG = "image/png"
    JPEG = "image/jpeg"
    HEIC = "image/heic"
    HEIF = "image/heif"
    WEBP = "image/webp"


class ResponseMimeType(str, Enum):
    """Output formats of a generation."""

    TEXT = "text/plain"
    JSON = "application/json"


class HarmCategory(str, Enum):
    HARASSMENT = "HARM_CATEGORY_HARASSMENT"
    HATE_SPEECH = "HARM_CATEGORY_HATE_SPEECH"
    SEXUALLY_EXPLICIT = "HARM_CATEGORY_SEXUALLY_EXPLICIT"
    DANGEROUS_CONTENT = "HARM_CATEGORY_DANGEROUS_CONTENT"
    CIVIC_INTEGRITY = "HARM_CATEGORY_CIVIC_INTEGRITY"


class HarmBlockThreshold(str, Enum):
    """Block thresholds, strictest first."""

    BLOCK_LOW_AND_ABOVE = "BLOCK_LOW_AND_ABOVE"
    BLOCK_MEDIUM_AND_ABOVE = "BLOCK_MEDIUM_AND_ABOVE"
    BLOCK_ONLY_HIGH = "BLOCK_ONLY_HIGH"
    BLOCK_NONE = "BLOCK_NONE"
    OFF = "OFF"
