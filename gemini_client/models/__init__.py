"""Data models for the client."""

from .enums import HarmBlockThreshold, HarmCategory, ImageMimeType, ResponseMimeType
from .request import (
    Content,
    GenerateContentRequest,
    GenerationConfig,
    GoogleSearch,
    InlineData,
    Part,
    SafetySetting,
    Tool,
)
from .response import (
    Candidate,
    ErrorDetail,
    ErrorResponse,
    GenerateContentResponse,
    GroundingMetadata,
    UsageMetadata,
    decode_response,
)
from .result import GroundingDetail, GroundingSource, ModelResponse, ResponseOptions

__all__ = [
    "HarmBlockThreshold",
    "HarmCategory",
    "ImageMimeType",
    "ResponseMimeType",
    "Content",
    "GenerateContentRequest",
    "GenerationConfig",
    "GoogleSearch",
    "InlineData",
    "Part",
    "SafetySetting",
    "Tool",
    "Candidate",
    "ErrorDetail",
    "ErrorResponse",
    "GenerateContentResponse",
    "GroundingMetadata",
    "UsageMetadata",
    "decode_response",
    "GroundingDetail",
    "GroundingSource",
    "ModelResponse",
    "ResponseOptions",
]
