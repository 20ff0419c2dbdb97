"""Typed async client for the Gemini generateContent API."""

__version__ = "0.1.0"

from .builder import RequestBuilder
from .capabilities import ModelDescriptor, ModelVersion, latest_stable_model_version
from .errors import (
    GeminiError,
    InvalidArgumentError,
    InvalidCredentialError,
    InvalidStateError,
    RequestBuildError,
    ResponseParseError,
    TransportError,
    UnsupportedFeatureError,
    UpstreamError,
)
from .images import ImageData, as_image_data
from .models import GenerationConfig, HarmBlockThreshold, HarmCategory, ModelResponse, ResponseOptions
from .services import Generator, is_valid_api_key

__all__ = [
    "__version__",
    "RequestBuilder",
    "ModelDescriptor",
    "ModelVersion",
    "latest_stable_model_version",
    "GeminiError",
    "InvalidArgumentError",
    "InvalidCredentialError",
    "InvalidStateError",
    "RequestBuildError",
    "ResponseParseError",
    "TransportError",
    "UnsupportedFeatureError",
    "UpstreamError",
    "ImageData",
    "as_image_data",
    "GenerationConfig",
    "HarmBlockThreshold",
    "HarmCategory",
    "ModelResponse",
    "ResponseOptions",
    "Generator",
    "is_valid_api_key",
]
