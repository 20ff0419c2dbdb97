"""Services for the client."""

from .generator import Generator, is_valid_api_key
from .transport import CurlTransport, Transport, close_session, get_session

__all__ = [
    "Generator",
    "is_valid_api_key",
    "CurlTransport",
    "Transport",
    "close_session",
    "get_session",
]
