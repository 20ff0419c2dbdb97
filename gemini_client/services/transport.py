"""HTTP transport used by the generator to reach the API."""

from typing import Protocol

from curl_cffi.requests import AsyncSession
from loguru import logger

from gemini_client.config import settings


_session: AsyncSession | None = None


async def get_session() -> AsyncSession:
    """Get or create the process-wide async session."""
    global _session
    if _session is None:
        _session = AsyncSession()
        logger.debug("Opened shared curl_cffi session")
    return _session


async def close_session() -> None:
    """Close the process-wide async session, if one was opened."""
    global _session
    if _session is not None:
        await _session.close()
        _session = None
        logger.debug("Closed shared curl_cffi session")


class Transport(Protocol):
    async def send(
        self, url: str, method: str, headers: dict[str, str], body: str
    ) -> tuple[int, str]:
        """Send ``body`` and return the HTTP status and response text."""
        ...


class CurlTransport:
    """curl_cffi transport, on the shared session unless given its own.

    Headers are passed per call, so credentials can change between calls
    without touching the session.
    """

    def __init__(self, session: AsyncSession | None = None):
        self.session = session

    async def send(
        self, url: str, method: str, headers: dict[str, str], body: str
    ) -> tuple[int, str]:
        session = self.session or await get_session()
        response = await session.request(
            method,
            url,
            headers={**headers, "Content-Type": "application/json"},
            data=body.encode("utf-8"),
            timeout=settings.timeout,
            impersonate=settings.impersonate,
            proxy=settings.proxy,
        )
        return response.status_code, response.text
