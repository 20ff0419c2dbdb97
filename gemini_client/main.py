"""Demo FastAPI application exposing the client."""

import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from gemini_client import __version__
from gemini_client.config import settings
from gemini_client.routers import generate_router
from gemini_client.services.transport import close_session


LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str | None = None) -> None:
    """Send loguru output to stdout at the configured level."""
    logger.remove()
    logger.add(sys.stdout, format=LOG_FORMAT, level=level or settings.log_level)


configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(f"Starting Gemini client demo v{__version__}")
    logger.info(f"API base: {settings.api_base}")
    logger.info(f"Proxy: {settings.proxy or 'None'}")
    logger.info(f"Timeout: {settings.timeout}s")

    yield

    logger.info("Shutting down...")
    await close_session()
    logger.info("Shutdown complete")


app = FastAPI(
    title="Gemini Client Demo",
    description="Example endpoints built on the Gemini generateContent client",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(generate_router, tags=["Generate"])


@app.get("/health", tags=["Health"])
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


def run():
    """Run the demo server with uvicorn."""
    import uvicorn

    uvicorn.run(
        "gemini_client.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
