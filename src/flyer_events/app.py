"""FastAPI application with lifespan and health endpoint."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from flyer_events.config import get_settings
from flyer_events.inbound.router import router as inbound_router
from flyer_events.llm import get_gemini_client
from flyer_events.logging_config import configure_logging
from flyer_events.sheets import SheetsDestination
from flyer_events.storage import ImageUploader


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging and build the shared collaborators once."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    app.state.gemini_client = get_gemini_client()
    app.state.uploader = ImageUploader.from_settings(settings)
    app.state.destination = SheetsDestination.from_settings(settings)
    yield


app = FastAPI(
    title="Flyer Events",
    lifespan=lifespan,
)
app.include_router(inbound_router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": "flyer-events",
        "version": "0.1.0",
    }
