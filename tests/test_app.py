"""Tests for app startup wiring."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from flyer_events.app import app
from flyer_events.config import Settings
from flyer_events.sheets.client import SheetsDestination
from flyer_events.storage.uploader import ImageUploader


def test_lifespan_builds_shared_collaborators():
    """Startup builds the Gemini client, uploader and destination once, on app.state."""
    settings = Settings(
        _env_file=None,
        google_spreadsheet_id="sheet-123",
        s3_bucket="flyers",
        region="us-west-1",
        log_level="WARNING",
    )
    with (
        patch("flyer_events.app.get_settings", return_value=settings),
        patch("flyer_events.app.get_gemini_client") as mock_gemini,
        patch("flyer_events.app.configure_logging") as mock_logging,
    ):
        with TestClient(app) as client:
            state = client.app.state
            assert state.settings is settings
            assert state.gemini_client is mock_gemini.return_value
            assert isinstance(state.uploader, ImageUploader)
            assert state.uploader.bucket == "flyers"
            assert isinstance(state.destination, SheetsDestination)
            assert state.destination.spreadsheet_id == "sheet-123"

    mock_logging.assert_called_once_with("WARNING")
