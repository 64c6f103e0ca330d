"""Inbound-parse webhook router."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from google import genai

from flyer_events.config import Settings, get_settings
from flyer_events.inbound.parsing import parse_inbound_form
from flyer_events.inbound.pipeline import process_inbound_email
from flyer_events.sheets import SheetsDestination
from flyer_events.storage import ImageUploader

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["inbound"])


def get_gemini(request: Request) -> genai.Client:
    """Gemini client created at startup."""
    return request.app.state.gemini_client


def get_uploader(request: Request) -> ImageUploader:
    """Image uploader created at startup."""
    return request.app.state.uploader


def get_destination(request: Request) -> SheetsDestination:
    """Spreadsheet destination created at startup."""
    return request.app.state.destination


@router.post("/parse-sendgrid-inbound")
async def parse_sendgrid_inbound(
    request: Request,
    settings: Settings = Depends(get_settings),
    gemini_client: genai.Client = Depends(get_gemini),
    uploader: ImageUploader = Depends(get_uploader),
    destination: SheetsDestination = Depends(get_destination),
) -> JSONResponse:
    """Receive a forwarded email, extract flyer events, append them to the sheet.

    The sender only sees a coarse outcome: 200 when the request completed
    (even if some attachments failed), 500 when the batch write failed.
    """
    body = await request.body()
    if not body:
        logger.error("No body provided")
        return JSONResponse({"error": "No body provided"}, status_code=400)

    try:
        form = await request.form()
        email = await parse_inbound_form(form)

        if not email.attachments:
            logger.info("No attachments found", extra={"subject": email.subject})
            return JSONResponse({"message": "No attachments found"})

        logger.info(
            "Found %d attachment(s) from %s",
            len(email.attachments),
            email.sender,
            extra={"subject": email.subject},
        )

        summary = await process_inbound_email(
            email,
            gemini_client=gemini_client,
            uploader=uploader,
            destination=destination,
            settings=settings,
        )
    except Exception as exc:
        logger.error("Error parsing inbound email: %s", exc, exc_info=True)
        return JSONResponse(
            {"error": "Failed to parse inbound email", "details": str(exc)},
            status_code=500,
        )

    return JSONResponse(
        {"message": "Email parsed successfully", "summary": summary.to_log_dict()}
    )
