"""Per-attachment extraction pipeline and the single batch write per request.

For each attachment, the image upload starts as a background task and the
Gemini extraction runs without waiting for it. The upload is joined (with a
short timeout) only when the attachment's events are ready, so a slow or
failed upload costs the rows their link and nothing else. Attachments run
concurrently; one attachment's failure never affects the others or the batch
append that follows.
"""

import asyncio
import logging

from google import genai

from flyer_events.config import Settings
from flyer_events.llm import extract_events
from flyer_events.models.attachment import (
    AttachmentResult,
    AttachmentStatus,
    InboundAttachment,
    ParsedEmail,
    PipelineStage,
    RequestSummary,
)
from flyer_events.normalizer import normalize_event
from flyer_events.sheets import SheetsDestination, add_events_to_spreadsheet
from flyer_events.storage import ImageUploader

logger = logging.getLogger(__name__)


async def _upload(
    uploader: ImageUploader, attachment: InboundAttachment
) -> tuple[str | None, str | None]:
    """Upload one attachment. Returns (url, error); failures are logged, not raised."""
    try:
        url = await uploader.upload(
            attachment.content, attachment.filename, attachment.content_type
        )
    except Exception as exc:
        logger.error("Failed to upload attachment %s", attachment.filename, exc_info=True)
        return None, str(exc)
    return url, None


async def _join_upload(
    upload_task: asyncio.Task, filename: str, timeout: float
) -> tuple[str | None, str | None]:
    """Wait up to timeout for the upload task without cancelling it. Returns (url, error)."""
    try:
        return await asyncio.wait_for(asyncio.shield(upload_task), timeout)
    except TimeoutError:
        logger.warning(
            "Upload of %s not finished after %.1fs; writing rows without link",
            filename,
            timeout,
        )
        return None, f"upload timed out after {timeout:.1f}s"


async def process_attachment(
    attachment: InboundAttachment,
    *,
    gemini_client: genai.Client,
    uploader: ImageUploader,
    upload_timeout: float = 5.0,
    default_year: int | None = None,
) -> AttachmentResult:
    """Upload, extract and normalize one attachment. Never raises."""
    filename = attachment.filename
    logger.info("Processing attachment %s (%d bytes)", filename, attachment.size)

    upload_task = asyncio.create_task(_upload(uploader, attachment))

    try:
        response = await extract_events(
            gemini_client,
            attachment.content,
            attachment.content_type,
            label=filename,
            default_year=default_year,
        )
    except Exception as exc:
        logger.error("Failed to extract events from attachment %s", filename, exc_info=True)
        # Let the upload settle so its outcome is logged; the attachment is dropped either way
        await _join_upload(upload_task, filename, upload_timeout)
        return AttachmentResult(
            filename=filename,
            status=AttachmentStatus.FAILED,
            failed_stage=PipelineStage.EXTRACTION,
            error=str(exc),
        )

    events = [normalize_event(event) for event in response.events]
    source_ref, upload_error = await _join_upload(upload_task, filename, upload_timeout)

    return AttachmentResult(
        filename=filename,
        status=AttachmentStatus.EXTRACTED if events else AttachmentStatus.NO_EVENTS,
        events=events,
        source_ref=source_ref,
        failed_stage=PipelineStage.UPLOAD if upload_error else None,
        upload_error=upload_error,
    )


async def process_inbound_email(
    email: ParsedEmail,
    *,
    gemini_client: genai.Client,
    uploader: ImageUploader,
    destination: SheetsDestination,
    settings: Settings,
) -> RequestSummary:
    """Process every attachment concurrently, then write all events in one append.

    Lets errors from the spreadsheet append (including SpreadsheetConfigError)
    propagate to the caller.
    """
    results = await asyncio.gather(
        *(
            process_attachment(
                attachment,
                gemini_client=gemini_client,
                uploader=uploader,
                upload_timeout=settings.upload_join_timeout,
                default_year=settings.default_event_year,
            )
            for attachment in email.attachments
        )
    )

    groups = [result.to_group() for result in results if result.events]
    batch = await add_events_to_spreadsheet(
        groups, destination, null_cost_policy=settings.null_cost_policy
    )

    summary = RequestSummary(
        attachments=list(results),
        events_found=sum(len(result.events) for result in results),
        rows_written=batch.rows_written,
        updated_range=batch.updated_range,
        failed_attachments=sum(
            1 for result in results if result.status == AttachmentStatus.FAILED
        ),
    )
    logger.info(
        "Processed %d attachment(s), wrote %d row(s)",
        len(results),
        batch.rows_written,
        extra={"summary": summary.to_log_dict()},
    )
    return summary
