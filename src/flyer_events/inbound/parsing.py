"""Read an inbound-parse multipart form into a ParsedEmail."""

from starlette.datastructures import FormData, UploadFile

from flyer_events.models.attachment import InboundAttachment, ParsedEmail

_DEFAULT_CONTENT_TYPE = "application/octet-stream"


def _form_str(form: FormData, key: str) -> str | None:
    value = form.get(key)
    return value if isinstance(value, str) else None


async def parse_inbound_form(form: FormData) -> ParsedEmail:
    """Extract addressing fields and every uploaded file, in form order.

    SendGrid posts attachments as attachment1..N file fields; any file field
    is accepted so the order of the form is the attachment order.
    """
    attachments: list[InboundAttachment] = []
    for _, value in form.multi_items():
        if not isinstance(value, UploadFile):
            continue
        content = await value.read()
        attachments.append(
            InboundAttachment(
                filename=value.filename or "image",
                content_type=value.content_type or _DEFAULT_CONTENT_TYPE,
                content=content,
                size=len(content),
            )
        )

    to = _form_str(form, "to")
    return ParsedEmail(
        to=[to] if to else [],
        sender=_form_str(form, "from") or "",
        subject=_form_str(form, "subject") or "",
        text=_form_str(form, "text"),
        html=_form_str(form, "html"),
        attachments=attachments,
    )
