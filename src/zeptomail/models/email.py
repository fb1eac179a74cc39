"""
Request bodies for the plain email endpoints.

``email`` and ``email/batch``. Python attribute names are descriptive; the
pydantic aliases carry the exact JSON keys the API expects.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from zeptomail.models.common import (
    Attachment,
    EmailAddress,
    InlineImage,
    MimeHeaders,
    Recipient,
)


class _BaseEmailRequest(BaseModel):
    sender: EmailAddress = Field(alias="from")
    recipients: list[Recipient] = Field(alias="to")
    reply_to: list[EmailAddress] | None = None
    subject: str
    htmlbody: str | None = None
    textbody: str | None = None
    carbon_copy: list[Recipient] | None = Field(default=None, alias="cc")
    blind_carbon_copy: list[Recipient] | None = Field(default=None, alias="bcc")
    track_clicks: bool | None = None
    track_opens: bool | None = None
    client_reference: str | None = None
    mime_headers: MimeHeaders | None = None
    attachments: list[Attachment] | None = None
    inline_images: list[InlineImage] | None = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class EmailRequest(_BaseEmailRequest):
    """Single email sent to one set of recipients."""

    bounce_address: str | None = None


class BatchEmailRequest(_BaseEmailRequest):
    """Same content sent to many recipients, personalised via ``merge_info``."""
