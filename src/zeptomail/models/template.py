"""
Request bodies for the template endpoints.

``email/template`` and ``email/template/batch``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from zeptomail.models.common import Attachment, EmailAddress, MimeHeaders, Recipient


class _BaseTemplateEmailRequest(BaseModel):
    template_key: str
    bounce_address: str | None = None
    sender: EmailAddress = Field(alias="from")
    recipients: list[Recipient] = Field(alias="to")
    reply_to: list[EmailAddress] | None = None
    track_clicks: bool | None = None
    track_opens: bool | None = None
    client_reference: str | None = None
    mime_headers: MimeHeaders | None = None
    attachments: list[Attachment] | None = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class TemplateEmailRequest(_BaseTemplateEmailRequest):
    """Email rendered remotely from ``template_key``.

    ``merge_info`` holds the top-level template variables.
    """

    merge_info: dict[str, str] | None = None


class BatchTemplateEmailRequest(_BaseTemplateEmailRequest):
    """Template email to many recipients, each with their own ``merge_info``."""
