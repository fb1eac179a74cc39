"""
Request and response value types for the ZeptoMail API.
"""

from zeptomail.models.common import (
    Attachment,
    EmailAddress,
    InlineImage,
    MimeHeaders,
    Recipient,
)
from zeptomail.models.email import BatchEmailRequest, EmailRequest
from zeptomail.models.file_cache import FileUploadRequest, FileUploadResponse
from zeptomail.models.responses import ApiError, ApiErrorDetail, ApiResponse, SuccessData
from zeptomail.models.template import BatchTemplateEmailRequest, TemplateEmailRequest

__all__ = [
    "ApiError",
    "ApiErrorDetail",
    "ApiResponse",
    "Attachment",
    "BatchEmailRequest",
    "BatchTemplateEmailRequest",
    "EmailAddress",
    "EmailRequest",
    "FileUploadRequest",
    "FileUploadResponse",
    "InlineImage",
    "MimeHeaders",
    "Recipient",
    "SuccessData",
    "TemplateEmailRequest",
]
