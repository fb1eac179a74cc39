"""
Typed async client for the ZeptoMail transactional email API.

Five operations: send email, send batch email, send template email, send
batch template email and upload a file to the file cache.
"""

from zeptomail.client import ZeptoMailClient
from zeptomail.config import Region, ZeptoMailSettings
from zeptomail.errors import (
    NetworkError,
    SerializationError,
    UnexpectedResponseError,
    ZeptoMailApiError,
    ZeptoMailError,
)
from zeptomail.models import (
    ApiError,
    ApiErrorDetail,
    ApiResponse,
    Attachment,
    BatchEmailRequest,
    BatchTemplateEmailRequest,
    EmailAddress,
    EmailRequest,
    FileUploadRequest,
    FileUploadResponse,
    InlineImage,
    MimeHeaders,
    Recipient,
    SuccessData,
    TemplateEmailRequest,
)

__version__ = "0.1.0"

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
    "NetworkError",
    "Recipient",
    "Region",
    "SerializationError",
    "SuccessData",
    "TemplateEmailRequest",
    "UnexpectedResponseError",
    "ZeptoMailApiError",
    "ZeptoMailClient",
    "ZeptoMailError",
    "ZeptoMailSettings",
]
