"""
ZeptoMail API client.

One coroutine per endpoint; each builds its request body and hands it to
the transport, which performs exactly one round trip.
"""

from __future__ import annotations

from types import TracebackType

import httpx

from zeptomail.config import (
    DEFAULT_AUTH_SCHEME,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    ZeptoMailSettings,
)
from zeptomail.models.email import BatchEmailRequest, EmailRequest
from zeptomail.models.file_cache import FileUploadRequest, FileUploadResponse
from zeptomail.models.responses import ApiResponse
from zeptomail.models.template import BatchTemplateEmailRequest, TemplateEmailRequest
from zeptomail.transport import ZeptoMailTransport

EMAIL_ENDPOINT = "email"
BATCH_EMAIL_ENDPOINT = "email/batch"
TEMPLATE_EMAIL_ENDPOINT = "email/template"
BATCH_TEMPLATE_EMAIL_ENDPOINT = "email/template/batch"
FILE_UPLOAD_ENDPOINT = "files"

# Filename given to the binary part of a cache upload
UPLOAD_PART_FILENAME = "upload"


class ZeptoMailClient:
    """Typed async client for the ZeptoMail transactional email API.

    Every operation either returns its envelope or raises one of
    ``ZeptoMailApiError``, ``NetworkError``, ``SerializationError`` or
    ``UnexpectedResponseError``.

    Example::

        async with ZeptoMailClient("api-key") as client:
            response = await client.send_email(request)
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        auth_scheme: str = DEFAULT_AUTH_SCHEME,
        http_client: httpx.AsyncClient | None = None,
        verify: bool | str = True,
    ) -> None:
        self._transport = ZeptoMailTransport(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            auth_scheme=auth_scheme,
            http_client=http_client,
            verify=verify,
        )

    @classmethod
    def from_settings(
        cls,
        settings: ZeptoMailSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> ZeptoMailClient:
        return cls(
            api_key=settings.api_key,
            base_url=settings.resolved_base_url,
            timeout=settings.timeout_seconds,
            auth_scheme=settings.auth_scheme,
            http_client=http_client,
        )

    @property
    def base_url(self) -> str:
        return self._transport.base_url

    @property
    def timeout(self) -> float:
        return self._transport.timeout

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> ZeptoMailClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def send_email(self, email_request: EmailRequest) -> ApiResponse:
        """Send a single email.

        Args:
            email_request: Sender, recipients, subject, bodies and options.

        Returns:
            The success envelope, including the ``request_id``.
        """
        return await self._transport.post_json(EMAIL_ENDPOINT, email_request, ApiResponse)

    async def send_batch_email(self, batch_email_request: BatchEmailRequest) -> ApiResponse:
        """Send the same email to many recipients.

        Each recipient's ``merge_info`` personalises their copy.
        """
        return await self._transport.post_json(
            BATCH_EMAIL_ENDPOINT, batch_email_request, ApiResponse
        )

    async def send_template_email(
        self,
        template_email_request: TemplateEmailRequest,
    ) -> ApiResponse:
        """Send an email rendered from a stored template."""
        return await self._transport.post_json(
            TEMPLATE_EMAIL_ENDPOINT, template_email_request, ApiResponse
        )

    async def send_batch_template_email(
        self,
        batch_template_email_request: BatchTemplateEmailRequest,
    ) -> ApiResponse:
        return await self._transport.post_json(
            BATCH_TEMPLATE_EMAIL_ENDPOINT, batch_template_email_request, ApiResponse
        )

    async def upload_file_to_cache(
        self,
        file_upload_request: FileUploadRequest,
    ) -> FileUploadResponse:
        """Upload a file to the ZeptoMail file cache.

        The form has three parts: ``name``, ``content_type`` and the binary
        ``data``. The returned ``file_cache_key`` can be used later as an
        attachment reference.
        """
        return await self._transport.post_multipart(
            FILE_UPLOAD_ENDPOINT,
            data={
                "name": file_upload_request.name,
                "content_type": file_upload_request.content_type,
            },
            files={
                "data": (
                    UPLOAD_PART_FILENAME,
                    file_upload_request.data,
                    "application/octet-stream",
                ),
            },
            envelope=FileUploadResponse,
        )
