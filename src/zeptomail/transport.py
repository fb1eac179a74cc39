"""
HTTP transport for the ZeptoMail API.

Holds the fixed per-client configuration (HTTP client, API key, base URL)
and turns one POST into either a typed envelope or a ZeptoMailError.
"""

from __future__ import annotations

import time
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from zeptomail.config import DEFAULT_AUTH_SCHEME, DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS
from zeptomail.errors import (
    NetworkError,
    SerializationError,
    UnexpectedResponseError,
    ZeptoMailApiError,
)
from zeptomail.models.responses import ApiError
from zeptomail.shared.logging import correlation_id_var, get_logger

logger = get_logger(__name__)

EnvelopeT = TypeVar("EnvelopeT", bound=BaseModel)

JSON_MEDIA_TYPE = "application/json"


class ZeptoMailTransport:
    """Async HTTP transport bound to one API key and base URL.

    Safe to share between concurrent tasks: the only shared state is the
    httpx connection pool. Nothing is retried.
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
        """Initialize the transport.

        Args:
            api_key: ZeptoMail Send Mail token.
            base_url: API base URL, including the version segment.
            timeout: Per-request timeout in seconds.
            auth_scheme: Scheme placed before the key in ``Authorization``.
            http_client: Optional injected client (tests, custom pooling).
            verify: TLS verification flag or CA bundle path.

        Raises:
            NetworkError: If the HTTP client cannot be built.
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._auth_scheme = auth_scheme
        self._owns_client = http_client is None

        if http_client is None:
            try:
                http_client = httpx.AsyncClient(
                    timeout=httpx.Timeout(timeout),
                    verify=verify,
                )
            except (OSError, ValueError) as e:
                raise NetworkError(
                    f"Could not build HTTP client: {e}",
                    original_error=e,
                ) from e
        self._http_client = http_client

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def is_closed(self) -> bool:
        return self._http_client.is_closed

    def url_for(self, endpoint: str) -> str:
        return f"{self._base_url}/{endpoint}"

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"{self._auth_scheme} {self._api_key}"}

    async def aclose(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client and not self._http_client.is_closed:
            await self._http_client.aclose()

    async def post_json(
        self,
        endpoint: str,
        payload: BaseModel,
        envelope: type[EnvelopeT],
    ) -> EnvelopeT:
        """POST ``payload`` as JSON and parse the reply as ``envelope``.

        Raises:
            SerializationError: If the payload cannot be encoded or a body
                cannot be decoded.
            NetworkError: On transport failure or timeout.
            ZeptoMailApiError: If the service returns an error envelope.
            UnexpectedResponseError: If a success status has no body.
        """
        try:
            content = payload.model_dump_json(by_alias=True, exclude_none=True)
        except PydanticSerializationError as e:
            logger.error(
                "ZeptoMail request encoding failed",
                extra={"endpoint": endpoint, "error": str(e)},
            )
            raise SerializationError(
                f"Could not encode {type(payload).__name__}: {e}",
                original_error=e,
            ) from e

        headers = {
            **self._auth_headers(),
            "Accept": JSON_MEDIA_TYPE,
            "Content-Type": JSON_MEDIA_TYPE,
        }

        token = correlation_id_var.set(getattr(payload, "client_reference", None))
        try:
            response = await self._send(endpoint, content=content.encode("utf-8"), headers=headers)
            return self._handle_response(endpoint, response, envelope)
        finally:
            correlation_id_var.reset(token)

    async def post_multipart(
        self,
        endpoint: str,
        data: dict[str, str],
        files: dict[str, Any],
        envelope: type[EnvelopeT],
    ) -> EnvelopeT:
        """POST a multipart form and parse the reply as ``envelope``.

        Only ``Authorization`` is set explicitly; httpx supplies the
        multipart content type with its boundary.
        """
        response = await self._send(
            endpoint,
            data=data,
            files=files,
            headers=self._auth_headers(),
        )
        return self._handle_response(endpoint, response, envelope)

    async def _send(self, endpoint: str, **kwargs: Any) -> httpx.Response:
        url = self.url_for(endpoint)
        start_time = time.monotonic()

        try:
            response = await self._http_client.post(url, **kwargs)
        except httpx.TimeoutException as e:
            logger.error(
                "ZeptoMail request timeout",
                extra={"endpoint": endpoint, "timeout_seconds": self._timeout},
            )
            raise NetworkError(
                f"Request to {endpoint} timed out after {self._timeout}s",
                original_error=e,
            ) from e
        except httpx.RequestError as e:
            logger.error(
                "ZeptoMail request failed",
                extra={"endpoint": endpoint, "error": str(e)},
            )
            raise NetworkError(
                f"Request to {endpoint} failed: {e!s}",
                original_error=e,
            ) from e

        logger.info(
            "ZeptoMail response received",
            extra={
                "endpoint": endpoint,
                "status_code": response.status_code,
                "latency_ms": (time.monotonic() - start_time) * 1000,
            },
        )
        return response

    def _handle_response(
        self,
        endpoint: str,
        response: httpx.Response,
        envelope: type[EnvelopeT],
    ) -> EnvelopeT:
        status_code = response.status_code
        body = response.text

        if response.is_success:
            if not body.strip():
                logger.error(
                    "ZeptoMail success response without body",
                    extra={"endpoint": endpoint, "status_code": status_code},
                )
                raise UnexpectedResponseError(
                    f"HTTP {status_code} from {endpoint} carried no body"
                )
            try:
                result = envelope.model_validate_json(body)
            except ValidationError as e:
                logger.error(
                    "ZeptoMail response decoding failed",
                    extra={"endpoint": endpoint, "status_code": status_code},
                )
                raise SerializationError(
                    f"Could not decode {envelope.__name__} from HTTP {status_code}: {e}",
                    original_error=e,
                    status_code=status_code,
                    body=body,
                ) from e

            logger.info(
                "ZeptoMail request succeeded",
                extra={
                    "endpoint": endpoint,
                    "status_code": status_code,
                    "zeptomail_request_id": getattr(result, "request_id", None),
                },
            )
            return result

        try:
            api_error = ApiError.model_validate_json(body)
        except ValidationError as e:
            logger.error(
                "ZeptoMail error response decoding failed",
                extra={"endpoint": endpoint, "status_code": status_code},
            )
            raise SerializationError(
                f"Could not decode error response from HTTP {status_code}: {e}",
                original_error=e,
                status_code=status_code,
                body=body,
            ) from e

        logger.warning(
            "ZeptoMail request rejected",
            extra={
                "endpoint": endpoint,
                "status_code": status_code,
                "error_code": api_error.code,
                "zeptomail_request_id": api_error.request_id,
            },
        )
        raise ZeptoMailApiError(api_error, status_code=status_code)

