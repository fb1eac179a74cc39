"""
ZeptoMail client factory.

Single source of truth for configuration:
- use ZeptoMailSettings (Pydantic Settings) which loads from OS env + .env
- never read raw os.getenv("ZEPTOMAIL_*") here
"""

from __future__ import annotations

import logging
from functools import lru_cache

import httpx

from zeptomail.client import ZeptoMailClient
from zeptomail.config import ZeptoMailSettings, get_settings
from zeptomail.shared.logging import get_logger, log_with_context

logger = get_logger(__name__)


def _mask(s: str, keep: int = 6) -> str:
    if not s:
        return ""
    if len(s) <= keep:
        return "*" * len(s)
    return f"{s[:keep]}***"


def create_client(
    settings: ZeptoMailSettings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> ZeptoMailClient:
    """Build a ZeptoMailClient from settings.

    Args:
        settings: Explicit settings; loaded from the environment if omitted.
        http_client: Optional injected HTTP client.

    Raises:
        ValueError: If no API key is configured.
    """
    cfg = settings or get_settings()
    if not cfg.api_key:
        raise ValueError("ZEPTOMAIL_API_KEY is not configured")

    log_with_context(
        logger,
        logging.INFO,
        "ZeptoMail config resolved",
        api_key=_mask(cfg.api_key),
        region=cfg.region.value,
        base_url=cfg.resolved_base_url,
        timeout_seconds=cfg.timeout_seconds,
    )

    return ZeptoMailClient.from_settings(cfg, http_client=http_client)


@lru_cache(maxsize=1)
def get_zeptomail_client() -> ZeptoMailClient:
    """Create and cache one client per process from the environment."""
    return create_client()
