"""
Shared value types used by every outgoing request.

Addresses, recipients, attachments, custom MIME headers and inline images.
"""

from __future__ import annotations

import base64

from pydantic import BaseModel, ConfigDict, Field, RootModel


class EmailAddress(BaseModel):
    """A mailbox: address plus optional display name."""

    address: str = Field(min_length=1)
    name: str | None = None

    model_config = ConfigDict(frozen=True)


class Recipient(BaseModel):
    """A recipient with optional per-recipient merge fields."""

    email_address: EmailAddress
    merge_info: dict[str, str] | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(
        cls,
        address: str,
        name: str | None = None,
        merge_info: dict[str, str] | None = None,
    ) -> Recipient:
        return cls(
            email_address=EmailAddress(address=address, name=name),
            merge_info=merge_info,
        )


class Attachment(BaseModel):
    """File attached to an email.

    Either ``content`` (base64) or ``file_cache_key`` (a previous upload)
    carries the payload. Extension policy is enforced remotely.
    """

    name: str
    content: str | None = None
    mime_type: str | None = None
    file_cache_key: str | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_bytes(cls, name: str, data: bytes, mime_type: str | None = None) -> Attachment:
        """Build an inline attachment, base64-encoding ``data``."""
        return cls(
            name=name,
            content=base64.b64encode(data).decode("ascii"),
            mime_type=mime_type,
        )


class MimeHeaders(RootModel[dict[str, str]]):
    """Custom headers merged into the outgoing message."""

    model_config = ConfigDict(frozen=True)

    def __getitem__(self, key: str) -> str:
        return self.root[key]

    def __len__(self) -> int:
        return len(self.root)


class InlineImage(BaseModel):
    """Image embedded in the HTML body, referenced as ``cid:<content_id>``."""

    mime_type: str
    content: str
    content_id: str = Field(alias="cid")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_bytes(cls, content_id: str, data: bytes, mime_type: str) -> InlineImage:
        return cls(
            mime_type=mime_type,
            content=base64.b64encode(data).decode("ascii"),
            content_id=content_id,
        )
