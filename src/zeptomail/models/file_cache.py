"""
File cache upload request and response.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from zeptomail.models.common import Attachment


class FileUploadRequest(BaseModel):
    """Raw file sent as a multipart form to ``files``."""

    name: str
    content_type: str
    data: bytes

    model_config = ConfigDict(frozen=True)


class FileUploadResponse(BaseModel):
    """Result of a cache upload.

    ``file_cache_key`` can be handed back later as
    ``Attachment.file_cache_key`` instead of inline content.
    """

    file_cache_key: str
    message: str
    code: str

    model_config = ConfigDict(frozen=True)

    def as_attachment(self, name: str) -> Attachment:
        return Attachment(name=name, file_cache_key=self.file_cache_key)
