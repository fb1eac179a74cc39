"""
Success and error envelopes returned by the API.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class SuccessData(BaseModel):
    """One entry of the ``data`` list in a success envelope."""

    code: str
    message: str
    additional_info: list[str] | None = None

    model_config = ConfigDict(frozen=True)


class ApiResponse(BaseModel):
    """Success envelope for the four email endpoints."""

    data: list[SuccessData]
    message: str
    request_id: str
    object: str | None = None

    model_config = ConfigDict(frozen=True)


class ApiErrorDetail(BaseModel):
    """Per-field error; ``target`` names the offending request field."""

    code: str
    message: str
    target: str | None = None

    model_config = ConfigDict(frozen=True)


class ApiError(BaseModel):
    """Error envelope returned with a non-2xx status."""

    code: str
    message: str
    details: list[ApiErrorDetail] | None = None
    request_id: str | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def unwrap_error_key(cls, data: Any) -> Any:
        # The live API nests the envelope as {"error": {...}}.
        if isinstance(data, dict) and "code" not in data and isinstance(data.get("error"), dict):
            return data["error"]
        return data
