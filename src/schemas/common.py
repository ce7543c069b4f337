# This file defines shared schema pieces reused by every storefront service.
# It exists so the `{success, message, data}` envelope and request serialization stay consistent.
# Request models drop unset optional fields so the backend never sees fabricated nulls or zeros.
# Response models ignore unknown fields so additive backend changes do not break older clients.

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from src.client.errors import ApiUnavailableError

DataT = TypeVar("DataT")


class RequestModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    def to_payload(self) -> dict[str, Any]:
        """Serialize for the wire, leaving out optional fields that were not supplied."""

        return self.model_dump(mode="json", exclude_unset=True, exclude_none=True)


class ResponseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ApiResponse(BaseModel, Generic[DataT]):
    model_config = ConfigDict(extra="ignore")

    success: bool
    message: str
    data: DataT | None = None


def parse_envelope(payload: dict[str, Any], data_model: Any) -> ApiResponse[Any]:
    """Validate a raw JSON envelope into `ApiResponse[data_model]`."""

    try:
        return ApiResponse[data_model].model_validate(payload)
    except ValidationError as exc:
        raise ApiUnavailableError(f"Unexpected response envelope: {exc}") from exc


def failure_envelope(message: str) -> ApiResponse[Any]:
    return ApiResponse[Any](success=False, message=message)
