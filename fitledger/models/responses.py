from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer


class OperationStatus(BaseModel):
    """Normalized status payload returned by mutation endpoints."""

    status: str = Field(..., description="Short status indicator for the operation outcome.")
    path: Optional[str] = Field(
        None, description="Store path affected by the operation, when relevant."
    )
    created: Optional[bool] = Field(
        None, description="Whether the operation created a node that did not exist."
    )
    model_config = ConfigDict(json_schema_extra={"required": ["status"]})

    @model_serializer(mode="wrap")
    def _serialize(self, handler):  # type: ignore[override]
        payload = handler(self)
        for key in ("path", "created"):
            if payload.get(key) is None:
                payload.pop(key, None)
        return payload


class RecordedDatesResponse(BaseModel):
    """Dates holding a ledger record for the current user."""

    user: str
    dates: List[str]
