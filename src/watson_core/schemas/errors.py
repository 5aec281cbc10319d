from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ErrorBody(BaseModel):
    status_code: int
    message: str | None = None
    metadata: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    error: ErrorBody
