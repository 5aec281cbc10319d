from __future__ import annotations

from typing import Any

from watson_core.schemas.errors import ErrorBody, ErrorResponse
from watson_services.common.error_response import HttpError


class WatsonError(Exception):
    """Base exception for service call failures."""


class TransportError(WatsonError):
    """Raised when a request never produced an HTTP response."""


class ServiceResponseError(WatsonError):
    """Raised when a service answers with a non-2xx status."""

    def __init__(self, error: HttpError) -> None:
        super().__init__(f"HTTP {error.status_code}: {error.message or 'no error message'}")
        self.error = error

    @property
    def status_code(self) -> int:
        return self.error.status_code

    @property
    def message(self) -> str | None:
        return self.error.message

    @property
    def metadata(self) -> dict[str, Any] | None:
        return self.error.metadata

    def to_payload(self) -> ErrorResponse:
        return ErrorResponse(
            error=ErrorBody(
                status_code=self.error.status_code,
                message=self.error.message,
                metadata=self.error.metadata,
            )
        )
