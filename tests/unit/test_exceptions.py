from __future__ import annotations

from watson_services.common.error_response import HttpError
from watson_services.common.exceptions import ServiceResponseError, WatsonError


def test_service_response_error_exposes_classified_fields() -> None:
    error = HttpError(status_code=404, message="not found", metadata={"errorID": "42"})

    exc = ServiceResponseError(error)

    assert isinstance(exc, WatsonError)
    assert exc.status_code == 404
    assert exc.message == "not found"
    assert exc.metadata == {"errorID": "42"}
    assert str(exc) == "HTTP 404: not found"


def test_service_response_error_without_message() -> None:
    exc = ServiceResponseError(HttpError(status_code=500))

    assert str(exc) == "HTTP 500: no error message"
    assert exc.metadata is None


def test_service_response_error_to_payload() -> None:
    exc = ServiceResponseError(HttpError(status_code=403, message="forbidden", metadata={"status": "403"}))

    payload = exc.to_payload().model_dump()

    assert payload == {
        "error": {"status_code": 403, "message": "forbidden", "metadata": {"status": "403"}}
    }
