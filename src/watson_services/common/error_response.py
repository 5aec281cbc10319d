from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

# Keys tried, in order, by the fallback shape before any lone string value.
FALLBACK_MESSAGE_KEYS = ("Error", "message", "errorMessage", "error_message", "description", "msg")

Extracted = tuple[str | None, dict[str, Any] | None]


@dataclass(frozen=True)
class HttpError:
    """Classified failure of a single service call.

    Compared by value but not hashable, since ``metadata`` is a plain dict.
    """

    status_code: int
    message: str | None = None
    metadata: dict[str, Any] | None = None

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class ErrorShape:
    """One known error-body layout: a predicate plus its extractor."""

    name: str
    matches: Callable[[dict[str, Any]], bool]
    extract: Callable[[dict[str, Any]], Extracted]


def _parse_body(payload: bytes) -> dict[str, Any] | None:
    if not payload:
        return None
    try:
        body = json.loads(payload)
    except (ValueError, RecursionError):
        return None
    if not isinstance(body, dict):
        return None
    return body


def _has_status_info(body: dict[str, Any]) -> bool:
    return isinstance(body.get("status"), str) and isinstance(body.get("statusInfo"), str)


def _extract_status_info(body: dict[str, Any]) -> Extracted:
    return body["statusInfo"], dict(body)


def _has_nested_error(body: dict[str, Any]) -> bool:
    error = body.get("error")
    return (
        isinstance(error, dict)
        and isinstance(error.get("description"), str)
        and isinstance(error.get("error_id"), str)
    )


def _extract_nested_error(body: dict[str, Any]) -> Extracted:
    error = body["error"]
    metadata = {("errorID" if key == "error_id" else key): value for key, value in error.items()}
    return error["description"], metadata


def _has_error_string(body: dict[str, Any]) -> bool:
    return isinstance(body.get("error"), str)


def _extract_error_string(body: dict[str, Any]) -> Extracted:
    return body["error"], None


def _fallback_message(body: dict[str, Any]) -> str | None:
    for key in FALLBACK_MESSAGE_KEYS:
        value = body.get(key)
        if isinstance(value, str):
            return value
    string_values = [value for value in body.values() if isinstance(value, str)]
    if len(string_values) == 1:
        return string_values[0]
    return None


def _has_single_string(body: dict[str, Any]) -> bool:
    return _fallback_message(body) is not None


def _extract_single_string(body: dict[str, Any]) -> Extracted:
    return _fallback_message(body), None


# Priority order matters for payloads that fit more than one layout.
ERROR_SHAPES: tuple[ErrorShape, ...] = (
    ErrorShape("status_statusinfo", _has_status_info, _extract_status_info),
    ErrorShape("nested_error", _has_nested_error, _extract_nested_error),
    ErrorShape("error_string", _has_error_string, _extract_error_string),
    ErrorShape("single_string", _has_single_string, _extract_single_string),
)


def match_shape(body: dict[str, Any]) -> ErrorShape | None:
    for shape in ERROR_SHAPES:
        if shape.matches(body):
            return shape
    return None


def classify(payload: bytes, status_code: int) -> HttpError:
    """Turn a failed response body into an ``HttpError``.

    Never raises: empty, non-JSON or unrecognized bodies keep the status code
    and leave ``message`` and ``metadata`` as ``None``.
    """
    body = _parse_body(payload)
    if body is None:
        return HttpError(status_code=status_code)

    shape = match_shape(body)
    if shape is None:
        return HttpError(status_code=status_code)

    message, metadata = shape.extract(body)
    return HttpError(status_code=status_code, message=message, metadata=metadata)
