from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from watson_core.logging import get_logger
from watson_core.settings import Settings
from watson_services.common.error_response import HttpError, classify
from watson_services.common.exceptions import ServiceResponseError, TransportError


def error_from_response(response: httpx.Response) -> HttpError:
    return classify(response.content, response.status_code)


def _request_context(response: httpx.Response) -> tuple[str | None, str | None]:
    # Responses built by hand carry no request; httpx raises instead of returning None.
    try:
        request = response.request
    except RuntimeError:
        return None, None
    return request.method, str(request.url)


def raise_for_response(response: httpx.Response) -> None:
    if response.is_success:
        return
    error = error_from_response(response)
    method, url = _request_context(response)
    get_logger(__name__).warning(
        "service_error_response",
        status_code=error.status_code,
        method=method,
        url=url,
        message=error.message,
    )
    raise ServiceResponseError(error)


@dataclass(frozen=True)
class HttpClientConfig:
    timeout_seconds: int
    base_url: str = ""
    api_version: str | None = None


class HttpClient:
    def __init__(self, config: HttpClientConfig, *, transport: httpx.BaseTransport | None = None):
        self.config = config
        self.client = httpx.Client(
            base_url=config.base_url,
            params={"version": config.api_version} if config.api_version else None,
            timeout=config.timeout_seconds,
            follow_redirects=True,
            trust_env=False,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        timeout_seconds: int | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> "HttpClient":
        config = HttpClientConfig(
            timeout_seconds=timeout_seconds or settings.request_timeout_seconds,
            base_url=settings.service_base_url,
            api_version=settings.api_version,
        )
        return cls(config, transport=transport)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *_exc_info: Any) -> None:
        self.close()

    def send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self.client.request(method, url, **kwargs)
        except httpx.RequestError as exc:
            get_logger(__name__).warning("service_transport_error", method=method, url=url, error=str(exc))
            raise TransportError(f"Request failed for URL: {url}") from exc
        raise_for_response(response)
        return response
