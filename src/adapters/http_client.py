"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and redirects for outbound calls.
- Turns transport/HTTP failures into `HttpResponse(error=True)` so the
  callback only ever inspects one flag.
- Easy to test: pass an `httpx.MockTransport` instead of the network.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.domain.models import HttpRequest, HttpResponse
from core.interfaces.http import HttpRequester

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with safe defaults.

    The timeout never exceeds `http_max_timeout_seconds`; `transport` lets
    tests swap the network for a mock.
    """

    settings = settings or AppSettings()
    timeout = min(settings.http_timeout_seconds, settings.http_max_timeout_seconds)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        headers={
            "User-Agent": settings.user_agent,
            "Accept": "application/json, text/plain, */*",
        },
        transport=transport,
    )


class HttpxRequester(HttpRequester):
    """Send `HttpRequest` descriptors through httpx."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def request(self, request: HttpRequest) -> HttpResponse:
        logger.debug("%s %s", request.method, request.url)
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.request(request.method, request.url)
        except httpx.InvalidURL as exc:
            # Not an HTTPError subclass.
            logger.warning("Invalid request URL %s: %s", request.url, exc)
            return HttpResponse(error=True, message=str(exc), code="ERR_INVALID_URL")
        except httpx.TimeoutException as exc:
            logger.warning("Request to %s timed out", request.url)
            return HttpResponse(error=True, message=str(exc) or "timeout", code="ERR_TIMEOUT")
        except httpx.HTTPError as exc:
            logger.warning("Request to %s failed: %s", request.url, exc)
            return HttpResponse(error=True, message=str(exc), code="ERR_NETWORK")

        status = response.status_code
        headers = dict(response.headers)
        ok = 200 <= status < 300

        try:
            data = response.json() if response.content else None
        except ValueError:
            if ok:
                return HttpResponse(
                    error=True,
                    status=status,
                    status_text=response.reason_phrase,
                    headers=headers,
                    message="Response body is not valid JSON",
                    code="ERR_PARSE",
                )
            data = response.text

        if not ok:
            logger.warning("Request to %s returned HTTP %s", request.url, status)
            return HttpResponse(
                error=True,
                data=data,
                status=status,
                status_text=response.reason_phrase,
                headers=headers,
                message=f"Request failed with status code {status}",
                code="ERR_BAD_RESPONSE",
            )

        return HttpResponse(
            error=False,
            data=data,
            status=status,
            status_text=response.reason_phrase,
            headers=headers,
        )
