"""Outbound request contract.

Why Protocol:
- Structural contract (duck typing) with no rigid inheritance.
- The deposit service can be exercised with an in-memory requester in tests
  while production uses the httpx adapter.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import HttpRequest, HttpResponse


@runtime_checkable
class HttpRequester(Protocol):
    """Minimal contract for issuing one request.

    Design rules:
    - `request` is async because it performs network I/O.
    - Transport and HTTP failures come back as `HttpResponse(error=True)`.
    """

    async def request(self, request: HttpRequest) -> HttpResponse:
        """Send `request` and return the normalized response."""

        ...
