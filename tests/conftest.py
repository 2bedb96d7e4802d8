from __future__ import annotations

import pytest

from core.config import AppSettings
from core.domain.models import HttpRequest, HttpResponse


class FakeRequester:
    """In-memory `HttpRequester` that records every request."""

    def __init__(self, response: HttpResponse | None = None) -> None:
        self.response = response or HttpResponse(error=False, data={"id": 101}, status=201)
        self.calls: list[HttpRequest] = []

    async def request(self, request: HttpRequest) -> HttpResponse:
        self.calls.append(request)
        return self.response


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        deposit_url="https://deposit.test/posts",
        http_timeout_seconds=2.0,
        http_max_timeout_seconds=5.0,
    )


@pytest.fixture
def deposit_args() -> list[str]:
    return ["1", "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48", "1000000000000000000", "0xCTF01"]


@pytest.fixture
def make_requester():
    return FakeRequester
