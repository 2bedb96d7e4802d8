"""Deposit mint callback.

The host passes four positional arguments (chainId, inputToken,
inputTokenAmount, outputCTF). The callback fires one POST at the deposit
endpoint, checks the response's error flag and returns the mint amount as a
uint256 word. The response body is not read yet: the mint amount is the fixed
`MINT_AMOUNT` until the endpoint reports a real one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from adapters.http_client import HttpxRequester
from core.config import AppSettings
from core.domain.encoding import encode_uint256
from core.domain.errors import InvalidResultError, UpstreamError
from core.domain.models import DepositArguments, HttpRequest, HttpResponse, InvocationRecord
from core.interfaces.http import HttpRequester

logger = logging.getLogger(__name__)

# 100 tokens, 18 decimals.
MINT_AMOUNT = 100 * 10**18


@dataclass(frozen=True)
class DepositOutcome:
    """Everything one successful invocation produced."""

    arguments: DepositArguments
    request: HttpRequest
    response: HttpResponse
    mint_amount: int
    encoded: bytes

    def to_record(self) -> InvocationRecord:
        return InvocationRecord(
            arguments=self.arguments,
            request=self.request,
            response_status=self.response.status,
            response_error=self.response.error,
            mint_amount=self.mint_amount,
            encoded_hex="0x" + self.encoded.hex(),
        )


def build_deposit_request(settings: AppSettings) -> HttpRequest:
    return HttpRequest(url=settings.deposit_url, method="POST")


async def execute_deposit(
    args: Sequence[object],
    *,
    settings: AppSettings | None = None,
    requester: HttpRequester | None = None,
    mint_amount: int | None = MINT_AMOUNT,
) -> DepositOutcome:
    """Run the callback and keep the intermediate pieces.

    Raises:
    - `InvalidArgumentsError` when fewer than four arguments are given.
    - `UpstreamError` when the deposit request reports an error.
    - `InvalidResultError` when `mint_amount` is zero or None.
    """

    settings = settings or AppSettings()
    requester = requester or HttpxRequester(settings)

    arguments = DepositArguments.from_args(args)
    request = build_deposit_request(settings)

    logger.debug(
        "Deposit chain=%s token=%s amount=%s ctf=%s",
        arguments.chain_id,
        arguments.input_token,
        arguments.input_token_amount,
        arguments.output_ctf,
    )
    response = await requester.request(request)

    if response.error:
        logger.warning("Deposit request failed: %s", response.message or response.code)
        raise UpstreamError()

    if mint_amount is None or mint_amount == 0:
        raise InvalidResultError()

    return DepositOutcome(
        arguments=arguments,
        request=request,
        response=response,
        mint_amount=mint_amount,
        encoded=encode_uint256(mint_amount),
    )


async def deposit_callback(
    args: Sequence[object],
    *,
    settings: AppSettings | None = None,
    requester: HttpRequester | None = None,
) -> bytes:
    """Callback entry point: returns the encoded mint amount."""

    outcome = await execute_deposit(args, settings=settings, requester=requester)
    return outcome.encoded
