"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling the
  core to I/O libraries.
- Request/response shapes serialize cleanly for JSON export.

Note:
- These models describe *what* one invocation carries, not *how* it is sent.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Literal, Sequence

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.errors import InvalidArgumentsError

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


class DepositArguments(BaseModel):
    """The four positional arguments supplied by the host.

    None of the values influence control flow; they are carried through so the
    invocation can be reported and exported.
    """

    model_config = ConfigDict(frozen=True)

    chain_id: str = Field(..., description="Chain identifier.")
    input_token: str = Field(..., description="Address of the deposited token.")
    input_token_amount: str = Field(..., description="Deposited amount (raw units).")
    output_ctf: str = Field(..., description="Output token / CTF position identifier.")

    @classmethod
    def from_args(cls, args: Sequence[object]) -> "DepositArguments":
        """Read the first four elements positionally; extra elements are ignored."""

        if len(args) < 4:
            raise InvalidArgumentsError(
                f"Expected at least 4 arguments (chainId, inputToken, inputTokenAmount, outputCTF), got {len(args)}"
            )
        chain_id, input_token, input_token_amount, output_ctf = (str(a) for a in args[:4])
        return cls(
            chain_id=chain_id,
            input_token=input_token,
            input_token_amount=input_token_amount,
            output_ctf=output_ctf,
        )


class HttpRequest(BaseModel):
    """Outbound request descriptor, built once and submitted once."""

    url: str = Field(..., min_length=1, description="Absolute request URL.")
    method: HttpMethod = Field(default="GET", description="HTTP method.")


class HttpResponse(BaseModel):
    """Result of a request. Failures are reported through `error`, never raised."""

    error: bool = Field(default=False)
    data: Any = Field(default=None, description="Decoded JSON body.")
    status: int | None = Field(default=None)
    status_text: str | None = Field(default=None)
    headers: dict[str, str] = Field(default_factory=dict)
    message: str | None = Field(default=None, description="Failure description.")
    code: str | None = Field(default=None, description="Failure category (ERR_*).")


class InvocationRecord(BaseModel):
    """JSON-exportable summary of one callback run."""

    arguments: DepositArguments
    request: HttpRequest
    response_status: int | None = None
    response_error: bool = False
    mint_amount: int
    encoded_hex: str
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
