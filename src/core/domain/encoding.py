"""ABI-style encoders for callback return values.

Every numeric value is packed into a single 32-byte big-endian word, which is
what the on-chain consumer decodes.
"""

from __future__ import annotations

from core.domain.errors import EncodingError

WORD_SIZE = 32
UINT256_MAX = 2**256 - 1
INT256_MIN = -(2**255)
INT256_MAX = 2**255 - 1


def _as_integer(value: object) -> int:
    # bool is an int subclass; a flag is never a valid amount.
    if isinstance(value, bool):
        raise EncodingError(f"Expected an integer, got bool: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise EncodingError(f"Expected a whole number, got {value!r}")
        return int(value)
    raise EncodingError(f"Expected an integer, got {type(value).__name__}")


def encode_uint256(value: object) -> bytes:
    """Encode a non-negative integer as a 32-byte big-endian word."""

    number = _as_integer(value)
    if number < 0:
        raise EncodingError(f"uint256 cannot be negative: {number}")
    if number > UINT256_MAX:
        raise EncodingError("Value exceeds uint256 range")
    return number.to_bytes(WORD_SIZE, "big")


def encode_int256(value: object) -> bytes:
    """Encode a signed integer as a 32-byte two's complement word."""

    number = _as_integer(value)
    if number < INT256_MIN or number > INT256_MAX:
        raise EncodingError("Value exceeds int256 range")
    return number.to_bytes(WORD_SIZE, "big", signed=True)


def decode_uint256(data: bytes) -> int:
    if len(data) != WORD_SIZE:
        raise EncodingError(f"Expected {WORD_SIZE} bytes, got {len(data)}")
    return int.from_bytes(data, "big")
