"""Domain errors raised by the deposit callback.

The host runtime turns any of these into its own failure signal, so they carry
nothing but a message.
"""

from __future__ import annotations


class DepositError(Exception):
    """Base class for every failure surfaced by the callback."""


class UpstreamError(DepositError):
    """The deposit request came back flagged as failed."""

    def __init__(self, message: str = "Failed To deposit") -> None:
        super().__init__(message)


class InvalidResultError(DepositError):
    """The derived mint amount is zero or missing."""

    def __init__(self, message: str = "Invalid Mint Amount") -> None:
        super().__init__(message)


class InvalidArgumentsError(DepositError):
    """The positional argument list is too short."""


class EncodingError(DepositError, ValueError):
    """A value does not fit the requested ABI slot."""
