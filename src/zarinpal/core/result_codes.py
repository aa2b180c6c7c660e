"""
Result codes returned by the Zarinpal API.

Error codes are stored with the negative sign the API documents (``-9``,
``-30`` ... ``-54``). Positive values in that range are not treated as
aliases: they decode to :class:`UnknownResultCode` like any other unmapped
integer, so ``encode_result_code(decode_result_code(x)) == x`` holds for
every integer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

__all__ = [
    "AnyResultCode",
    "ResultCode",
    "UnknownResultCode",
    "decode_result_code",
    "encode_result_code",
]


class ResultCode(Enum):
    VALIDATION = (-9, "Validation error.")
    INVALID_TERMINAL_INFO = (
        -10,
        "Terminal is not valid, please check merchant_id or ip address.",
    )
    INACTIVE_TERMINAL = (-11, "Terminal is not active, please contact our support team.")
    TOO_MANY_ATTEMPTS = (-12, "Too many attempts, please try again later.")
    SUSPENDED_TERMINAL = (-15, "Terminal user is suspended, please contact our support team.")
    TERMINAL_LEVEL_TOO_LOW = (-16, "Terminal user level is not valid.")
    TERMINAL_BLUE_LEVEL_RESTRICTION = (-17, "Terminal user level is restricted to blue level.")
    SUCCESS = (100, "Success.")
    FLOATING_WAGES_NOT_ALLOWED = (-30, "Terminal does not allow floating wages.")
    TERMINAL_CANNOT_ACCEPT_WAGES = (
        -31,
        "Terminal does not accept wages, please add a default bank account in the panel.",
    )
    FLOATING_WAGES_OVER_MAX_AMOUNT = (-32, "Total floating wages exceed the max amount.")
    INVALID_FLOATING_WAGES = (-33, "Floating wages are not valid.")
    FIXED_WAGES_OVER_MAX_AMOUNT = (-34, "Total fixed wages exceed the max amount.")
    TOO_MANY_FLOATING_WAGE_PARTS = (-35, "Floating wages reached the limit of parts.")
    FLOATING_WAGES_AMOUNT_TOO_LOW = (-36, "The minimum amount for floating wages is 10,000 Rials.")
    ONE_OR_MORE_IBANS_INACTIVE = (-37, "One or more wage ibans are inactive on the bank side.")
    IBAN_NOT_SET_IN_SHAPARAK = (-38, "Wages need the iban to be set in shaparak.")
    ERROR_IN_WAGES = (-39, "Wages have an error.")
    INVALID_EXPIRE_IN = (-40, "Invalid extra params, expire_in is not valid.")
    SESSION_AMOUNT_MISMATCH = (-50, "Session is not valid, amounts are not the same.")
    SESSION_NO_ACTIVE_PAYMENT = (-51, "Session is not valid, no active paid try.")
    INVALID_SESSION = (-52, "Unexpected error, please contact our support team.")
    SESSION_MERCHANT_MISMATCH = (-53, "Session does not belong to this merchant_id.")
    INVALID_AUTHORITY = (-54, "Invalid authority.")
    VERIFIED = (101, "Already verified.")

    def __new__(cls, code: int, description: str) -> "ResultCode":
        member = object.__new__(cls)
        member._value_ = code
        member.description = description
        return member

    @property
    def is_success(self) -> bool:
        return self in (ResultCode.SUCCESS, ResultCode.VERIFIED)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"{self.value} ({self.description})"


@dataclass(frozen=True)
class UnknownResultCode:
    """A wire code missing from :class:`ResultCode`."""

    value: int

    @property
    def description(self) -> str:
        return f"Unknown result code: {self.value}"

    @property
    def is_success(self) -> bool:
        return False

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"{self.value} ({self.description})"


AnyResultCode = Union[ResultCode, UnknownResultCode]


def decode_result_code(value: int) -> AnyResultCode:
    """Map a wire integer to its :class:`ResultCode`, never failing."""
    try:
        return ResultCode(value)
    except ValueError:
        return UnknownResultCode(value)


def encode_result_code(code: AnyResultCode) -> int:
    return code.value
