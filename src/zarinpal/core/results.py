"""
Typed payloads decoded from the ``data`` branch of a successful response.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Protocol, Tuple

from .errors import EnvelopeDecodeError
from .models import FeeType, Wage, require_field
from .result_codes import AnyResultCode, ResultCode, decode_result_code

if TYPE_CHECKING:
    from .client import ZarinpalClient

__all__ = [
    "ApiResult",
    "GATEWAY_URL_TEMPLATE",
    "PaymentRequest",
    "PaymentVerification",
    "UnverifiedAuthority",
    "UnverifiedPayments",
]

GATEWAY_URL_TEMPLATE = "https://www.zarinpal.com/pg/StartPay/{authority}"

_NUMERIC_CODE = re.compile(r"[+-]?[0-9]+")


class ApiResult(Protocol):
    """What every successful response exposes, whatever its wire shape."""

    @property
    def code(self) -> AnyResultCode:
        ...

    @property
    def message(self) -> str:
        ...


def _decode_code(payload: Mapping[str, Any]) -> AnyResultCode:
    return decode_result_code(require_field(payload, "code", int))


@dataclass(frozen=True)
class PaymentRequest:
    """Result of a successful payment request."""

    code: AnyResultCode
    message: str
    authority: str
    fee_type: FeeType
    fee: int

    @property
    def gateway_url(self) -> str:
        """Where the payer is redirected to complete this payment."""
        return GATEWAY_URL_TEMPLATE.format(authority=self.authority)

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "PaymentRequest":
        return cls(
            code=_decode_code(payload),
            message=require_field(payload, "message", str),
            authority=require_field(payload, "authority", str),
            fee_type=FeeType.from_wire(require_field(payload, "fee_type", str)),
            fee=require_field(payload, "fee", int),
        )


@dataclass(frozen=True)
class PaymentVerification:
    """
    Result of a successful verification.

    Code ``101`` (:attr:`ResultCode.VERIFIED`) means the payment had already
    been verified; see :attr:`already_verified`.
    """

    code: AnyResultCode
    message: str
    card_hash: str
    card_pan: str
    ref_id: int
    fee_type: FeeType
    fee: int
    wages: Optional[Tuple[Wage, ...]] = None

    @property
    def already_verified(self) -> bool:
        return self.code is ResultCode.VERIFIED

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "PaymentVerification":
        wages: Optional[Tuple[Wage, ...]] = None
        if payload.get("wages") is not None:
            wages = tuple(
                Wage.from_response(item) for item in require_field(payload, "wages", list)
            )

        return cls(
            code=_decode_code(payload),
            message=require_field(payload, "message", str),
            card_hash=require_field(payload, "card_hash", str),
            card_pan=require_field(payload, "card_pan", str),
            ref_id=require_field(payload, "ref_id", int),
            fee_type=FeeType.from_wire(require_field(payload, "fee_type", str)),
            fee=require_field(payload, "fee", int),
            wages=wages,
        )


@dataclass(frozen=True)
class UnverifiedAuthority:
    """A payment request that was never verified."""

    authority: str
    amount: int
    callback_url: str
    referer: str
    date: str

    def verify(self, client: "ZarinpalClient") -> PaymentVerification:
        """Verify this payment using its own authority and amount."""
        return client.verify_payment(self.authority, self.amount)

    @classmethod
    def from_response(cls, payload: Any) -> "UnverifiedAuthority":
        if not isinstance(payload, dict):
            raise EnvelopeDecodeError("Authority entries must be objects", payload=payload)
        return cls(
            authority=require_field(payload, "authority", str),
            amount=require_field(payload, "amount", int),
            callback_url=require_field(payload, "callback_url", str),
            referer=require_field(payload, "referer", str),
            date=require_field(payload, "date", str),
        )


@dataclass(frozen=True)
class UnverifiedPayments:
    """Up to the 100 most recent unverified payment requests."""

    code: AnyResultCode
    message: str
    authorities: Tuple[UnverifiedAuthority, ...]

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "UnverifiedPayments":
        # This endpoint sends its code as a numeric string.
        raw_code = require_field(payload, "code", str)
        # ASCII digits only: int() would also take "1_00" or Arabic-Indic digits.
        if not _NUMERIC_CODE.fullmatch(raw_code):
            raise EnvelopeDecodeError(
                f"Field 'code' must be a numeric string, got {raw_code!r}",
                payload=payload,
            )
        code = int(raw_code)

        authorities: List[UnverifiedAuthority] = [
            UnverifiedAuthority.from_response(item)
            for item in require_field(payload, "authorities", list)
        ]
        return cls(
            code=decode_result_code(code),
            message=require_field(payload, "message", str),
            authorities=tuple(authorities),
        )
