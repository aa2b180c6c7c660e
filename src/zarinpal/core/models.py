"""
Value types shared by request payloads and response payloads.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Type, Union

from .errors import EnvelopeDecodeError

__all__ = [
    "Currency",
    "FeeType",
    "Metadata",
    "Wage",
    "require_field",
]

_JSON_TYPE_NAMES = {
    str: "a string",
    int: "an integer",
    list: "a list",
    dict: "an object",
}


def require_field(
    payload: Mapping[str, Any],
    key: str,
    expected: Union[Type[Any], Tuple[Type[Any], ...]],
) -> Any:
    """
    Return ``payload[key]`` after checking its JSON type.

    ``bool`` is rejected where an integer is expected even though Python
    treats it as one.
    """
    if key not in payload:
        raise EnvelopeDecodeError(f"Missing required field '{key}'", payload=payload)
    value = payload[key]
    if isinstance(value, bool) and expected is int:
        raise EnvelopeDecodeError(f"Field '{key}' must be an integer", payload=payload)
    if not isinstance(value, expected):
        label = _JSON_TYPE_NAMES.get(expected, str(expected))
        raise EnvelopeDecodeError(
            f"Field '{key}' must be {label}, got {type(value).__name__}",
            payload=payload,
        )
    return value


class Currency(Enum):
    """Currency of a payment request. The API assumes ``IRR`` when omitted."""

    IRR = "IRR"
    IRT = "IRT"


class FeeType(Enum):
    """Who pays the gateway fee."""

    PAYER = "Payer"
    MERCHANT = "Merchant"
    UNKNOWN = "Unknown"

    @property
    def is_payer(self) -> bool:
        return self is FeeType.PAYER

    @property
    def is_merchant(self) -> bool:
        return self is FeeType.MERCHANT

    @classmethod
    def from_wire(cls, value: Any) -> "FeeType":
        try:
            return cls(value)
        except ValueError as exc:
            raise EnvelopeDecodeError(f"Unsupported fee_type {value!r}") from exc


@dataclass(frozen=True)
class Metadata:
    """
    Optional payer details attached to a payment request.

    ``card_pan`` restricts the payment to that single card.
    """

    mobile: Optional[str] = None
    email: Optional[str] = None
    order_id: Optional[str] = None
    card_pan: Optional[str] = None

    def to_payload(self) -> Dict[str, str]:
        payload: Dict[str, str] = {}
        for field_name in ("mobile", "email", "order_id", "card_pan"):
            value = getattr(self, field_name)
            if value is not None:
                payload[field_name] = value
        return payload


@dataclass(frozen=True)
class Wage:
    """One split of a payment, paid to ``iban``."""

    iban: str
    amount: int
    description: str

    def to_payload(self) -> Dict[str, Any]:
        return {
            "iban": self.iban,
            "amount": self.amount,
            "description": self.description,
        }

    @classmethod
    def from_response(cls, payload: Any) -> "Wage":
        if not isinstance(payload, dict):
            raise EnvelopeDecodeError("Wage entries must be objects", payload=payload)
        return cls(
            iban=require_field(payload, "iban", str),
            amount=require_field(payload, "amount", int),
            description=require_field(payload, "description", str),
        )
