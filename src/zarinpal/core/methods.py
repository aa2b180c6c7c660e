"""
Request payloads for the three Zarinpal endpoints.

Each request type knows its wire path, the result type its response decodes
to, and how to serialize itself. ``merchant_id`` is optional on every request;
the client fills it from its configuration only when it was left unset.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Generic, Optional, Sequence, Type, TypeVar

from .models import Currency, Metadata, Wage
from .results import PaymentRequest, PaymentVerification, UnverifiedPayments

__all__ = [
    "ApiMethod",
    "RequestPayment",
    "UnverifiedRequests",
    "VerifyPayment",
]

R = TypeVar("R")


@dataclass
class ApiMethod(ABC, Generic[R]):
    """Base class for request payloads; ``R`` is the type the response decodes to."""

    PATH: ClassVar[str]
    result_type: ClassVar[Type[Any]]

    def set_merchant_id_if_needed(self, merchant_id: str) -> None:
        if getattr(self, "merchant_id", None) is None:
            self.merchant_id = merchant_id

    @abstractmethod
    def to_payload(self) -> Dict[str, Any]:
        ...


@dataclass
class RequestPayment(ApiMethod[PaymentRequest]):
    """
    Start a new payment.

    Only ``amount``, ``callback_url`` and ``description`` are required.
    ``currency`` and ``wages`` are left out of the body when unset; ``metadata``
    is always sent, as an empty object if none of its fields are set.
    """

    PATH: ClassVar[str] = "pg/v4/payment/request.json"
    result_type: ClassVar[Type[PaymentRequest]] = PaymentRequest

    amount: int
    callback_url: str
    description: str
    merchant_id: Optional[str] = None
    currency: Optional[Currency] = None
    metadata: Metadata = field(default_factory=Metadata)
    wages: Optional[Sequence[Wage]] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        if self.merchant_id is not None:
            payload["merchant_id"] = self.merchant_id
        if self.currency is not None:
            payload["currency"] = Currency(self.currency).value
        payload["amount"] = self.amount
        payload["callback_url"] = self.callback_url
        payload["description"] = self.description
        payload["metadata"] = self.metadata.to_payload()
        if self.wages is not None:
            payload["wages"] = [wage.to_payload() for wage in self.wages]
        return payload


@dataclass
class VerifyPayment(ApiMethod[PaymentVerification]):
    """Verify a payment once the payer returns to ``callback_url``."""

    PATH: ClassVar[str] = "pg/v4/payment/verify.json"
    result_type: ClassVar[Type[PaymentVerification]] = PaymentVerification

    amount: int
    authority: str
    merchant_id: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        if self.merchant_id is not None:
            payload["merchant_id"] = self.merchant_id
        payload["amount"] = self.amount
        payload["authority"] = self.authority
        return payload


@dataclass
class UnverifiedRequests(ApiMethod[UnverifiedPayments]):
    """List the 100 most recent payment requests that were never verified."""

    PATH: ClassVar[str] = "pg/v4/payment/unVerified.json"
    result_type: ClassVar[Type[UnverifiedPayments]] = UnverifiedPayments

    merchant_id: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        if self.merchant_id is None:
            return {}
        return {"merchant_id": self.merchant_id}
