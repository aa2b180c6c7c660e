"""
HTTP client helpers for the Zarinpal payment gateway.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Dict, Optional, Sequence

import requests

from .config import ClientConfig
from .envelope import decode_envelope
from .errors import ApiError, TransportError
from .methods import ApiMethod, R, RequestPayment, UnverifiedRequests, VerifyPayment
from .models import Currency, Metadata, Wage
from .results import PaymentRequest, PaymentVerification, UnverifiedPayments

__all__ = [
    "ZarinpalClient",
    "request_payment",
    "send_method",
    "unverified_requests",
    "verify_payment",
]


def _post_json(
    session: requests.Session,
    url: str,
    body: Dict[str, Any],
    *,
    timeout: float,
) -> bytes:
    # Error envelopes arrive with 4xx statuses, so the body is returned
    # whatever the status and left to the envelope decoder.
    try:
        response = session.post(url, json=body, timeout=timeout)
    except requests.RequestException as exc:
        raise TransportError(f"Request to {url} failed: {exc}", original=exc) from exc

    logging.debug("Zarinpal responded to %s with HTTP %s", url, response.status_code)
    return response.content


def send_method(
    session: requests.Session,
    config: ClientConfig,
    method: ApiMethod[R],
) -> R:
    """
    Send ``method`` and decode the response into its result type.

    Raises :class:`ApiError` when the API answers with an error envelope,
    :class:`TransportError` when the HTTP client fails, and
    :class:`EnvelopeDecodeError` when the body cannot be decoded.

    ``method`` itself is left untouched; the merchant id default is applied
    to a copy.
    """
    url = config.url_for(method.PATH)
    method = dataclasses.replace(method)
    method.set_merchant_id_if_needed(config.merchant_id)

    logging.info("Submitting %s to %s", type(method).__name__, url)
    raw = _post_json(session, url, method.to_payload(), timeout=config.timeout_seconds)

    try:
        result = decode_envelope(raw, method.result_type)
    except ApiError as exc:
        logging.warning("Zarinpal rejected %s: %s", type(method).__name__, exc)
        raise

    logging.debug("%s succeeded with code %s", type(method).__name__, result.code)
    return result


def request_payment(
    session: requests.Session,
    config: ClientConfig,
    method: RequestPayment,
) -> PaymentRequest:
    return send_method(session, config, method)


def verify_payment(
    session: requests.Session,
    config: ClientConfig,
    method: VerifyPayment,
) -> PaymentVerification:
    return send_method(session, config, method)


def unverified_requests(
    session: requests.Session,
    config: ClientConfig,
    method: Optional[UnverifiedRequests] = None,
) -> UnverifiedPayments:
    return send_method(session, config, method or UnverifiedRequests())


class ZarinpalClient:
    """
    Thin convenience wrapper around the gateway endpoints.

    The client keeps no per-call state; one instance can be shared by
    concurrent callers as long as the injected session can.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()

    @property
    def merchant_id(self) -> str:
        return self.config.merchant_id

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def send(self, method: ApiMethod[R]) -> R:
        return send_method(self.session, self.config, method)

    def request_payment(
        self,
        amount: int,
        callback_url: str,
        description: str,
        *,
        merchant_id: Optional[str] = None,
        currency: Optional[Currency | str] = None,
        metadata: Optional[Metadata] = None,
        wages: Optional[Sequence[Wage]] = None,
    ) -> PaymentRequest:
        """Start a payment; redirect the payer to the result's ``gateway_url``."""
        method = RequestPayment(
            amount=amount,
            callback_url=callback_url,
            description=description,
            merchant_id=merchant_id,
            currency=Currency(currency) if currency is not None else None,
            metadata=metadata if metadata is not None else Metadata(),
            wages=list(wages) if wages is not None else None,
        )
        return request_payment(self.session, self.config, method)

    def verify_payment(
        self,
        authority: str,
        amount: int,
        *,
        merchant_id: Optional[str] = None,
    ) -> PaymentVerification:
        method = VerifyPayment(amount=amount, authority=authority, merchant_id=merchant_id)
        return verify_payment(self.session, self.config, method)

    def unverified_requests(
        self,
        *,
        merchant_id: Optional[str] = None,
    ) -> UnverifiedPayments:
        return unverified_requests(
            self.session,
            self.config,
            UnverifiedRequests(merchant_id=merchant_id),
        )
