"""
Public, high-level helpers for interacting with the Zarinpal gateway.
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

import requests

from .core.client import ZarinpalClient
from .core.config import ClientConfig, load_client_config
from .core.models import Currency, Metadata, Wage
from .core.results import PaymentRequest, PaymentVerification, UnverifiedPayments

__all__ = [
    "create_client",
    "request_payment",
    "unverified_requests",
    "verify_payment",
]


def create_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    merchant_id: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout_seconds: Optional[float | int | str] = None,
) -> ZarinpalClient:
    """
    Construct a :class:`ZarinpalClient`.

    Callers can either supply a ready-made :class:`ClientConfig` or let the
    helper assemble one from environment data. The merchant id is validated
    here, before any request is sent.
    """
    if config is not None:
        extras = (overrides, base, merchant_id, base_url, timeout_seconds)
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built ClientConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_client_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            merchant_id=merchant_id,
            base_url=base_url,
            timeout_seconds=timeout_seconds,
        )
    return ZarinpalClient(cfg, session=session)


def request_payment(
    amount: int,
    callback_url: str,
    description: str,
    *,
    client: Optional[ZarinpalClient] = None,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    currency: Optional[Currency | str] = None,
    metadata: Optional[Metadata] = None,
    wages: Optional[Sequence[Wage]] = None,
) -> PaymentRequest:
    """One-shot payment request using ``client`` or a client built from config."""
    zarinpal = client or create_client(config=config, session=session, env_file=env_file)
    return zarinpal.request_payment(
        amount,
        callback_url,
        description,
        currency=currency,
        metadata=metadata,
        wages=wages,
    )


def verify_payment(
    authority: str,
    amount: int,
    *,
    client: Optional[ZarinpalClient] = None,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
) -> PaymentVerification:
    zarinpal = client or create_client(config=config, session=session, env_file=env_file)
    return zarinpal.verify_payment(authority, amount)


def unverified_requests(
    *,
    client: Optional[ZarinpalClient] = None,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
) -> UnverifiedPayments:
    zarinpal = client or create_client(config=config, session=session, env_file=env_file)
    return zarinpal.unverified_requests()
