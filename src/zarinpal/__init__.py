"""
Public facade for the Zarinpal payment gateway client.

The module re-exports the pieces integrators need so they can
``from zarinpal import ...`` without navigating the package.
"""

from .api import create_client, request_payment, unverified_requests, verify_payment
from .core import (
    ApiError,
    ApiMethod,
    ApiResult,
    ClientConfig,
    ConfigError,
    Currency,
    EnvelopeDecodeError,
    EnvelopeProtocolError,
    FeeType,
    Metadata,
    PaymentRequest,
    PaymentVerification,
    RequestPayment,
    ResultCode,
    TransportError,
    UnknownResultCode,
    UnverifiedAuthority,
    UnverifiedPayments,
    UnverifiedRequests,
    VerifyPayment,
    Wage,
    ZarinpalClient,
    ZarinpalError,
    decode_envelope,
    decode_result_code,
    encode_result_code,
    load_client_config,
    load_env_file,
)

__all__ = (
    "ApiError",
    "ApiMethod",
    "ApiResult",
    "ClientConfig",
    "ConfigError",
    "Currency",
    "EnvelopeDecodeError",
    "EnvelopeProtocolError",
    "FeeType",
    "Metadata",
    "PaymentRequest",
    "PaymentVerification",
    "RequestPayment",
    "ResultCode",
    "TransportError",
    "UnknownResultCode",
    "UnverifiedAuthority",
    "UnverifiedPayments",
    "UnverifiedRequests",
    "VerifyPayment",
    "Wage",
    "ZarinpalClient",
    "ZarinpalError",
    "create_client",
    "decode_envelope",
    "decode_result_code",
    "encode_result_code",
    "load_client_config",
    "load_env_file",
    "request_payment",
    "unverified_requests",
    "verify_payment",
)
