"""
Core primitives that implement the Zarinpal request/verify lifecycle.
"""

from .client import (
    ZarinpalClient,
    request_payment,
    send_method,
    unverified_requests,
    verify_payment,
)
from .config import ClientConfig, load_client_config
from .envelope import ABSENT, Envelope, Present, decode_envelope
from .environment import ClientEnvironment, build_environment, load_env_file
from .errors import (
    ApiError,
    ConfigError,
    EnvelopeDecodeError,
    EnvelopeProtocolError,
    TransportError,
    ZarinpalError,
)
from .methods import ApiMethod, RequestPayment, UnverifiedRequests, VerifyPayment
from .models import Currency, FeeType, Metadata, Wage
from .result_codes import (
    ResultCode,
    UnknownResultCode,
    decode_result_code,
    encode_result_code,
)
from .results import (
    ApiResult,
    PaymentRequest,
    PaymentVerification,
    UnverifiedAuthority,
    UnverifiedPayments,
)

__all__ = [
    "ABSENT",
    "ApiError",
    "ApiMethod",
    "ApiResult",
    "ClientConfig",
    "ClientEnvironment",
    "ConfigError",
    "Currency",
    "Envelope",
    "EnvelopeDecodeError",
    "EnvelopeProtocolError",
    "FeeType",
    "Metadata",
    "PaymentRequest",
    "PaymentVerification",
    "Present",
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
    "build_environment",
    "decode_envelope",
    "decode_result_code",
    "encode_result_code",
    "load_client_config",
    "load_env_file",
    "request_payment",
    "send_method",
    "unverified_requests",
    "verify_payment",
]
