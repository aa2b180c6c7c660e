"""
Exception hierarchy shared by every Zarinpal operation.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .result_codes import AnyResultCode, decode_result_code

__all__ = [
    "ApiError",
    "ConfigError",
    "EnvelopeDecodeError",
    "EnvelopeProtocolError",
    "TransportError",
    "ZarinpalError",
    "merge_validations",
]


class ZarinpalError(Exception):
    """Base class for everything raised by this package."""


class ConfigError(ZarinpalError, ValueError):
    """Raised when the supplied configuration is invalid."""


class TransportError(ZarinpalError):
    """
    The HTTP client failed before a response body could be read.

    The original ``requests`` exception is kept on :attr:`original` and as
    ``__cause__``; it is not reinterpreted.
    """

    def __init__(self, message: str, *, original: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.original = original


class EnvelopeDecodeError(ZarinpalError):
    """The response body did not have the shape the API documents."""

    def __init__(self, message: str, *, payload: Any = None) -> None:
        super().__init__(message)
        self.payload = payload


class EnvelopeProtocolError(EnvelopeDecodeError):
    """Neither ``data`` nor ``errors`` carried an object."""


def merge_validations(entries: Any) -> Dict[str, List[str]]:
    """
    Fold the wire list of single-entry objects into one mapping.

    ``[{"merchant_id": "a"}, {"merchant_id": "b"}, {"amount": "c"}]`` becomes
    ``{"merchant_id": ["a", "b"], "amount": ["c"]}``.
    """
    if not isinstance(entries, list):
        raise EnvelopeDecodeError(
            f"'validations' must be a list, got {type(entries).__name__}",
            payload=entries,
        )

    merged: Dict[str, List[str]] = {}
    for item in entries:
        if not isinstance(item, dict):
            raise EnvelopeDecodeError(
                f"Validation entries must be objects, got {type(item).__name__}",
                payload=entries,
            )
        for field_name, text in item.items():
            if not isinstance(text, str):
                raise EnvelopeDecodeError(
                    f"Validation message for '{field_name}' must be a string",
                    payload=entries,
                )
            merged.setdefault(field_name, []).append(text)
    return merged


class ApiError(ZarinpalError):
    """
    An error the API reported in the ``errors`` branch of its envelope.

    ``validations`` lists, per request field, the checks that failed and must
    be fixed before the request is sent again.
    """

    def __init__(
        self,
        code: AnyResultCode,
        message: str,
        validations: Optional[Mapping[str, Sequence[str]]] = None,
    ) -> None:
        self.code = code
        self.message = message
        self._validations: Dict[str, Tuple[str, ...]] = {
            key: tuple(values) for key, values in (validations or {}).items()
        }
        super().__init__(self._render())

    @property
    def validations(self) -> Mapping[str, Tuple[str, ...]]:
        return MappingProxyType(self._validations)

    def __reduce__(self):
        return type(self), (self.code, self.message, self._validations)

    def _render(self) -> str:
        text = f"Zarinpal API error {self.code}: {self.message}"
        if self.validations:
            details = "; ".join(
                f"{name}: {', '.join(messages)}" for name, messages in self.validations.items()
            )
            text = f"{text} [{details}]"
        return text

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "ApiError":
        code = payload.get("code")
        if isinstance(code, bool) or not isinstance(code, int):
            raise EnvelopeDecodeError("Error 'code' must be an integer", payload=payload)
        message = payload.get("message")
        if not isinstance(message, str):
            raise EnvelopeDecodeError("Error 'message' must be a string", payload=payload)
        if "validations" not in payload:
            raise EnvelopeDecodeError("Error is missing 'validations'", payload=payload)

        return cls(
            code=decode_result_code(code),
            message=message,
            validations=merge_validations(payload["validations"]),
        )
