"""
Decoding of the ``{"data": ..., "errors": ...}`` envelope around every response.

The API marks a branch as "not applicable" by sending an empty list instead of
``null`` or omitting the key, so each branch is decoded by looking at its JSON
shape first: a list (of any length) or a missing key means the branch is
absent, an object means it is present and is decoded as the expected type.
Anything else is a decode error.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, Type, TypeVar, Union

from .errors import ApiError, EnvelopeDecodeError, EnvelopeProtocolError

__all__ = [
    "ABSENT",
    "Absent",
    "Envelope",
    "Present",
    "Slot",
    "decode_envelope",
    "decode_slot",
    "load_json",
]

T = TypeVar("T")


class Absent:
    """Marks an envelope branch the API sent as ``[]`` or left out."""

    _instance = None

    def __new__(cls) -> "Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent()


@dataclass(frozen=True)
class Present(Generic[T]):
    value: T


Slot = Union[Present[T], Absent]


def load_json(raw: Union[bytes, str, Mapping[str, Any]]) -> Mapping[str, Any]:
    if isinstance(raw, Mapping):
        return raw
    try:
        body = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise EnvelopeDecodeError(f"Response body is not valid JSON: {exc}", payload=raw) from exc
    if not isinstance(body, dict):
        raise EnvelopeDecodeError(
            f"Response body must be a JSON object, got {type(body).__name__}",
            payload=body,
        )
    return body


def decode_slot(
    envelope: Mapping[str, Any],
    key: str,
    decode: Callable[[Mapping[str, Any]], T],
) -> Slot[T]:
    if key not in envelope:
        return ABSENT
    value = envelope[key]
    if isinstance(value, list):
        return ABSENT
    if isinstance(value, dict):
        return Present(decode(value))
    raise EnvelopeDecodeError(
        f"Envelope '{key}' must be an object or a list, got {type(value).__name__}",
        payload=envelope,
    )


@dataclass(frozen=True)
class Envelope(Generic[T]):
    data: Slot[T]
    errors: Slot[ApiError]

    @classmethod
    def parse(
        cls,
        raw: Union[bytes, str, Mapping[str, Any]],
        result_type: Type[T],
    ) -> "Envelope[T]":
        body = load_json(raw)
        return cls(
            data=decode_slot(body, "data", result_type.from_response),
            errors=decode_slot(body, "errors", ApiError.from_response),
        )

    def resolve(self) -> T:
        """
        Return the success payload or raise the API error.

        ``data`` wins when both branches are present.
        """
        if isinstance(self.data, Present):
            return self.data.value
        if isinstance(self.errors, Present):
            raise self.errors.value
        raise EnvelopeProtocolError("Response envelope carries neither data nor errors")


def decode_envelope(raw: Union[bytes, str, Mapping[str, Any]], result_type: Type[T]) -> T:
    """Decode ``raw`` as an envelope around ``result_type`` and resolve it."""
    return Envelope.parse(raw, result_type).resolve()
