"""
Configuration objects and helpers for the Zarinpal client.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urljoin, urlsplit

from .environment import build_environment
from .errors import ConfigError

__all__ = [
    "ClientConfig",
    "ConfigError",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "load_client_config",
]

DEFAULT_BASE_URL = "https://api.zarinpal.com/"
DEFAULT_TIMEOUT_SECONDS = 30.0

_PARAMETER_TO_ENV_KEY = {
    "merchant_id": "ZARINPAL_MERCHANT_ID",
    "base_url": "ZARINPAL_BASE_URL",
    "timeout_seconds": "ZARINPAL_TIMEOUT_SECONDS",
}


def _collect_parameter_overrides(explicit: Mapping[str, Any]) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    for key, value in explicit.items():
        if value is None:
            continue
        overrides[_PARAMETER_TO_ENV_KEY[key]] = str(value)
    return overrides


def _normalize_merchant_id(raw_value: Any) -> str:
    value = str(raw_value).strip()
    if not value:
        raise ConfigError("ZARINPAL_MERCHANT_ID must not be empty")
    try:
        return str(uuid.UUID(value))
    except ValueError as exc:
        raise ConfigError(f"ZARINPAL_MERCHANT_ID is not a valid UUID: {value!r}") from exc


def _normalize_base_url(raw_url: str) -> str:
    value = raw_url.strip()
    parts = urlsplit(value)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ConfigError(f"ZARINPAL_BASE_URL must be an absolute http(s) URL, got {value!r}")
    if not value.endswith("/"):
        value += "/"
    return value


def _parse_timeout(raw_value: Any) -> float:
    try:
        timeout = float(raw_value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(
            f"ZARINPAL_TIMEOUT_SECONDS must be a number, got {raw_value!r}"
        ) from exc
    if timeout <= 0:
        raise ConfigError("ZARINPAL_TIMEOUT_SECONDS must be greater than zero")
    return timeout


@dataclass(frozen=True)
class ClientConfig:
    """
    Settings shared by every request a client sends.

    ``merchant_id`` is validated as a UUID and stored in its canonical
    lowercase form; requests that carry their own ``merchant_id`` keep it.
    """

    merchant_id: str
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        object.__setattr__(self, "merchant_id", _normalize_merchant_id(self.merchant_id))
        object.__setattr__(self, "base_url", _normalize_base_url(self.base_url))
        object.__setattr__(self, "timeout_seconds", _parse_timeout(self.timeout_seconds))

    def url_for(self, path: str) -> str:
        return urljoin(self.base_url, path.lstrip("/"))

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "ClientConfig":
        merchant_id = values.get("ZARINPAL_MERCHANT_ID")
        if merchant_id is None:
            raise ConfigError("ZARINPAL_MERCHANT_ID must be provided")

        return cls(
            merchant_id=merchant_id,
            base_url=values.get("ZARINPAL_BASE_URL", DEFAULT_BASE_URL),
            timeout_seconds=values.get(
                "ZARINPAL_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS)
            ),
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        merchant_id: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float | int | str] = None,
    ) -> "ClientConfig":
        merged_overrides = dict(overrides or {})
        merged_overrides.update(
            _collect_parameter_overrides(
                {
                    "merchant_id": merchant_id,
                    "base_url": base_url,
                    "timeout_seconds": timeout_seconds,
                }
            )
        )

        environment = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(environment.variables)


def load_client_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    merchant_id: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout_seconds: Optional[float | int | str] = None,
) -> ClientConfig:
    """
    Convenience wrapper that mirrors :meth:`ClientConfig.from_env`.

    Settings can come from environment variables, a ``.env`` file, direct
    keyword arguments, or any combination of the three.
    """
    return ClientConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        merchant_id=merchant_id,
        base_url=base_url,
        timeout_seconds=timeout_seconds,
    )
