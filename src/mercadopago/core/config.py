"""
Configuration objects and helpers for the MercadoPago client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .environment import build_environment

__all__ = [
    "ConfigError",
    "ClientConfig",
    "ClientParameters",
    "DEFAULT_API_BASE_URL",
    "load_client_config",
]

DEFAULT_API_BASE_URL = "https://api.mercadolibre.com"
DEFAULT_TIMEOUT_SECONDS = 30

_PARAMETER_TO_ENV_KEY = {
    "client_id": "MP_CLIENT_ID",
    "client_secret": "MP_CLIENT_SECRET",
    "sandbox": "MP_SANDBOX",
    "api_base_url": "MP_API_BASE_URL",
    "timeout_seconds": "MP_TIMEOUT_SECONDS",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


@dataclass(frozen=True)
class ClientParameters:
    """
    Explicit parameter bundle for constructing :class:`ClientConfig`.

    Callers can either instantiate this helper or pass the individual keyword
    arguments directly to :func:`load_client_config`.
    """

    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    sandbox: Optional[bool | str] = None
    api_base_url: Optional[str] = None
    timeout_seconds: Optional[int | str] = None

    def as_overrides(self) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for field_name, env_key in _PARAMETER_TO_ENV_KEY.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            overrides[env_key] = _stringify(value)
        return overrides


def _collect_parameter_overrides(
    parameters: Optional[ClientParameters],
    explicit: Mapping[str, Any],
) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    if parameters is not None:
        overrides.update(parameters.as_overrides())

    for key, value in explicit.items():
        if value is None:
            continue
        try:
            env_key = _PARAMETER_TO_ENV_KEY[key]
        except KeyError as exc:
            raise TypeError(f"Unknown client parameter '{key}'") from exc
        overrides[env_key] = _stringify(value)
    return overrides


def _parse_bool(raw: str, field_name: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{field_name} must be a boolean, got '{raw}'")


def _parse_timeout(raw: str) -> int:
    try:
        timeout = int(raw)
    except ValueError as exc:
        raise ConfigError(
            f"MP_TIMEOUT_SECONDS must be an integer, got '{raw}'"
        ) from exc
    if timeout <= 0:
        raise ConfigError("MP_TIMEOUT_SECONDS must be greater than zero")
    return timeout


def _optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class ClientConfig:
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    sandbox: bool = False
    api_base_url: str = DEFAULT_API_BASE_URL
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS

    def __repr__(self) -> str:
        secret = "***" if self.client_secret else None
        return (
            f"ClientConfig(client_id={self.client_id!r}, client_secret={secret!r}, "
            f"sandbox={self.sandbox!r}, api_base_url={self.api_base_url!r}, "
            f"timeout_seconds={self.timeout_seconds!r})"
        )

    def url(self, path: str, *, sandbox: bool = False) -> str:
        """Join ``path`` onto the API base, adding the sandbox prefix if asked."""
        prefix = "/sandbox" if sandbox else ""
        return f"{self.api_base_url}{prefix}/{path.lstrip('/')}"

    def require_credentials(self) -> tuple[str, str]:
        if not self.client_id:
            raise ConfigError("MP_CLIENT_ID must be provided")
        if not self.client_secret:
            raise ConfigError("MP_CLIENT_SECRET must be provided")
        return self.client_id, self.client_secret

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "ClientConfig":
        api_base_url = values.get("MP_API_BASE_URL", DEFAULT_API_BASE_URL).strip()
        if not api_base_url.startswith(("http://", "https://")):
            raise ConfigError(
                f"MP_API_BASE_URL must be an http(s) URL, got '{api_base_url}'"
            )

        return cls(
            client_id=_optional(values.get("MP_CLIENT_ID")),
            client_secret=_optional(values.get("MP_CLIENT_SECRET")),
            sandbox=_parse_bool(values.get("MP_SANDBOX", "false"), "MP_SANDBOX"),
            api_base_url=api_base_url.rstrip("/"),
            timeout_seconds=_parse_timeout(
                values.get("MP_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
            ),
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        parameters: Optional[ClientParameters] = None,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        sandbox: Optional[bool | str] = None,
        api_base_url: Optional[str] = None,
        timeout_seconds: Optional[int | str] = None,
    ) -> "ClientConfig":
        parameter_overrides = _collect_parameter_overrides(
            parameters,
            {
                "client_id": client_id,
                "client_secret": client_secret,
                "sandbox": sandbox,
                "api_base_url": api_base_url,
                "timeout_seconds": timeout_seconds,
            },
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

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
    parameters: Optional[ClientParameters] = None,
    client_id: Optional[str] = None,
    client_secret: Optional[str] = None,
    sandbox: Optional[bool | str] = None,
    api_base_url: Optional[str] = None,
    timeout_seconds: Optional[int | str] = None,
) -> ClientConfig:
    """
    Convenience wrapper that mirrors :meth:`ClientConfig.from_env`.

    The configuration can come from environment variables, a ``.env`` file,
    direct keyword arguments, or any combination of the three.
    """
    return ClientConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        client_id=client_id,
        client_secret=client_secret,
        sandbox=sandbox,
        api_base_url=api_base_url,
        timeout_seconds=timeout_seconds,
    )
