"""
Public, high-level helpers for building a MercadoPago client.
"""

from __future__ import annotations

from typing import Mapping, Optional

import requests

from .core.client import Client
from .core.config import ClientConfig, ClientParameters, load_client_config

__all__ = ["create_client", "load_client_config"]


def create_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
    client_id: Optional[str] = None,
    client_secret: Optional[str] = None,
    sandbox: Optional[bool | str] = None,
    api_base_url: Optional[str] = None,
    timeout_seconds: Optional[int | str] = None,
) -> Client:
    """
    Construct an authenticated :class:`Client`.

    Callers can either supply a ready-made :class:`ClientConfig` or let the
    helper assemble one from environment data. Raises
    :class:`~mercadopago.core.config.ConfigError` when credentials are missing
    and :class:`~mercadopago.core.client.AccessError` when the handshake fails.
    """
    if config is not None:
        extras = (
            overrides,
            base,
            parameters,
            client_id,
            client_secret,
            sandbox,
            api_base_url,
            timeout_seconds,
        )
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
            parameters=parameters,
            client_id=client_id,
            client_secret=client_secret,
            sandbox=sandbox,
            api_base_url=api_base_url,
            timeout_seconds=timeout_seconds,
        )
    cid, secret = cfg.require_credentials()
    return Client(cid, secret, cfg.sandbox, config=cfg, session=session)
