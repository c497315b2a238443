"""
Python client for the MercadoPago payment API.

The most useful pieces are re-exported here so integrators can
``from mercadopago import Client`` without navigating the package.
"""

from .api import create_client
from .core import (
    AccessError,
    Authentication,
    Checkout,
    Client,
    ClientConfig,
    ClientEnvironment,
    ClientParameters,
    Collection,
    ConfigError,
    Payment,
    Preference,
    RequestError,
    SearchResult,
    TokenPair,
    build_environment,
    load_client_config,
    load_env_file,
)

__all__ = (
    "AccessError",
    "Authentication",
    "Checkout",
    "Client",
    "ClientConfig",
    "ClientEnvironment",
    "ClientParameters",
    "Collection",
    "ConfigError",
    "Payment",
    "Preference",
    "RequestError",
    "SearchResult",
    "TokenPair",
    "build_environment",
    "create_client",
    "load_client_config",
    "load_env_file",
)
