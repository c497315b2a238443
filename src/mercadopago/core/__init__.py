"""
Core primitives: the client façade, its API collaborators and configuration.
"""

from .authentication import Authentication
from .checkout import Checkout
from .client import AccessError, Client, TokenPair
from .collection import Collection
from .config import (
    ConfigError,
    ClientConfig,
    ClientParameters,
    load_client_config,
)
from .environment import ClientEnvironment, build_environment, load_env_file
from .models import Payment, Preference, SearchResult
from .transport import RequestError

__all__ = [
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
    "load_client_config",
    "load_env_file",
]
