"""
Client object holding the account's tokens and dispatching API calls.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import requests

from .authentication import Authentication
from .checkout import Checkout
from .collection import Collection
from .config import ClientConfig
from .transport import build_session

__all__ = ["AccessError", "Client", "TokenPair"]

MANDATORY_TOKEN_KEYS = ("access_token", "refresh_token")


class AccessError(Exception):
    """Raised when the token endpoint does not hand back a usable token pair."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str

    def __repr__(self) -> str:
        return "TokenPair(access_token='***', refresh_token='***')"

    @classmethod
    def from_response(cls, auth: Any) -> "TokenPair":
        if not isinstance(auth, Mapping):
            raise AccessError(None)
        if any(key not in auth for key in MANDATORY_TOKEN_KEYS):
            raise AccessError(auth.get("message"))
        return cls(
            access_token=auth["access_token"],
            refresh_token=auth["refresh_token"],
        )


class Client:
    """
    Interact with a MercadoPago account through the API.

    The constructor exchanges ``client_id`` and ``client_secret`` for a token
    pair and keeps it as the client's state; every API method uses the
    current access token::

        client = Client(client_id, client_secret)
        client.create_preference(data)
        client.get_preference(preference_id)
        client.notification(payment_id)
        client.search({"external_reference": "order-42"})

    Preference, cancel and refund calls always target production; only
    ``notification`` and ``search`` honour the ``sandbox`` flag. When
    ``sandbox`` is omitted it is taken from ``config`` (``False`` without one).
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        sandbox: Optional[bool] = None,
        *,
        authentication: Optional[Authentication] = None,
        checkout: Optional[Checkout] = None,
        collection: Optional[Collection] = None,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        if sandbox is None:
            sandbox = config.sandbox if config is not None else False
        if authentication is None or checkout is None or collection is None:
            config = config or ClientConfig()
            session = build_session(session)
        self._authentication = authentication or Authentication(config, session=session)
        self._checkout = checkout or Checkout(config, session=session)
        self._collection = collection or Collection(config, session=session)
        self._lock = threading.Lock()
        self._tokens = self._load_tokens(
            self._authentication.exchange_client_credentials(client_id, client_secret)
        )
        self._sandbox = sandbox

    @property
    def access_token(self) -> str:
        return self._tokens.access_token

    @property
    def refresh_token(self) -> str:
        return self._tokens.refresh_token

    @property
    def sandbox(self) -> bool:
        return self._sandbox

    @property
    def tokens(self) -> TokenPair:
        return self._tokens

    def refresh_access_token(self, client_id: str, client_secret: str) -> TokenPair:
        """
        Exchange the current refresh token for a new token pair.

        The held pair is only replaced once the response validates; on
        :class:`AccessError` the previous tokens stay in place.
        """
        with self._lock:
            tokens = self._load_tokens(
                self._authentication.refresh(
                    client_id, client_secret, self._tokens.refresh_token
                )
            )
            self._tokens = tokens
        return tokens

    def create_preference(self, data: Mapping[str, Any]) -> Any:
        """Create a payment preference from ``data``."""
        return self._checkout.create_preference(self.access_token, data, False)

    def update_preference(self, preference_id: str, data: Mapping[str, Any]) -> Any:
        return self._checkout.update_preference(self.access_token, preference_id, data, False)

    def get_preference(self, preference_id: str) -> Any:
        return self._checkout.get_preference(self.access_token, preference_id, False)

    def notification(self, payment_id: Any) -> Any:
        """Retrieve the latest information about a payment."""
        return self._collection.notification(self.access_token, payment_id, self._sandbox)

    def search(self, search_criteria: Mapping[str, Any]) -> Any:
        """Search collections matching ``search_criteria``."""
        return self._collection.search(self.access_token, search_criteria, self._sandbox)

    def cancel_payment(self, payment_id: Any) -> Any:
        return self._collection.cancel(self.access_token, payment_id, False)

    def refund_payment(self, payment_id: Any) -> Any:
        return self._collection.refund(self.access_token, payment_id, False)

    @staticmethod
    def _load_tokens(auth: Mapping[str, Any]) -> TokenPair:
        return TokenPair.from_response(auth)
