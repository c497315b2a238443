"""
OAuth token endpoint used to obtain and refresh access tokens.
"""

from __future__ import annotations

from typing import Any, Dict

from .transport import ApiResource

__all__ = ["Authentication"]

TOKEN_PATH = "/oauth/token"


class Authentication(ApiResource):
    """
    Client-credentials handshake against ``/oauth/token``.

    Error statuses are not raised here: the API describes failures in the
    response body (``message``, ``error``), and the caller decides whether the
    body holds a usable token pair.
    """

    def exchange_client_credentials(self, client_id: str, client_secret: str) -> Dict[str, Any]:
        return self._token_request(
            {
                "grant_type": "client_credentials",
                "client_id": client_id,
                "client_secret": client_secret,
            }
        )

    def refresh(self, client_id: str, client_secret: str, refresh_token: str) -> Dict[str, Any]:
        return self._token_request(
            {
                "grant_type": "refresh_token",
                "client_id": client_id,
                "client_secret": client_secret,
                "refresh_token": refresh_token,
            }
        )

    def _token_request(self, form: Dict[str, str]) -> Dict[str, Any]:
        return self._request("POST", TOKEN_PATH, form=form, raise_for_status=False)
