"""
Collection endpoints: the payments received by the account.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from .models import Payment, SearchResult
from .transport import ApiResource

__all__ = ["Collection"]

COLLECTIONS_PATH = "/collections"


class Collection(ApiResource):
    def notification(self, access_token: str, payment_id: Any, sandbox: bool) -> Payment:
        """Fetch the latest state of a payment, as sent in IPN notifications."""
        payload = self._request(
            "GET",
            f"{COLLECTIONS_PATH}/notifications/{payment_id}",
            sandbox=sandbox,
            params={"access_token": access_token},
        )
        return Payment.from_response(payload)

    def search(self, access_token: str, criteria: Mapping[str, Any], sandbox: bool) -> SearchResult:
        params: Dict[str, Any] = dict(criteria)
        params["access_token"] = access_token
        payload = self._request(
            "GET",
            f"{COLLECTIONS_PATH}/search",
            sandbox=sandbox,
            params=params,
        )
        return SearchResult.from_response(payload)

    def cancel(self, access_token: str, payment_id: Any, sandbox: bool) -> Payment:
        return self._update_status(access_token, payment_id, "cancelled", sandbox)

    def refund(self, access_token: str, payment_id: Any, sandbox: bool) -> Payment:
        return self._update_status(access_token, payment_id, "refunded", sandbox)

    def _update_status(self, access_token: str, payment_id: Any, status: str, sandbox: bool) -> Payment:
        payload = self._request(
            "PUT",
            f"{COLLECTIONS_PATH}/{payment_id}",
            sandbox=sandbox,
            params={"access_token": access_token},
            json_body={"status": status},
        )
        return Payment.from_response(payload)
