"""
Payment preference endpoints.
"""

from __future__ import annotations

from typing import Any, Mapping

from .models import Preference
from .transport import ApiResource

__all__ = ["Checkout"]

PREFERENCES_PATH = "/checkout/preferences"


class Checkout(ApiResource):
    def create_preference(
        self,
        access_token: str,
        data: Mapping[str, Any],
        sandbox: bool,
    ) -> Preference:
        payload = self._request(
            "POST",
            PREFERENCES_PATH,
            sandbox=sandbox,
            params={"access_token": access_token},
            json_body=data,
        )
        return Preference.from_response(payload)

    def update_preference(
        self,
        access_token: str,
        preference_id: str,
        data: Mapping[str, Any],
        sandbox: bool,
    ) -> Preference:
        payload = self._request(
            "PUT",
            f"{PREFERENCES_PATH}/{preference_id}",
            sandbox=sandbox,
            params={"access_token": access_token},
            json_body=data,
        )
        return Preference.from_response(payload)

    def get_preference(self, access_token: str, preference_id: str, sandbox: bool) -> Preference:
        payload = self._request(
            "GET",
            f"{PREFERENCES_PATH}/{preference_id}",
            sandbox=sandbox,
            params={"access_token": access_token},
        )
        return Preference.from_response(payload)
