"""
HTTP plumbing shared by the MercadoPago API collaborators.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional

import requests

from .config import ClientConfig

__all__ = ["ApiResource", "RequestError", "build_session", "request_json"]

_DEFAULT_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "mercadopago-python",
}


class RequestError(RuntimeError):
    """Raised when the API answers with an error status or an unreadable body."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


def build_session(session: Optional[requests.Session] = None) -> requests.Session:
    """Return ``session`` (or a fresh one) with the default API headers applied."""
    session = session or requests.Session()
    for key, value in _DEFAULT_HEADERS.items():
        session.headers.setdefault(key, value)
    return session


def request_json(
    session: requests.Session,
    config: ClientConfig,
    method: str,
    url: str,
    *,
    params: Optional[Mapping[str, Any]] = None,
    json_body: Any = None,
    form: Optional[Mapping[str, str]] = None,
    raise_for_status: bool = True,
) -> Dict[str, Any]:
    # params are left out of the log line; they carry the access token
    logging.info("%s %s", method, url)
    response = session.request(
        method,
        url,
        params=params,
        json=json_body,
        data=form,
        timeout=config.timeout_seconds,
    )
    if raise_for_status and response.status_code >= 400:
        raise RequestError(
            f"MercadoPago responded with {response.status_code}: {response.text}",
            status_code=response.status_code,
            body=response.text,
        )
    try:
        return response.json()
    except json.JSONDecodeError as exc:
        raise RequestError(
            f"Failed to parse JSON from MercadoPago at {url}: {response.text}",
            status_code=response.status_code,
            body=response.text,
        ) from exc


class ApiResource:
    """
    Base class for the collaborators that talk to one group of endpoints.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.session = build_session(session)

    def _request(
        self,
        method: str,
        path: str,
        *,
        sandbox: bool = False,
        **kwargs: Any,
    ) -> Dict[str, Any]:
        url = self.config.url(path, sandbox=sandbox)
        return request_json(self.session, self.config, method, url, **kwargs)
