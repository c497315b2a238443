import json
from collections.abc import Iterator

import pytest


class RecordingCollaborator:
    """Stands in for an API collaborator, recording every call it receives."""

    def __init__(self, responses=None):
        self.calls = []
        self.responses = dict(responses or {})

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)

        def method(*args):
            self.calls.append((name, args))
            response = self.responses.get(name, object())
            if isinstance(response, Iterator):
                return next(response)
            return response

        return method


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def json(self):
        if self._payload is None:
            raise json.JSONDecodeError("Expecting value", self.text, 0)
        return self._payload


class FakeSession:
    def __init__(self, *responses):
        self.headers = {}
        self.requests = []
        self._responses = list(responses)

    def request(self, method, url, **kwargs):
        self.requests.append((method, url, kwargs))
        return self._responses.pop(0)


TOKENS = {"access_token": "APP_USR-access-1", "refresh_token": "TG-refresh-1"}
REFRESHED = {"access_token": "APP_USR-access-2", "refresh_token": "TG-refresh-2"}


@pytest.fixture
def authentication():
    return RecordingCollaborator(
        {"exchange_client_credentials": dict(TOKENS), "refresh": dict(REFRESHED)}
    )


@pytest.fixture
def checkout():
    return RecordingCollaborator()


@pytest.fixture
def collection():
    return RecordingCollaborator()


@pytest.fixture
def make_client(authentication, checkout, collection):
    from mercadopago import Client

    def factory(sandbox=False):
        return Client(
            "client-id",
            "client-secret",
            sandbox,
            authentication=authentication,
            checkout=checkout,
            collection=collection,
        )

    return factory
