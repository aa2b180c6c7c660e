"""Pytest fixtures: a recording stand-in for requests.Session and a client."""

import json

import pytest

from zarinpal import ClientConfig, ZarinpalClient

MERCHANT_ID = "1344b5d4-0048-11e8-94db-005056a205be"


class FakeResponse:
    def __init__(self, body, status_code=200):
        if isinstance(body, (bytes, str)):
            self.content = body.encode("utf-8") if isinstance(body, str) else body
        else:
            self.content = json.dumps(body).encode("utf-8")
        self.status_code = status_code


class FakeSession:
    """Returns queued bodies and records every POST it receives."""

    def __init__(self):
        self.calls = []
        self.queue = []

    def reply(self, body, status_code=200):
        self.queue.append(FakeResponse(body, status_code))
        return self

    def fail(self, exc):
        self.queue.append(exc)
        return self

    def post(self, url, json=None, timeout=None):
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        item = self.queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def config():
    return ClientConfig(merchant_id=MERCHANT_ID)


@pytest.fixture
def client(config, session):
    return ZarinpalClient(config, session=session)
