"""Pytest fixtures: a scripted router standing in for the HTTP transport."""

import copy
import json

import pytest

import i2pcontrol.session as session_module


class FakeRouter:
    def __init__(self):
        self.sent = []
        self.replies = []

    def reply(self, payload=None, status=200, body=None):
        if body is None:
            body = json.dumps(payload)
        self.replies.append((status, body))
        return self

    def fail(self, exc):
        self.replies.append(exc)
        return self

    def __call__(self, url, payload, timeout=30):
        self.sent.append({"url": url, "payload": copy.deepcopy(payload), "timeout": timeout})
        if not self.replies:
            raise AssertionError(f"unexpected request: {payload['method']}")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    @property
    def methods(self):
        return [s["payload"]["method"] for s in self.sent]

    def params(self, index=-1):
        return self.sent[index]["payload"]["params"]


@pytest.fixture
def router(monkeypatch):
    fake = FakeRouter()
    monkeypatch.setattr(session_module, "post_rpc", fake)
    return fake
