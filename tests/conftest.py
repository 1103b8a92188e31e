# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for Zendesk client tests.

Provides a scripted stand-in for the HTTP transport that replays
``(status, headers, body)`` tuples, and factories for low-level and
high-level clients wired to it.
"""

import json

import pytest
from azure.core.credentials import AzureNamedKeyCredential

from zendesk_api.client import ZendeskClient
from zendesk_api.core._auth import _AuthManager
from zendesk_api.core.config import ZendeskConfig
from zendesk_api.data._api import _ApiClient

BASE_URL = "https://example.zendesk.com"


class FakeResponse:
    """Minimal stand-in for :class:`requests.Response`."""

    def __init__(self, status_code, headers=None, body=None, reason=None):
        self.status_code = status_code
        self.headers = headers or {}
        self.reason = reason or ""
        if isinstance(body, (dict, list)):
            self.content = json.dumps(body).encode("utf-8")
        elif isinstance(body, str):
            self.content = body.encode("utf-8")
        else:
            self.content = body or b""
        self.closed = False

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.content), chunk_size):
            yield self.content[i : i + chunk_size]

    def close(self):
        self.closed = True


class ScriptedHTTP:
    """Replaces ``_HttpClient``; returns the scripted responses in order and records each call."""

    def __init__(self, responses):
        self._responses = list(responses)
        self.calls = []

    def _request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self._responses:
            raise AssertionError(f"No more responses for {method} {url}")
        response = self._responses.pop(0)
        if isinstance(response, FakeResponse):
            return response
        status, headers, body = response
        return FakeResponse(status, headers, body)

    def close(self):
        pass

    @property
    def urls(self):
        return [c["url"] for c in self.calls]


@pytest.fixture
def credential():
    """Named key credential with a fixed username and token."""
    return AzureNamedKeyCredential("agent@example.com", "secret-token")


@pytest.fixture
def test_config():
    """Configuration with the default backoff values and no environment lookups."""
    return ZendeskConfig(rate_limit_backoff=10.0, overload_backoff=1.0, http_retries=1, http_timeout=5)


@pytest.fixture
def make_api(credential, test_config):
    """Factory for an ``_ApiClient`` replaying ``responses``."""

    def _make(responses, config=None):
        api = _ApiClient(_AuthManager(credential), BASE_URL, config or test_config)
        api._http = ScriptedHTTP(responses)
        return api

    return _make


@pytest.fixture
def make_client(credential, test_config, make_api):
    """Factory for a ``ZendeskClient`` whose low-level client replays ``responses``."""

    def _make(responses, cache=None, config=None):
        cfg = config or test_config
        client = ZendeskClient(BASE_URL, credential, cfg, cache=cache)
        client._api = make_api(responses, cfg)
        return client

    return _make


def page(field, items, next_page=None):
    """Build one page envelope."""
    return {field: items, "next_page": next_page, "count": len(items)}


@pytest.fixture
def make_page():
    return page


@pytest.fixture
def fake_response():
    """The ``FakeResponse`` class, for tests that need a reason phrase or a custom body."""
    return FakeResponse
