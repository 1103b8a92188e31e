# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Unit tests for ZendeskClient context manager support."""

import unittest
from unittest.mock import MagicMock

import requests
from azure.core.credentials import AzureNamedKeyCredential

from zendesk_api.client import ZendeskClient
from zendesk_api.core.config import ZendeskConfig


class TestContextManager(unittest.TestCase):
    """Test context manager support on ZendeskClient."""

    def setUp(self):
        self.credential = AzureNamedKeyCredential("agent@example.com", "token")
        self.base_url = "https://example.zendesk.com"
        self.config = ZendeskConfig()

    def test_enter_creates_session(self):
        client = ZendeskClient(self.base_url, self.credential, self.config)
        self.assertIsNone(client._session)

        result = client.__enter__()

        self.assertIsInstance(client._session, requests.Session)
        self.assertTrue(client._owns_session)
        self.assertIs(result, client)
        client.close()

    def test_exit_closes_session(self):
        client = ZendeskClient(self.base_url, self.credential, self.config)
        client.__enter__()
        mock_session = MagicMock(spec=requests.Session)
        client._session = mock_session

        client.__exit__(None, None, None)

        mock_session.close.assert_called_once()
        self.assertIsNone(client._session)
        self.assertFalse(client._owns_session)

    def test_context_manager_protocol(self):
        with ZendeskClient(self.base_url, self.credential, self.config) as client:
            self.assertIsInstance(client, ZendeskClient)
            self.assertIsInstance(client._session, requests.Session)
        self.assertIsNone(client._session)

    def test_api_client_uses_session(self):
        with ZendeskClient(self.base_url, self.credential, self.config) as client:
            api = client._get_api()
            self.assertIs(api._http._session, client._session)
            self.assertIs(client._get_api(), api)

    def test_api_client_created_before_enter_adopts_session(self):
        client = ZendeskClient(self.base_url, self.credential, self.config)
        early = client._get_api()
        self.assertIsNone(early._http._session)

        with client:
            api = client._get_api()
            self.assertIsNot(api, early)
            self.assertIs(api._http._session, client._session)

    def test_close_idempotent(self):
        client = ZendeskClient(self.base_url, self.credential, self.config)
        client._get_api()
        client.close()
        client.close()
        self.assertIsNone(client._api)

    def test_exceptions_not_suppressed(self):
        with self.assertRaises(RuntimeError):
            with ZendeskClient(self.base_url, self.credential, self.config):
                raise RuntimeError("boom")
