# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import base64
from unittest.mock import MagicMock, Mock, patch

import pytest
import requests
from azure.core.credentials import AzureNamedKeyCredential

from zendesk_api.core._auth import _AuthManager
from zendesk_api.core._http import _HttpClient


class TestHttpClient:
    """Network-level behaviour of the transport."""

    def test_defaults(self):
        client = _HttpClient()
        assert client.max_attempts == 5
        assert client.base_delay == 0.5
        assert client.default_timeout is None

    @patch("requests.request")
    def test_default_timeouts_per_method(self, mock_request):
        mock_request.return_value = Mock(status_code=200)
        client = _HttpClient()
        client._request("GET", "https://x")
        client._request("PUT", "https://x")
        assert mock_request.call_args_list[0].kwargs["timeout"] == 10
        assert mock_request.call_args_list[1].kwargs["timeout"] == 120

    @patch("requests.request")
    def test_configured_timeout(self, mock_request):
        mock_request.return_value = Mock(status_code=200)
        _HttpClient(timeout=3)._request("GET", "https://x")
        assert mock_request.call_args.kwargs["timeout"] == 3

    @patch("requests.request")
    def test_error_statuses_returned_not_retried(self, mock_request):
        mock_request.return_value = Mock(status_code=429)
        response = _HttpClient()._request("GET", "https://x")
        assert response.status_code == 429
        assert mock_request.call_count == 1

    @patch("requests.request")
    @patch("time.sleep")
    def test_network_error_retry(self, mock_sleep, mock_request):
        mock_request.side_effect = [
            requests.exceptions.ConnectionError("reset"),
            requests.exceptions.ConnectionError("reset"),
            Mock(status_code=200),
        ]
        response = _HttpClient()._request("GET", "https://x")
        assert response.status_code == 200
        assert mock_request.call_count == 3
        mock_sleep.assert_any_call(0.5)
        mock_sleep.assert_any_call(1.0)

    @patch("requests.request")
    @patch("time.sleep")
    def test_network_error_exhausted_raises(self, mock_sleep, mock_request):
        mock_request.side_effect = requests.exceptions.Timeout("slow")
        with pytest.raises(requests.exceptions.Timeout):
            _HttpClient(retries=2)._request("GET", "https://x")
        assert mock_request.call_count == 2

    @patch("requests.request")
    def test_zero_retries_still_attempts_once(self, mock_request):
        mock_request.return_value = Mock(status_code=200)
        _HttpClient(retries=0)._request("GET", "https://x")
        assert mock_request.call_count == 1

    def test_session_used_and_closed(self):
        session = MagicMock(spec=requests.Session)
        session.request.return_value = Mock(status_code=200)
        client = _HttpClient(session=session)
        client._request("GET", "https://x")
        session.request.assert_called_once()
        client.close()
        client.close()
        session.close.assert_called_once()


class TestAuthManager:
    def test_token_format(self):
        auth = _AuthManager(AzureNamedKeyCredential("agent@example.com", "abc123"))
        assert base64.b64decode(auth.token) == b"agent@example.com/token:abc123"
        assert auth._authorization_header() == f"Basic {auth.token}"

    def test_token_fixed_at_construction(self):
        credential = AzureNamedKeyCredential("agent@example.com", "old")
        auth = _AuthManager(credential)
        credential.update("agent@example.com", "new")
        assert base64.b64decode(auth.token).endswith(b":old")

    def test_rejects_other_credentials(self):
        with pytest.raises(TypeError):
            _AuthManager("agent@example.com:token")
