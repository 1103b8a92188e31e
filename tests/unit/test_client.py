# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import logging

import pytest
from azure.core.credentials import AzureNamedKeyCredential

import zendesk_api
from zendesk_api.client import ZendeskClient
from zendesk_api.core.config import ZendeskConfig
from zendesk_api.core.errors import ValidationError
from zendesk_api.operations.attachments import AttachmentOperations
from zendesk_api.operations.search import SearchOperations
from zendesk_api.operations.tickets import TicketOperations
from zendesk_api.operations.users import UserOperations


@pytest.fixture
def cred():
    return AzureNamedKeyCredential("agent@example.com", "token")


def test_base_url_trailing_slash_removed(cred):
    client = ZendeskClient("https://example.zendesk.com/", cred, ZendeskConfig())
    assert client._get_api().api == "https://example.zendesk.com/api/v2"


@pytest.mark.parametrize("url", ["", None, "/"])
def test_base_url_required(cred, url):
    with pytest.raises(ValueError):
        ZendeskClient(url, cred, ZendeskConfig())


def test_credential_type_checked():
    with pytest.raises(TypeError):
        ZendeskClient("https://example.zendesk.com", object(), ZendeskConfig())


def test_namespaces(cred):
    client = ZendeskClient("https://example.zendesk.com", cred, ZendeskConfig())
    assert isinstance(client.tickets, TicketOperations)
    assert isinstance(client.users, UserOperations)
    assert isinstance(client.search, SearchOperations)
    assert isinstance(client.attachments, AttachmentOperations)


def test_lazy_api_client(cred):
    client = ZendeskClient("https://example.zendesk.com", cred, ZendeskConfig())
    assert client._api is None
    assert client._get_api() is client._get_api()


def test_log_level_applied(cred):
    logger = logging.getLogger("zendesk_api")
    previous = logger.level
    try:
        ZendeskClient("https://example.zendesk.com", cred, ZendeskConfig(log_level="debug"))
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(previous)


def test_from_env():
    env = {
        "ZENDESK_URL": "https://example.zendesk.com",
        "ZENDESK_USERNAME": "agent@example.com",
        "ZENDESK_TOKEN": "token",
        "ZENDESK_MAX_RETRIES": "3",
    }
    client = ZendeskClient.from_env(env)
    assert client._config.max_retries == 3
    assert client._get_api().base_url == "https://example.zendesk.com"


def test_from_env_missing_variables():
    with pytest.raises(ValidationError) as ei:
        ZendeskClient.from_env({"ZENDESK_URL": "https://example.zendesk.com"})
    assert ei.value.details["missing"] == ["ZENDESK_USERNAME", "ZENDESK_TOKEN"]


def test_package_exports():
    assert zendesk_api.ZendeskClient is ZendeskClient
    assert zendesk_api.__version__


def test_from_env_unknown_log_level_is_validation_error():
    env = {
        "ZENDESK_URL": "https://example.zendesk.com",
        "ZENDESK_USERNAME": "agent@example.com",
        "ZENDESK_TOKEN": "token",
        "ZENDESK_LOG_LEVEL": "verbose",
    }
    with pytest.raises(ValidationError) as ei:
        ZendeskClient.from_env(env)
    assert ei.value.details["field"] == "log_level"
