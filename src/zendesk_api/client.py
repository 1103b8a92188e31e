# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

import requests

from azure.core.credentials import AzureNamedKeyCredential

from .core._auth import _AuthManager
from .core._cache import CacheBackend, _CacheAside
from .core.config import ZendeskConfig
from .core.errors import ValidationError
from .data._api import _ApiClient
from .operations.attachments import AttachmentOperations
from .operations.organizations import OrganizationOperations
from .operations.search import SearchOperations
from .operations.tickets import TicketOperations
from .operations.users import UserOperations

_PACKAGE_LOGGER = "zendesk_api"


class ZendeskClient:
    """
    High-level client for the Zendesk REST API.

    The client owns the credentials, configuration and optional cache backend,
    and delegates HTTP work to an internal
    :class:`~zendesk_api.data._api._ApiClient` that handles retries on rate
    limiting and transient overload as well as pagination.

    **Context Manager Support (Recommended)**:
        Using the client as a context manager enables connection pooling and
        releases the session on exit::

            with ZendeskClient(url, credential) as client:
                ticket = client.tickets.get(42)

    Operations are grouped under namespaces:

    - ``client.tickets``: get, comments, attachments, add_response
    - ``client.organizations``: get, get_many, update, users
    - ``client.users``: get, update
    - ``client.search``: search, search_dataframe
    - ``client.attachments``: download

    :param base_url: Zendesk account URL, e.g. ``"https://example.zendesk.com"``.
        Trailing slash is removed.
    :type base_url: :class:`str`
    :param credential: Agent email (``name``) and API token (``key``).
    :type credential: ~azure.core.credentials.AzureNamedKeyCredential
    :param config: Optional configuration. Defaults to :meth:`ZendeskConfig.from_env`.
    :type config: ~zendesk_api.core.config.ZendeskConfig or None
    :param cache: Optional cache backend for single-resource reads and member lists.
        Without one every call goes to the service.
    :type cache: ~zendesk_api.core._cache.CacheBackend or None

    :raises ValueError: If ``base_url`` is missing or empty after trimming.
    :raises TypeError: If ``credential`` is not an ``AzureNamedKeyCredential``.

    Example::

        from azure.core.credentials import AzureNamedKeyCredential
        from zendesk_api import ZendeskClient, DictCache

        credential = AzureNamedKeyCredential("agent@example.com", "api-token")
        with ZendeskClient("https://example.zendesk.com", credential, cache=DictCache()) as client:
            org = client.organizations.get(99)
            client.organizations.update(99, {"notes": "renewal due"})
            results = client.search.search("type:ticket status:open", size=50)
    """

    def __init__(
        self,
        base_url: str,
        credential: AzureNamedKeyCredential,
        config: Optional[ZendeskConfig] = None,
        cache: Optional[CacheBackend] = None,
    ) -> None:
        self.auth = _AuthManager(credential)
        self._base_url = (base_url or "").rstrip("/")
        if not self._base_url:
            raise ValueError("base_url is required.")
        self._config = config or ZendeskConfig.from_env()
        self._cache = _CacheAside(cache)
        self._api: Optional[_ApiClient] = None
        self._session: Optional[requests.Session] = None
        self._owns_session: bool = False

        if self._config.log_level:
            logging.getLogger(_PACKAGE_LOGGER).setLevel(self._config.log_level.upper())

        self.tickets = TicketOperations(self)
        self.organizations = OrganizationOperations(self)
        self.users = UserOperations(self)
        self.search = SearchOperations(self)
        self.attachments = AttachmentOperations(self)

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        cache: Optional[CacheBackend] = None,
    ) -> "ZendeskClient":
        """
        Build a client from ``ZENDESK_URL``, ``ZENDESK_USERNAME`` and ``ZENDESK_TOKEN``.

        Other ``ZENDESK_*`` variables are read by :meth:`ZendeskConfig.from_env`.

        :raises ~zendesk_api.core.errors.ValidationError: If a required variable is unset.
        """
        env = os.environ if environ is None else environ
        missing = [name for name in ("ZENDESK_URL", "ZENDESK_USERNAME", "ZENDESK_TOKEN") if not env.get(name)]
        if missing:
            raise ValidationError(
                f"Missing environment variables: {', '.join(missing)}",
                details={"missing": missing},
            )
        credential = AzureNamedKeyCredential(env["ZENDESK_USERNAME"], env["ZENDESK_TOKEN"])
        return cls(env["ZENDESK_URL"], credential, ZendeskConfig.from_env(env), cache)

    def __enter__(self) -> "ZendeskClient":
        """
        Enter the context manager, creating a pooled HTTP session.

        :return: The client instance.
        :rtype: ZendeskClient
        """
        if self._session is None:
            self._session = requests.Session()
            self._owns_session = True
            if self._api is not None:
                # Rebuild so calls made from here on use the pooled session
                self._api.close()
                self._api = None
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """
        Close the client and release resources.

        Safe to call multiple times.
        """
        if self._api is not None:
            self._api.close()
            self._api = None
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None
            self._owns_session = False

    def _get_api(self) -> _ApiClient:
        """
        Get or create the internal API client.

        When a session exists (from the context manager), it is passed on for
        connection pooling.
        """
        if self._api is None:
            self._api = _ApiClient(
                self.auth,
                self._base_url,
                self._config,
                session=self._session,
            )
        return self._api


__all__ = ["ZendeskClient"]
