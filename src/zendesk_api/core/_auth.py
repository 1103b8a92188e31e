# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Authentication helpers for the Zendesk API client.

Zendesk API tokens are sent as HTTP Basic credentials of the form
``<email>/token:<api_token>``. The username and token are supplied through
:class:`~azure.core.credentials.AzureNamedKeyCredential`, whose ``name`` is the
agent email and whose ``key`` is the API token.
"""

from __future__ import annotations

import base64

from azure.core.credentials import AzureNamedKeyCredential


class _AuthManager:
    """
    Build and hold the authorization token for one client instance.

    The token is computed once on construction; rotating the key on the
    credential afterwards does not affect an existing manager.

    :param credential: Named key credential carrying the username and API token.
    :type credential: ~azure.core.credentials.AzureNamedKeyCredential
    :raises TypeError: If ``credential`` is not an ``AzureNamedKeyCredential``.
    """

    def __init__(self, credential: AzureNamedKeyCredential) -> None:
        if not isinstance(credential, AzureNamedKeyCredential):
            raise TypeError("credential must be an azure.core.credentials.AzureNamedKeyCredential.")
        name, key = credential.named_key
        self._token = base64.b64encode(f"{name}/token:{key}".encode("utf-8")).decode("ascii")

    @property
    def token(self) -> str:
        return self._token

    def _authorization_header(self) -> str:
        return f"Basic {self._token}"
