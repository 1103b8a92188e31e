# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Blocking HTTP transport for the Zendesk API client.

This module provides :class:`~zendesk_api.core._http._HttpClient`, a thin wrapper
around the requests library. It applies per-method default timeouts, reuses an
optional :class:`requests.Session`, and retries network-level failures only.
Status-code driven retries (429, 503) belong to the request executor in
:mod:`zendesk_api.data._api`.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)


class _HttpClient:
    """
    HTTP transport with network-error retry, timeout handling, and optional session support.

    :param retries: Maximum number of attempts for network errors. Default is 5.
    :type retries: :class:`int` | None
    :param backoff: Base delay in seconds between network retry attempts. Default is 0.5.
    :type backoff: :class:`float` | None
    :param timeout: Default request timeout in seconds. If None, uses per-method defaults.
    :type timeout: :class:`float` | None
    :param session: Optional requests.Session for connection pooling.
    :type session: :class:`requests.Session` | None
    """

    def __init__(
        self,
        retries: Optional[int] = None,
        backoff: Optional[float] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.max_attempts = max(1, retries) if retries is not None else 5
        self.base_delay = backoff if backoff is not None else 0.5
        self.default_timeout: Optional[float] = timeout
        self._session = session

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """
        Send one HTTP request, retrying on network errors with exponential backoff.

        Applies default timeouts based on HTTP method (120s for PUT, 10s for others)
        when the caller and the configuration leave it unset.

        :param method: HTTP method (GET or PUT).
        :type method: :class:`str`
        :param url: Target URL for the request.
        :type url: :class:`str`
        :param kwargs: Additional arguments passed to ``requests.request()`` or
            ``session.request()``, including headers, data, stream, etc.
        :return: HTTP response object, whatever its status code.
        :rtype: :class:`requests.Response`
        :raises requests.exceptions.RequestException: If all attempts fail.
        """
        if "timeout" not in kwargs:
            if self.default_timeout is not None:
                kwargs["timeout"] = self.default_timeout
            else:
                m = (method or "").lower()
                kwargs["timeout"] = 120 if m == "put" else 10

        for attempt in range(self.max_attempts):
            try:
                if self._session is not None:
                    return self._session.request(method, url, **kwargs)
                return requests.request(method, url, **kwargs)
            except requests.exceptions.RequestException as exc:
                if attempt >= self.max_attempts - 1:
                    raise
                delay = self.base_delay * (2**attempt)
                logger.warning("Network error on %s %s (%s), retrying in %.1fs", method, url, exc, delay)
                time.sleep(delay)
        # Unreachable: the final attempt either returns or re-raises
        raise RuntimeError("Unexpected end of retry loop")

    def close(self) -> None:
        """
        Close the HTTP client and release resources.

        If a session was provided, this method closes it. Safe to call multiple times.
        """
        if self._session is not None:
            self._session.close()
            self._session = None
