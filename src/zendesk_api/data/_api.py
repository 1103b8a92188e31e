# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Low-level Zendesk REST client: request execution and pagination.

:class:`_ApiClient` issues each logical call through the transport, classifies
the response with :func:`~zendesk_api.core._retry.classify_response`, and
sleeps and retries while the service reports rate limiting (429) or transient
overload (503). Terminal outcomes raise :class:`~zendesk_api.core.errors.ApiError`.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

import requests

from ..core._auth import _AuthManager
from ..core._error_codes import http_subcode
from ..core._http import _HttpClient
from ..core._retry import Fail, RetryAfter, RetryDecision, Succeed, classify_response
from ..core.config import ZendeskConfig
from ..core.errors import ApiError
from ..models.page import PageCursor, PageSchema
from ..models.request import ApiRequest, ApiResponse

logger = logging.getLogger(__name__)

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_DOWNLOAD_CHUNK_SIZE = 64 * 1024


class _ApiClient:
    """Zendesk REST client: authenticated request execution with retry, and pagination."""

    def __init__(
        self,
        auth: _AuthManager,
        base_url: str,
        config: Optional[ZendeskConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.auth = auth
        self.base_url = (base_url or "").rstrip("/")
        if not self.base_url:
            raise ValueError("base_url is required.")
        self.config = config or ZendeskConfig.from_env()
        self.api = f"{self.base_url}{self.config.api_path}"
        self._http = _HttpClient(
            retries=self.config.http_retries,
            backoff=self.config.http_backoff,
            timeout=self.config.http_timeout,
            session=session,
        )

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": self.auth._authorization_header(),
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        return self._http._request(method, url, **kwargs)

    def close(self) -> None:
        self._http.close()

    # ----------------------------- execution ---------------------------------
    def _classify(self, response: requests.Response) -> RetryDecision:
        return classify_response(
            response,
            rate_limit_backoff=self.config.rate_limit_backoff,
            overload_backoff=self.config.overload_backoff,
        )

    def _execute_response(self, request: ApiRequest) -> ApiResponse:
        """
        Run ``request`` until a terminal outcome and return the decoded response.

        :raises ~zendesk_api.core.errors.ApiError: On any terminal failure, or when
            ``config.max_retries`` retries have been spent on 429/503 responses.
        """
        url = f"{self.api}{request.path}"
        retries = 0
        while True:
            logger.debug("Requesting from Zendesk (%s): %s (attempt %d)", request.method, url, retries + 1)
            kwargs: Dict[str, Any] = {"headers": self._headers()}
            if request.body is not None:
                kwargs["data"] = request.body
            response = self._request(request.method, url, **kwargs)
            if logger.isEnabledFor(TRACE):
                logger.log(
                    TRACE,
                    "Zendesk API response: http status: %s %s Content: %s",
                    response.status_code,
                    getattr(response, "reason", ""),
                    (response.content or b"").decode("utf-8", errors="replace"),
                )

            decision = self._classify(response)
            if isinstance(decision, Succeed):
                return decision.response
            if isinstance(decision, Fail):
                raise decision.error
            if isinstance(decision, RetryAfter):
                if self.config.max_retries is not None and retries >= self.config.max_retries:
                    logger.warning("Giving up on %s %s after %d retries", request.method, url, retries)
                    raise decision.error
                retries += 1
                logger.warning(
                    "Received %s from Zendesk... going to retry in %s seconds (retry %d)",
                    response.status_code,
                    decision.delay,
                    retries,
                )
                time.sleep(decision.delay)

    def execute(self, request: ApiRequest) -> Any:
        """
        Execute one logical API call and return its decoded JSON body.

        :param request: Request to send.
        :type request: ~zendesk_api.models.request.ApiRequest
        :return: Decoded JSON value.
        :raises ~zendesk_api.core.errors.ApiError: On terminal failure.
        """
        return self._execute_response(request).data

    # ----------------------------- pagination ---------------------------------
    def iter_pages(
        self,
        path: str,
        schema: Union[PageSchema, str],
        size: Optional[int] = None,
    ) -> Iterator[List[Any]]:
        """
        Yield the items of each page of a paginated endpoint.

        Stops after a page without ``next_page``, or once at least ``size`` items
        have been yielded in total. The cap is only checked between pages.
        """
        if isinstance(schema, str):
            schema = PageSchema(schema)
        cursor = PageCursor(path=path, schema=schema, size=size)
        while True:
            page_path = cursor.page_path()
            payload = self.execute(ApiRequest.get(page_path))
            page_items = cursor.extend(payload, page_path)
            yield page_items
            if not cursor.should_continue(payload):
                return

    def paginate(
        self,
        path: str,
        schema: Union[PageSchema, str],
        size: Optional[int] = None,
    ) -> List[Any]:
        """
        Collect the items of a paginated endpoint, in page order.

        :param path: Endpoint path, may already carry a query string.
        :param schema: Page schema, or a bare envelope field name.
        :param size: Optional soft cap. The result may exceed it by up to one page.
        :return: All collected items.
        """
        results: List[Any] = []
        for page_items in self.iter_pages(path, schema, size):
            results.extend(page_items)
        logger.debug("Got %d results from %s", len(results), path)
        return results

    # ----------------------------- downloads ---------------------------------
    def _download(self, url: str, target: Path) -> Path:
        """Stream ``url`` into ``target``; a partial file is removed on failure."""
        headers = {"Authorization": self.auth._authorization_header()}
        response = self._request("GET", url, headers=headers, stream=True)
        try:
            if not 200 <= response.status_code < 300:
                body = (response.content or b"").decode("utf-8", errors="replace")
                raise ApiError(
                    f"Zendesk API Error: http status: {response.status_code} {response.reason or ''}",
                    response.status_code,
                    status_message=response.reason,
                    body=body,
                    subcode=http_subcode(response.status_code),
                )
            try:
                with open(target, "wb") as fh:
                    for chunk in response.iter_content(chunk_size=_DOWNLOAD_CHUNK_SIZE):
                        if chunk:
                            fh.write(chunk)
            except BaseException:
                target.unlink(missing_ok=True)
                raise
        finally:
            response.close()
        return target
