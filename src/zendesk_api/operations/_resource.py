# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Shared plumbing for resource operation namespaces."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from ..core._error_codes import RESPONSE_ID_MISMATCH, RESPONSE_MALFORMED
from ..core.errors import ApiError
from ..data._api import TRACE
from ..models.page import PageSchema
from ..models.request import ApiRequest

if TYPE_CHECKING:
    from ..client import ZendeskClient

logger = logging.getLogger(__name__)


def _unwrap(payload: Any, envelope: str, path: str) -> Dict[str, Any]:
    """Return ``payload[envelope]`` or raise if the response is not shaped that way."""
    if not isinstance(payload, dict) or not isinstance(payload.get(envelope), dict):
        raise ApiError(
            f"Malformed response from {path}: missing '{envelope}' object",
            subcode=RESPONSE_MALFORMED,
            details={"path": path, "envelope": envelope},
        )
    return payload[envelope]


class _ResourceOperations:
    """Base for namespaces reading single resources through the cache and writing them back after updates."""

    def __init__(self, client: "ZendeskClient") -> None:
        self._client = client

    def _no_cache(self, no_cache: Optional[bool]) -> bool:
        return self._client._config.no_cache if no_cache is None else no_cache

    def _get_resource(self, key: str, path: str, envelope: str, no_cache: Optional[bool]) -> Dict[str, Any]:
        api = self._client._get_api()

        def fetch() -> Dict[str, Any]:
            logger.debug("%s not cached, requesting fresh", key)
            return _unwrap(api.execute(ApiRequest.get(path)), envelope, path)

        return self._client._cache.fetch_or_compute(key, self._no_cache(no_cache), fetch)

    def _get_list(self, key: str, path: str, schema: PageSchema, no_cache: Optional[bool]) -> List[Any]:
        api = self._client._get_api()
        return self._client._cache.fetch_or_compute(
            key,
            self._no_cache(no_cache),
            lambda: api.paginate(path, schema),
        )

    def _put_resource(
        self,
        key: str,
        path: str,
        envelope: str,
        resource_id: int,
        payload: Dict[str, Any],
        no_cache: Optional[bool],
    ) -> Dict[str, Any]:
        """
        PUT ``payload`` and write the echoed resource through to the cache.

        :raises ~zendesk_api.core.errors.ApiError: If the echoed id differs from
            ``resource_id``; the cache is left untouched in that case.
        """
        api = self._client._get_api()
        logger.log(TRACE, "Submitting to %s: %s", path, payload)
        response = api.execute(ApiRequest.put_json(path, payload))
        resource = _unwrap(response, envelope, path)
        echoed = resource.get("id")
        if echoed != resource_id:
            raise ApiError(
                f"Zendesk returned {envelope} {echoed!r} when updating {envelope} {resource_id}",
                subcode=RESPONSE_ID_MISMATCH,
                details={"path": path, "expected_id": resource_id, "returned_id": echoed},
            )
        self._client._cache.write(key, resource, self._no_cache(no_cache))
        return resource
