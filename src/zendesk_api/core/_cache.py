# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Cache-aside support for resource reads and write-through after mutations.

The client does not own a cache implementation. Any object satisfying
:class:`CacheBackend` can be passed to :class:`~zendesk_api.client.ZendeskClient`;
expiry and eviction are the backend's business. Backend failures never fail an
API call: a failed read is a miss and a failed write is logged.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Protocol, TypeVar, runtime_checkable

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


@runtime_checkable
class CacheBackend(Protocol):
    """Key/value store used by the client. ``get`` returns ``None`` on a miss."""

    def get(self, key: str) -> Optional[Any]: ...

    def set(self, key: str, value: Any) -> None: ...


class DictCache:
    """Process-local backend over a plain dict. No expiry, no eviction."""

    def __init__(self) -> None:
        self._data: Dict[str, Any] = {}

    def get(self, key: str) -> Optional[Any]:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)


class _CacheAside:
    """
    Fetch-or-compute and write-through around an optional backend.

    :param backend: Cache backend, or None to disable caching entirely.
    :type backend: ~zendesk_api.core._cache.CacheBackend or None
    """

    def __init__(self, backend: Optional[CacheBackend] = None) -> None:
        self._backend = backend

    @property
    def backend(self) -> Optional[CacheBackend]:
        return self._backend

    def _get(self, key: str) -> Optional[Any]:
        if self._backend is None:
            return None
        try:
            return self._backend.get(key)
        except Exception:
            logger.warning("Cache read failed for %s, treating as miss", key, exc_info=True)
            return None

    def write(self, key: str, value: Any, no_cache: bool = False) -> None:
        """Store ``value`` under ``key`` unless caching is bypassed or disabled."""
        if no_cache or self._backend is None:
            return
        try:
            self._backend.set(key, value)
        except Exception:
            logger.warning("Cache write failed for %s, ignoring", key, exc_info=True)

    def fetch_or_compute(self, key: str, no_cache: bool, compute: Callable[[], _T]) -> _T:
        """
        Return the cached value for ``key`` or compute, store and return it.

        :param key: Cache key, owned by the caller.
        :param no_cache: Skip both the cache read and the cache write.
        :param compute: Zero-argument callable producing the value (usually an API call).
        :return: Cached or freshly computed value.
        """
        if not no_cache:
            cached = self._get(key)
            if cached is not None:
                logger.debug("Cache hit: %s", key)
                return cached
            logger.debug("Cache miss: %s", key)
        value = compute()
        self.write(key, value, no_cache)
        return value

    def lookup(self, key: str, no_cache: bool = False) -> Optional[Any]:
        """Read ``key`` without computing; ``None`` on miss or bypass."""
        if no_cache:
            return None
        return self._get(key)
