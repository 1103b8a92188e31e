# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Python client for the Zendesk REST API.

Request execution retries on rate limiting and transient overload, list
endpoints are paginated transparently, and single-resource reads can be served
from a pluggable cache.
"""

from .client import ZendeskClient
from .core._cache import CacheBackend, DictCache
from .core.config import ZendeskConfig
from .core.errors import (
    ApiError,
    CacheBackendError,
    DecodeError,
    OverloadedError,
    RateLimitedError,
    ValidationError,
    ZendeskError,
)

__version__ = "0.1.0"

__all__ = [
    "ZendeskClient",
    "ZendeskConfig",
    "CacheBackend",
    "DictCache",
    "ZendeskError",
    "ValidationError",
    "ApiError",
    "DecodeError",
    "RateLimitedError",
    "OverloadedError",
    "CacheBackendError",
]
