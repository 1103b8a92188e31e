# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Core infrastructure components for the Zendesk API client.

This module contains configuration, authentication, the HTTP transport,
response classification, cache-aside support and error handling.
"""

from .config import ZendeskConfig
from .errors import (
    ZendeskError,
    ValidationError,
    ApiError,
    DecodeError,
    RateLimitedError,
    OverloadedError,
    CacheBackendError,
)

__all__ = [
    "ZendeskConfig",
    "ZendeskError",
    "ValidationError",
    "ApiError",
    "DecodeError",
    "RateLimitedError",
    "OverloadedError",
    "CacheBackendError",
]
