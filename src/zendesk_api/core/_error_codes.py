# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Error subcode constants for the Zendesk API client.

Subcodes refine the coarse ``code`` carried by every
:class:`~zendesk_api.core.errors.ZendeskError` so callers can branch on a
stable string instead of parsing messages.
"""

from __future__ import annotations

# HTTP subcode constants
HTTP_400 = "http_400"
HTTP_401 = "http_401"
HTTP_403 = "http_403"
HTTP_404 = "http_404"
HTTP_409 = "http_409"
HTTP_422 = "http_422"
HTTP_429 = "http_429"
HTTP_500 = "http_500"
HTTP_502 = "http_502"
HTTP_503 = "http_503"
HTTP_504 = "http_504"

_HTTP_STATUS_TO_SUBCODE = {
    400: HTTP_400,
    401: HTTP_401,
    403: HTTP_403,
    404: HTTP_404,
    409: HTTP_409,
    422: HTTP_422,
    429: HTTP_429,
    500: HTTP_500,
    502: HTTP_502,
    503: HTTP_503,
    504: HTTP_504,
}

# Validation subcodes
VALIDATION_INVALID_ID = "validation_invalid_id"
VALIDATION_EMPTY_IDS = "validation_empty_ids"
VALIDATION_EMPTY_QUERY = "validation_empty_query"
VALIDATION_INVALID_SORT_ORDER = "validation_invalid_sort_order"
VALIDATION_INVALID_SIZE = "validation_invalid_size"
VALIDATION_INVALID_CHANGES = "validation_invalid_changes"
VALIDATION_UNSUPPORTED_METHOD = "validation_unsupported_method"
VALIDATION_INVALID_ATTACHMENT = "validation_invalid_attachment"
VALIDATION_INVALID_CONFIG = "validation_invalid_config"

# Response subcodes
RESPONSE_DECODE_FAILED = "decode_failed"
RESPONSE_MALFORMED = "malformed_response"
RESPONSE_ID_MISMATCH = "response_id_mismatch"


def http_subcode(status_code: int) -> str:
    """Return the subcode for an HTTP status, ``http_<status>`` for unlisted codes."""
    return _HTTP_STATUS_TO_SUBCODE.get(status_code, f"http_{status_code}")
