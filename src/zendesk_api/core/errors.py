# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Structured exception hierarchy for the Zendesk API client.

Every error derives from :class:`ZendeskError` and carries a stable ``code``,
an optional ``subcode`` and a ``details`` mapping so failures can be logged or
serialized with :meth:`ZendeskError.to_dict`.

- :class:`ValidationError`: caller input rejected before any request is sent.
- :class:`ApiError`: terminal failure of one logical API call.
- :class:`DecodeError`: a successful status whose body is not UTF-8 JSON.
- :class:`RateLimitedError` / :class:`OverloadedError`: transient failures,
  only raised once a configured retry limit is exhausted.
- :class:`CacheBackendError`: raised by cache backends; absorbed by the client.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, Optional

from ._error_codes import HTTP_429, HTTP_503, RESPONSE_DECODE_FAILED

_BODY_EXCERPT_LIMIT = 512


class ZendeskError(Exception):
    """Base structured error for the Zendesk API client."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        source: Optional[str] = None,
        is_transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.status_code = status_code
        self.details = details or {}
        self.source = source or "client"
        self.is_transient = is_transient
        self.timestamp = _dt.datetime.now(_dt.timezone.utc).isoformat().replace("+00:00", "Z")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "subcode": self.subcode,
            "status_code": self.status_code,
            "details": self.details,
            "source": self.source,
            "is_transient": self.is_transient,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(code={self.code!r}, subcode={self.subcode!r}, message={self.message!r})"


class ValidationError(ZendeskError):
    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="validation_error", subcode=subcode, details=details, source="client")


class CacheBackendError(ZendeskError):
    def __init__(self, message: str, *, key: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        d = details or {}
        if key is not None:
            d["key"] = key
        super().__init__(message, code="cache_backend_error", details=d, source="client")


class ApiError(ZendeskError):
    """
    Terminal failure of a single logical API call.

    :param message: Human readable summary.
    :type message: str
    :param status_code: HTTP status returned by the service, if any.
    :type status_code: int or None
    :param status_message: HTTP reason phrase, e.g. ``"Not Found"``.
    :type status_message: str or None
    :param body: Raw response body, kept whole for diagnostics.
    :type body: str or None
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        *,
        status_message: Optional[str] = None,
        body: Optional[str] = None,
        subcode: Optional[str] = None,
        is_transient: bool = False,
        retry_after: Optional[float] = None,
        details: Optional[Dict[str, Any]] = None,
        code: str = "api_error",
    ) -> None:
        d = details or {}
        if status_message is not None:
            d["status_message"] = status_message
        if body:
            d["body_excerpt"] = body[:_BODY_EXCERPT_LIMIT]
        if retry_after is not None:
            d["retry_after"] = retry_after
        super().__init__(
            message,
            code=code,
            subcode=subcode,
            status_code=status_code,
            details=d,
            source="server" if status_code is not None else "client",
            is_transient=is_transient,
        )
        self.status_message = status_message
        self.body = body


class DecodeError(ApiError):
    def __init__(self, message: str, status_code: Optional[int] = None, *, body: Optional[str] = None) -> None:
        super().__init__(
            message,
            status_code,
            body=body,
            subcode=RESPONSE_DECODE_FAILED,
            code="decode_error",
        )


class RateLimitedError(ApiError):
    def __init__(
        self,
        message: str,
        *,
        status_message: Optional[str] = None,
        body: Optional[str] = None,
        retry_after: Optional[float] = None,
    ) -> None:
        super().__init__(
            message,
            429,
            status_message=status_message,
            body=body,
            subcode=HTTP_429,
            is_transient=True,
            retry_after=retry_after,
            code="rate_limited",
        )


class OverloadedError(ApiError):
    def __init__(
        self,
        message: str,
        *,
        status_message: Optional[str] = None,
        body: Optional[str] = None,
        retry_after: Optional[float] = None,
    ) -> None:
        super().__init__(
            message,
            503,
            status_message=status_message,
            body=body,
            subcode=HTTP_503,
            is_transient=True,
            retry_after=retry_after,
            code="service_overloaded",
        )


__all__ = [
    "ZendeskError",
    "ValidationError",
    "CacheBackendError",
    "ApiError",
    "DecodeError",
    "RateLimitedError",
    "OverloadedError",
]
