# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Response classification for the request executor.

:func:`classify_response` turns one HTTP response into a :data:`RetryDecision`:

- :class:`Succeed`: 2xx with a decoded JSON body.
- :class:`RetryAfter`: 429, or a 503 reporting transient load shedding.
- :class:`Fail`: anything else, carrying the terminal error.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

import requests

from ..models.request import ApiResponse
from ._error_codes import http_subcode
from .errors import ApiError, DecodeError, OverloadedError, RateLimitedError

TRANSIENT_OVERLOAD_PHRASE = "Please try again in a moment"


@dataclass(frozen=True)
class Succeed:
    response: ApiResponse


@dataclass(frozen=True)
class RetryAfter:
    delay: float
    error: ApiError


@dataclass(frozen=True)
class Fail:
    error: ApiError


RetryDecision = Union[Succeed, RetryAfter, Fail]


def decode_json(content: bytes) -> Any:
    """Decode ``content`` as UTF-8 JSON; raises ``ValueError`` on failure."""
    return json.loads(content.decode("utf-8"))


def parse_retry_after(headers: Mapping[str, str]) -> Optional[int]:
    """Return the ``Retry-After`` header as non-negative seconds, or None if absent or unusable."""
    raw = headers.get("Retry-After")
    if raw is None:
        return None
    try:
        seconds = int(str(raw).strip())
    except (TypeError, ValueError):
        return None
    return seconds if seconds >= 0 else None


def _body_text(response: requests.Response) -> str:
    return (response.content or b"").decode("utf-8", errors="replace")


def _is_transient_overload(response: requests.Response) -> bool:
    try:
        payload = decode_json(response.content or b"")
    except ValueError:
        return False
    if not isinstance(payload, dict):
        return False
    description = payload.get("description")
    return isinstance(description, str) and TRANSIENT_OVERLOAD_PHRASE in description


def classify_response(
    response: requests.Response,
    *,
    rate_limit_backoff: float,
    overload_backoff: float,
) -> RetryDecision:
    """
    Classify one response.

    :param response: Response returned by the transport.
    :param rate_limit_backoff: Delay for a 429 without a usable ``Retry-After`` header.
    :param overload_backoff: Delay for a transient 503.
    :return: The decision driving the executor's retry loop.
    """
    status = response.status_code
    reason = getattr(response, "reason", None)
    headers = response.headers or {}

    if 200 <= status < 300:
        try:
            data = decode_json(response.content or b"")
        except ValueError as exc:
            return Fail(DecodeError(f"Could not decode response body as JSON: {exc}", status, body=_body_text(response)))
        return Succeed(ApiResponse(status, headers, data))

    body = _body_text(response)

    if status == 429:
        retry_after = parse_retry_after(headers)
        delay = float(retry_after) if retry_after is not None else rate_limit_backoff
        error = RateLimitedError(
            f"Zendesk API rate limit exceeded: http status: {status} {reason or ''}".rstrip(),
            status_message=reason,
            body=body,
            retry_after=delay,
        )
        return RetryAfter(delay, error)

    if status == 503 and _is_transient_overload(response):
        error = OverloadedError(
            f"Zendesk API temporarily overloaded: http status: {status} {reason or ''}".rstrip(),
            status_message=reason,
            body=body,
            retry_after=overload_backoff,
        )
        return RetryAfter(overload_backoff, error)

    return Fail(
        ApiError(
            f"Zendesk API Error: http status: {status} {reason or ''} Content: {body}",
            status,
            status_message=reason,
            body=body,
            subcode=http_subcode(status),
        )
    )
