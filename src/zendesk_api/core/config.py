# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, TypeVar

from ._error_codes import VALIDATION_INVALID_CONFIG
from .errors import ValidationError

_T = TypeVar("_T")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class ZendeskConfig:
    """
    Configuration settings for Zendesk client operations.

    :param api_path: Path appended to the account URL to form the API root (default: ``/api/v2``).
    :type api_path: str
    :param rate_limit_backoff: Seconds to wait after a 429 response without a usable
        ``Retry-After`` header (default: 10).
    :type rate_limit_backoff: float
    :param overload_backoff: Seconds to wait after a transient 503 response (default: 1).
    :type overload_backoff: float
    :param max_retries: Maximum number of rate-limit/overload retries per call. ``None``
        retries until the service recovers.
    :type max_retries: int or None
    :param http_retries: Maximum attempts for network-level failures (default: 5).
    :type http_retries: int or None
    :param http_backoff: Base delay in seconds for network-level retries (default: 0.5).
    :type http_backoff: float or None
    :param http_timeout: Request timeout in seconds (default: method-dependent).
    :type http_timeout: float or None
    :param no_cache: Bypass the cache for every call unless overridden per call.
    :type no_cache: bool
    :param log_level: Level applied to the ``zendesk_api`` logger, e.g. ``"DEBUG"``.
        ``None`` leaves logging configuration to the application.
    :type log_level: str or None

    :raises ~zendesk_api.core.errors.ValidationError: If a delay is negative or not finite,
        a retry count is negative, or ``log_level`` is not a known level name.
    """

    api_path: str = "/api/v2"

    # Service-directed backoff
    rate_limit_backoff: float = 10.0
    overload_backoff: float = 1.0
    max_retries: Optional[int] = None

    # Transport tuning
    http_retries: Optional[int] = None
    http_backoff: Optional[float] = None
    http_timeout: Optional[float] = None

    no_cache: bool = False
    log_level: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("rate_limit_backoff", "overload_backoff", "http_backoff"):
            value = getattr(self, name)
            if value is not None and not (math.isfinite(value) and value >= 0):
                raise _invalid(name, value, "must be a finite number of seconds >= 0")
        if self.http_timeout is not None and not (math.isfinite(self.http_timeout) and self.http_timeout > 0):
            raise _invalid("http_timeout", self.http_timeout, "must be a finite number of seconds > 0")
        for name in ("max_retries", "http_retries"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise _invalid(name, value, "must be >= 0")
        if self.log_level is not None and not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise _invalid("log_level", self.log_level, "is not a logging level name")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ZendeskConfig":
        """
        Create a configuration instance from ``ZENDESK_*`` environment variables.

        Unset variables keep the dataclass defaults.

        :param environ: Mapping to read instead of :data:`os.environ`.
        :type environ: ~typing.Mapping[str, str] or None
        :return: Configuration instance.
        :rtype: ~zendesk_api.core.config.ZendeskConfig
        :raises ~zendesk_api.core.errors.ValidationError: If a variable cannot be parsed.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            api_path=env.get("ZENDESK_API_PATH", defaults.api_path),
            rate_limit_backoff=_read(env, "ZENDESK_RATE_LIMIT_BACKOFF", float, defaults.rate_limit_backoff),
            overload_backoff=_read(env, "ZENDESK_OVERLOAD_BACKOFF", float, defaults.overload_backoff),
            max_retries=_read(env, "ZENDESK_MAX_RETRIES", int, defaults.max_retries),
            http_retries=_read(env, "ZENDESK_HTTP_RETRIES", int, defaults.http_retries),
            http_backoff=_read(env, "ZENDESK_HTTP_BACKOFF", float, defaults.http_backoff),
            http_timeout=_read(env, "ZENDESK_HTTP_TIMEOUT", float, defaults.http_timeout),
            no_cache=_read(env, "ZENDESK_NO_CACHE", _parse_bool, defaults.no_cache),
            log_level=env.get("ZENDESK_LOG_LEVEL") or defaults.log_level,
        )


def _invalid(name: str, value, reason: str) -> ValidationError:
    return ValidationError(
        f"Invalid {name}: {value!r} {reason}",
        subcode=VALIDATION_INVALID_CONFIG,
        details={"field": name, "value": value},
    )


def _parse_bool(value: str) -> bool:
    v = value.strip().lower()
    if v in _TRUE_VALUES:
        return True
    if v in _FALSE_VALUES:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def _read(env: Mapping[str, str], name: str, parse: Callable[[str], _T], default):
    raw = env.get(name)
    if raw is None:
        return default
    try:
        return parse(raw)
    except ValueError as exc:
        raise ValidationError(
            f"Invalid value for {name}: {raw!r}",
            subcode=VALIDATION_INVALID_CONFIG,
            details={"variable": name},
        ) from exc
