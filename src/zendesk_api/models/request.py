# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Request and response value types exchanged with the request executor.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..core._error_codes import VALIDATION_UNSUPPORTED_METHOD
from ..core.errors import ValidationError

SUPPORTED_METHODS = ("GET", "PUT")


@dataclass(frozen=True)
class ApiRequest:
    """
    One logical API call.

    :param method: ``"GET"`` or ``"PUT"`` (case-insensitive, stored upper case).
    :type method: str
    :param path: Path below the API root, including any query string,
        e.g. ``"/tickets/42.json"``.
    :type path: str
    :param body: Encoded request body, if any.
    :type body: bytes or None
    :raises ~zendesk_api.core.errors.ValidationError: If the method is not supported
        or the path is empty.

    Example::

        ApiRequest("GET", "/organizations/99.json")
        ApiRequest.put_json("/organizations/99.json", {"organization": {"notes": "vip"}})
    """

    method: str
    path: str
    body: Optional[bytes] = None

    def __post_init__(self) -> None:
        method = (self.method or "").upper()
        if method not in SUPPORTED_METHODS:
            raise ValidationError(
                f"Unsupported request method: {self.method!r}",
                subcode=VALIDATION_UNSUPPORTED_METHOD,
                details={"method": self.method},
            )
        if not self.path:
            raise ValidationError("path is required")
        object.__setattr__(self, "method", method)

    @classmethod
    def get(cls, path: str) -> "ApiRequest":
        return cls("GET", path)

    @classmethod
    def put_json(cls, path: str, payload: Any) -> "ApiRequest":
        """Build a PUT request whose body is ``payload`` serialized as UTF-8 JSON."""
        return cls("PUT", path, json.dumps(payload).encode("utf-8"))


@dataclass(frozen=True)
class ApiResponse:
    """
    A decoded successful response.

    :param status_code: HTTP status code (2xx).
    :type status_code: int
    :param headers: Response headers.
    :type headers: ~typing.Mapping[str, str]
    :param data: Decoded JSON body.
    :type data: Any
    """

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    data: Any = None
