# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Validated parameter structs for resource operations.

Each struct checks its fields on construction so malformed input is rejected
with :class:`~zendesk_api.core.errors.ValidationError` before any request is
sent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence
from urllib.parse import quote

from ..core._error_codes import (
    VALIDATION_EMPTY_IDS,
    VALIDATION_EMPTY_QUERY,
    VALIDATION_INVALID_ATTACHMENT,
    VALIDATION_INVALID_CHANGES,
    VALIDATION_INVALID_ID,
    VALIDATION_INVALID_SIZE,
    VALIDATION_INVALID_SORT_ORDER,
)
from ..core.errors import ValidationError

SORT_ORDERS = ("asc", "desc")


def require_id(value: Any, name: str) -> int:
    """Return ``value`` if it is a positive integer resource id."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(
            f"{name} must be a positive integer, got {value!r}",
            subcode=VALIDATION_INVALID_ID,
            details={"parameter": name},
        )
    return value


def require_size(value: Optional[int]) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(
            f"size must be a positive integer, got {value!r}",
            subcode=VALIDATION_INVALID_SIZE,
        )
    return value


def require_ids(values: Sequence[Any], name: str) -> List[int]:
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence) or not values:
        raise ValidationError(
            f"{name} must be a non-empty list of ids",
            subcode=VALIDATION_EMPTY_IDS,
            details={"parameter": name},
        )
    return [require_id(v, name) for v in values]


def require_changes(changes: Any) -> Dict[str, Any]:
    if not isinstance(changes, Mapping) or not changes:
        raise ValidationError(
            "changes must be a non-empty dict",
            subcode=VALIDATION_INVALID_CHANGES,
        )
    return dict(changes)


@dataclass(frozen=True)
class SearchParams:
    """
    Parameters of a search call.

    :param query: Zendesk search query, e.g. ``"type:ticket status:open"``.
    :param sort_by: Field to sort on (default ``updated_at``).
    :param sort_order: ``"asc"`` or ``"desc"`` (default ``desc``).
    :param size: Optional soft cap on the number of results.
    """

    query: str
    sort_by: str = "updated_at"
    sort_order: str = "desc"
    size: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.query, str) or not self.query.strip():
            raise ValidationError("query must be a non-empty string", subcode=VALIDATION_EMPTY_QUERY)
        if self.sort_order not in SORT_ORDERS:
            raise ValidationError(
                f"sort_order must be one of {SORT_ORDERS}, got {self.sort_order!r}",
                subcode=VALIDATION_INVALID_SORT_ORDER,
            )
        if not isinstance(self.sort_by, str) or not self.sort_by:
            raise ValidationError("sort_by must be a non-empty string")
        require_size(self.size)

    def to_path(self) -> str:
        return (
            f"/search.json?query={quote(self.query, safe='')}"
            f"&sort_by={quote(self.sort_by, safe='')}&sort_order={self.sort_order}"
        )


@dataclass(frozen=True)
class AttachmentRef:
    """
    The parts of a comment attachment needed to download it.

    :param content_url: Absolute URL of the attachment content.
    :param file_name: Name to store the file under.
    :param size: Size in bytes reported by the service, if known.
    """

    content_url: str
    file_name: str
    size: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.content_url or not self.file_name:
            raise ValidationError(
                "attachment requires content_url and file_name",
                subcode=VALIDATION_INVALID_ATTACHMENT,
            )
        if "/" in self.file_name or "\\" in self.file_name or self.file_name in (".", ".."):
            raise ValidationError(
                f"attachment file_name is not a plain file name: {self.file_name!r}",
                subcode=VALIDATION_INVALID_ATTACHMENT,
            )

    @classmethod
    def from_dict(cls, attachment: Mapping[str, Any]) -> "AttachmentRef":
        if not isinstance(attachment, Mapping):
            raise ValidationError("attachment must be a dict", subcode=VALIDATION_INVALID_ATTACHMENT)
        return cls(
            content_url=attachment.get("content_url") or "",
            file_name=attachment.get("file_name") or "",
            size=attachment.get("size"),
        )
