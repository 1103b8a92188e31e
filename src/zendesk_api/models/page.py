# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Pagination types for list endpoints.

Zendesk list endpoints wrap their items in an envelope keyed by a
service-defined field name and report further pages through ``next_page``::

    {"users": [...], "next_page": "https://.../users.json?page=2", "count": 57}

:class:`PageSchema` declares that field (and the expected item type) per
endpoint; :class:`PageCursor` tracks the traversal state of one paginated call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..core._error_codes import RESPONSE_MALFORMED
from ..core.errors import ApiError


@dataclass(frozen=True)
class PageSchema:
    """
    Shape of one paginated endpoint.

    :param field: Envelope key holding the page items.
    :type field: str
    :param item_type: Type every item must have (``dict`` for resource objects).
    :type item_type: type
    """

    field: str
    item_type: type = dict

    def extract(self, payload: Any, path: str) -> List[Any]:
        """
        Return the items of one decoded page.

        :raises ~zendesk_api.core.errors.ApiError: If the page is not an object,
            the field is missing or not a list, or an item has the wrong type.
        """
        if not isinstance(payload, dict) or self.field not in payload:
            raise ApiError(
                f"Malformed page from {path}: missing '{self.field}'",
                subcode=RESPONSE_MALFORMED,
                details={"path": path, "field": self.field},
            )
        items = payload[self.field]
        if not isinstance(items, list):
            raise ApiError(
                f"Malformed page from {path}: '{self.field}' is {type(items).__name__}, expected list",
                subcode=RESPONSE_MALFORMED,
                details={"path": path, "field": self.field},
            )
        for item in items:
            if not isinstance(item, self.item_type):
                raise ApiError(
                    f"Malformed page from {path}: '{self.field}' item is {type(item).__name__}, "
                    f"expected {self.item_type.__name__}",
                    subcode=RESPONSE_MALFORMED,
                    details={"path": path, "field": self.field},
                )
        return items


# Endpoint schemas
SEARCH_RESULTS = PageSchema("results")
TICKET_COMMENTS = PageSchema("comments")
ORGANIZATIONS = PageSchema("organizations")
USERS = PageSchema("users")


@dataclass
class PageCursor:
    """
    Traversal state of one paginated call.

    :param path: Endpoint path, possibly with a query string already.
    :param schema: Schema of the endpoint's pages.
    :param size: Optional soft cap; checked only between pages.
    """

    path: str
    schema: PageSchema
    size: Optional[int] = None
    page: int = 1
    items: List[Any] = field(default_factory=list)

    def page_path(self) -> str:
        sep = "&" if "?" in self.path else "?"
        return f"{self.path}{sep}page={self.page}"

    def extend(self, payload: Any, path: str) -> List[Any]:
        """Append the items of ``payload`` and advance to the next page."""
        page_items = self.schema.extract(payload, path)
        self.items.extend(page_items)
        self.page += 1
        return page_items

    def should_continue(self, payload: Any) -> bool:
        if not payload.get("next_page"):
            return False
        return not self.size or len(self.items) < self.size
