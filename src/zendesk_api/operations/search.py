# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Search operations namespace."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, TYPE_CHECKING

import pandas as pd

from ..models.page import SEARCH_RESULTS
from ..models.params import SearchParams
from ..utils._pandas import records_to_dataframe

if TYPE_CHECKING:
    from ..client import ZendeskClient

logger = logging.getLogger(__name__)


class SearchOperations:
    """
    Full-text search over tickets, users and organizations.

    Accessed via ``client.search``. Results are never cached.

    Example::

        open_tickets = client.search.search("type:ticket status:open", size=100)
        df = client.search.search_dataframe("type:user organization:elastic", columns=["id", "email"])
    """

    def __init__(self, client: "ZendeskClient") -> None:
        self._client = client

    def search(
        self,
        query: str,
        *,
        sort_by: str = "updated_at",
        sort_order: str = "desc",
        size: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Run a search and collect its results across pages.

        :param query: Zendesk search query.
        :type query: str
        :param sort_by: Sort field. Default ``updated_at``.
        :type sort_by: str
        :param sort_order: ``"asc"`` or ``"desc"``. Default ``desc``.
        :type sort_order: str
        :param size: Stop fetching pages once at least this many results were collected.
            The result can be longer than ``size`` since whole pages are kept; slice it
            if an exact count is needed.
        :type size: int or None
        :return: Search results in service order.
        :rtype: list[dict]

        :raises ~zendesk_api.core.errors.ValidationError: If the parameters are invalid.
        :raises ~zendesk_api.core.errors.ApiError: If a page request fails.
        """
        params = SearchParams(query=query, sort_by=sort_by, sort_order=sort_order, size=size)
        logger.debug("Searching: %s", params.query)
        results = self._client._get_api().paginate(params.to_path(), SEARCH_RESULTS, params.size)
        logger.debug("Got %d results from query", len(results))
        return results

    def search_dataframe(
        self,
        query: str,
        *,
        sort_by: str = "updated_at",
        sort_order: str = "desc",
        size: Optional[int] = None,
        columns: Optional[Sequence[str]] = None,
    ) -> pd.DataFrame:
        """
        Run a search and return the results as a :class:`pandas.DataFrame`.

        Takes the same arguments as :meth:`search`, plus ``columns`` to select and
        order the DataFrame columns.
        """
        results = self.search(query, sort_by=sort_by, sort_order=sort_order, size=size)
        return records_to_dataframe(results, columns)
