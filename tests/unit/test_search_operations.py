# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import unittest

import pandas as pd
import pytest

from zendesk_api.core._cache import DictCache
from zendesk_api.core.errors import ValidationError

NEXT = "https://example.zendesk.com/api/v2/search.json?page=2"


def _results(start, count):
    return [{"id": i, "result_type": "ticket", "subject": f"s{i}"} for i in range(start, start + count)]


class TestSearch(unittest.TestCase):
    """Tests for client.search.search."""

    @pytest.fixture(autouse=True)
    def _inject(self, make_client, make_page):
        self.make_client = make_client
        self.page = make_page

    def test_builds_search_path(self):
        client = self.make_client([(200, {}, self.page("results", []))])
        client.search.search("type:ticket status:open")
        self.assertEqual(
            client._api._http.urls[0],
            "https://example.zendesk.com/api/v2/search.json?query=type%3Aticket%20status%3Aopen"
            "&sort_by=updated_at&sort_order=desc&page=1",
        )

    def test_collects_pages(self):
        client = self.make_client(
            [
                (200, {}, self.page("results", _results(0, 3), NEXT)),
                (200, {}, self.page("results", _results(3, 2))),
            ]
        )
        self.assertEqual([r["id"] for r in client.search.search("x")], [0, 1, 2, 3, 4])

    def test_size_limits_pages(self):
        client = self.make_client(
            [
                (200, {}, self.page("results", _results(0, 3), NEXT)),
                (200, {}, self.page("results", _results(3, 3), NEXT)),
            ]
        )
        results = client.search.search("x", size=4)
        self.assertEqual(len(results), 6)
        self.assertEqual(len(client._api._http.calls), 2)

    def test_not_cached(self):
        cache = DictCache()
        client = self.make_client(
            [(200, {}, self.page("results", [])), (200, {}, self.page("results", []))],
            cache=cache,
        )
        client.search.search("x")
        client.search.search("x")
        self.assertEqual(len(client._api._http.calls), 2)
        self.assertEqual(len(cache), 0)

    def test_invalid_sort_order(self):
        client = self.make_client([])
        with self.assertRaises(ValidationError):
            client.search.search("x", sort_order="sideways")
        self.assertEqual(client._api._http.calls, [])


class TestSearchDataFrame(unittest.TestCase):
    """Tests for client.search.search_dataframe."""

    @pytest.fixture(autouse=True)
    def _inject(self, make_client, make_page):
        self.make_client = make_client
        self.page = make_page

    def test_returns_dataframe(self):
        client = self.make_client([(200, {}, self.page("results", _results(0, 2)))])
        df = client.search.search_dataframe("x")
        self.assertIsInstance(df, pd.DataFrame)
        self.assertEqual(len(df), 2)
        self.assertListEqual(df["subject"].tolist(), ["s0", "s1"])

    def test_columns_selected(self):
        client = self.make_client([(200, {}, self.page("results", _results(0, 2)))])
        df = client.search.search_dataframe("x", columns=["id", "subject"])
        self.assertListEqual(list(df.columns), ["id", "subject"])

    def test_empty_results(self):
        client = self.make_client([(200, {}, self.page("results", []))])
        df = client.search.search_dataframe("x", columns=["id"])
        self.assertTrue(df.empty)
        self.assertListEqual(list(df.columns), ["id"])
