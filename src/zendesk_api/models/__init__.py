# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data models and type definitions for the Zendesk API client.

- :mod:`~zendesk_api.models.request`: ``ApiRequest`` and ``ApiResponse``.
- :mod:`~zendesk_api.models.page`: page schemas and the page cursor.
- :mod:`~zendesk_api.models.params`: validated per-operation parameters.

Import directly from the specific module files.
"""

__all__ = []
