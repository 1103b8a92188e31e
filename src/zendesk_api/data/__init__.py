# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data access layer for the Zendesk API client.

This module contains request execution with retry classification and
pagination over list endpoints.
"""

__all__ = []
