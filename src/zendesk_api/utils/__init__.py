# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Internal helpers for the Zendesk API client."""

__all__ = []
