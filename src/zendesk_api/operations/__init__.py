# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Operation namespace classes for the Zendesk API client.

- TicketOperations: ticket reads and replies
- OrganizationOperations: organization reads, bulk reads, updates, members
- UserOperations: user reads and updates
- SearchOperations: search, optionally as a DataFrame
- AttachmentOperations: attachment downloads
"""

__all__ = []
