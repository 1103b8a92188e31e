# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Ticket operations namespace."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..core.errors import ValidationError
from ..models.page import TICKET_COMMENTS
from ..models.params import require_id
from ._resource import _ResourceOperations

logger = logging.getLogger(__name__)


class TicketOperations(_ResourceOperations):
    """
    Ticket reads and replies.

    Accessed via ``client.tickets``. Single tickets are cached under
    ``ticket-<id>``; adding a reply writes the returned ticket back to that key.

    Example::

        ticket = client.tickets.get(42)
        comments = client.tickets.comments(42)
        client.tickets.add_response(42, "We are looking into it.", public=True)
    """

    def get(self, ticket_id: int, *, no_cache: Optional[bool] = None) -> Dict[str, Any]:
        """
        Fetch one ticket.

        :param ticket_id: Ticket id.
        :type ticket_id: int
        :param no_cache: Bypass the cache for this call. Defaults to ``config.no_cache``.
        :type no_cache: bool or None
        :return: The ticket object (without the ``{"ticket": ...}`` envelope).
        :rtype: dict

        :raises ~zendesk_api.core.errors.ValidationError: If ``ticket_id`` is not a positive int.
        :raises ~zendesk_api.core.errors.ApiError: If the request fails.
        """
        require_id(ticket_id, "ticket_id")
        return self._get_resource(f"ticket-{ticket_id}", f"/tickets/{ticket_id}.json", "ticket", no_cache)

    def comments(self, ticket_id: int) -> List[Dict[str, Any]]:
        """Return every comment of a ticket, oldest first. Not cached."""
        require_id(ticket_id, "ticket_id")
        comments = self._client._get_api().paginate(f"/tickets/{ticket_id}/comments.json", TICKET_COMMENTS)
        logger.debug("Got %d comments for ticket %s", len(comments), ticket_id)
        return comments

    def attachments(self, ticket_id: int) -> List[Dict[str, Any]]:
        """Return the attachments of every comment of a ticket, in comment order."""
        attachments: List[Dict[str, Any]] = []
        for comment in self.comments(ticket_id):
            attachments.extend(comment.get("attachments") or [])
        return attachments

    def add_response(
        self,
        ticket_id: int,
        body: str,
        *,
        public: bool = False,
        no_cache: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """
        Add a comment to a ticket.

        :param ticket_id: Ticket id.
        :type ticket_id: int
        :param body: Comment text.
        :type body: str
        :param public: Whether the requester can see the comment. Default False (internal note).
        :type public: bool
        :param no_cache: Skip writing the updated ticket to the cache.
        :type no_cache: bool or None
        :return: The updated ticket object.
        :rtype: dict
        """
        require_id(ticket_id, "ticket_id")
        if not isinstance(body, str) or not body.strip():
            raise ValidationError("body must be a non-empty string")
        payload = {"ticket": {"comment": {"public": bool(public), "body": body}}}
        return self._put_resource(
            f"ticket-{ticket_id}",
            f"/tickets/{ticket_id}.json",
            "ticket",
            ticket_id,
            payload,
            no_cache,
        )
