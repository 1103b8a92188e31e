# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""User operations namespace."""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..models.params import require_changes, require_id
from ._resource import _ResourceOperations


class UserOperations(_ResourceOperations):
    """
    User reads and updates, cached under ``user-<id>``.

    Accessed via ``client.users``.
    """

    def get(self, user_id: int, *, no_cache: Optional[bool] = None) -> Dict[str, Any]:
        require_id(user_id, "user_id")
        return self._get_resource(f"user-{user_id}", f"/users/{user_id}.json", "user", no_cache)

    def update(self, user_id: int, changes: Dict[str, Any], *, no_cache: Optional[bool] = None) -> Dict[str, Any]:
        """
        Update a user and refresh its cache entry.

        :param user_id: User id.
        :type user_id: int
        :param changes: Fields to change, e.g. ``{"user_fields": {"plan": "gold"}}``.
        :type changes: dict
        :return: The user as returned by the service.
        :rtype: dict
        """
        require_id(user_id, "user_id")
        return self._put_resource(
            f"user-{user_id}",
            f"/users/{user_id}.json",
            "user",
            user_id,
            {"user": require_changes(changes)},
            no_cache,
        )
