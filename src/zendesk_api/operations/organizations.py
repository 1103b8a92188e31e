# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Organization operations namespace."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..models.page import ORGANIZATIONS, USERS
from ..models.params import require_changes, require_id, require_ids
from ._resource import _ResourceOperations

logger = logging.getLogger(__name__)


class OrganizationOperations(_ResourceOperations):
    """
    Organization reads, bulk reads, updates and member listing.

    Accessed via ``client.organizations``. Cache keys:

    - ``organization-<id>``: one organization object.
    - ``organization-users-<id>``: the member list of one organization.

    Example::

        org = client.organizations.get(99)
        orgs = client.organizations.get_many([99, 100, 101])
        client.organizations.update(99, {"organization_fields": {"temp_lead": "jdoe"}})
        members = client.organizations.users(99)
    """

    def get(self, organization_id: int, *, no_cache: Optional[bool] = None) -> Dict[str, Any]:
        """
        Fetch one organization.

        Use :meth:`get_many` to fetch several organizations with one request.

        :param organization_id: Organization id.
        :type organization_id: int
        :param no_cache: Bypass the cache for this call. Defaults to ``config.no_cache``.
        :type no_cache: bool or None
        :return: The organization object.
        :rtype: dict
        """
        require_id(organization_id, "organization_id")
        return self._get_resource(
            f"organization-{organization_id}",
            f"/organizations/{organization_id}.json",
            "organization",
            no_cache,
        )

    def get_many(self, organization_ids: Sequence[int], *, no_cache: Optional[bool] = None) -> List[Dict[str, Any]]:
        """
        Fetch several organizations, reading cached ones from the cache.

        Organizations missing from the cache are requested together through
        ``show_many`` and written to the cache individually.

        :param organization_ids: Organization ids.
        :type organization_ids: list[int]
        :param no_cache: Bypass the cache for this call.
        :type no_cache: bool or None
        :return: Organizations in the order of ``organization_ids``. Ids unknown to
            the service are left out.
        :rtype: list[dict]
        """
        ids = require_ids(organization_ids, "organization_ids")
        skip_cache = self._no_cache(no_cache)
        cache = self._client._cache

        found: Dict[int, Dict[str, Any]] = {}
        missing: List[int] = []
        for org_id in ids:
            cached = cache.lookup(f"organization-{org_id}", skip_cache)
            if cached is not None:
                logger.debug("Found organization in cache: %s", org_id)
                found[org_id] = cached
            elif org_id not in missing:
                missing.append(org_id)

        if missing:
            logger.debug("Organizations not in cache, requesting fresh: %s", ",".join(str(i) for i in missing))
            path = "/organizations/show_many.json?ids=" + ",".join(str(i) for i in missing)
            for org in self._client._get_api().paginate(path, ORGANIZATIONS):
                org_id = org.get("id")
                cache.write(f"organization-{org_id}", org, skip_cache)
                found[org_id] = org

        return [found[org_id] for org_id in dict.fromkeys(ids) if org_id in found]

    def update(
        self,
        organization_id: int,
        changes: Dict[str, Any],
        *,
        no_cache: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """
        Update an organization and refresh its cache entry.

        :param organization_id: Organization id.
        :type organization_id: int
        :param changes: Fields to change, e.g. ``{"notes": "vip"}`` or
            ``{"organization_fields": {"temp_lead": "jdoe"}}``.
        :type changes: dict
        :param no_cache: Skip writing the updated organization to the cache.
        :type no_cache: bool or None
        :return: The organization as returned by the service.
        :rtype: dict

        :raises ~zendesk_api.core.errors.ApiError: If the request fails or the service
            echoes a different organization id.
        """
        require_id(organization_id, "organization_id")
        payload = {"organization": require_changes(changes)}
        return self._put_resource(
            f"organization-{organization_id}",
            f"/organizations/{organization_id}.json",
            "organization",
            organization_id,
            payload,
            no_cache,
        )

    def users(self, organization_id: int, *, no_cache: Optional[bool] = None) -> List[Dict[str, Any]]:
        """Return every user of an organization, cached under ``organization-users-<id>``."""
        require_id(organization_id, "organization_id")
        users = self._get_list(
            f"organization-users-{organization_id}",
            f"/organizations/{organization_id}/users.json",
            USERS,
            no_cache,
        )
        logger.debug("Got %d users for organization: %s", len(users), organization_id)
        return users
