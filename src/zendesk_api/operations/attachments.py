# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Attachment download namespace."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Union, TYPE_CHECKING

from ..models.params import AttachmentRef

if TYPE_CHECKING:
    from ..client import ZendeskClient

logger = logging.getLogger(__name__)


class AttachmentOperations:
    """
    Download comment attachments to local files.

    Accessed via ``client.attachments``.

    Example::

        for attachment in client.tickets.attachments(42):
            client.attachments.download(attachment, "/tmp/ticket-42")
    """

    def __init__(self, client: "ZendeskClient") -> None:
        self._client = client

    def download(
        self,
        attachment: Union[Mapping[str, Any], AttachmentRef],
        directory: Union[str, Path],
        *,
        force: bool = False,
    ) -> Path:
        """
        Download one attachment into ``directory``.

        :param attachment: Attachment object as returned in ticket comments (needs
            ``content_url`` and ``file_name``), or an :class:`AttachmentRef`.
        :type attachment: dict or ~zendesk_api.models.params.AttachmentRef
        :param directory: Target directory; created if missing.
        :type directory: str or ~pathlib.Path
        :param force: Download again even if the target file exists.
        :type force: bool
        :return: Path of the target file.
        :rtype: ~pathlib.Path

        :raises ~zendesk_api.core.errors.ValidationError: If the attachment lacks a URL or file name.
        :raises ~zendesk_api.core.errors.ApiError: If the download returns a non-success status.
        """
        ref = attachment if isinstance(attachment, AttachmentRef) else AttachmentRef.from_dict(attachment)
        target_dir = Path(directory)
        target = target_dir / ref.file_name
        logger.debug(
            "Downloading attachment (%s bytes)\n    URL: %s\n    target: %s",
            ref.size,
            ref.content_url,
            target,
        )

        if target.is_file():
            if not force:
                logger.info("Target already exists, not overwriting: %s", target)
                return target
            logger.info("Target already exists, but downloading again because force enabled: %s", target)

        target_dir.mkdir(parents=True, exist_ok=True)
        return self._client._get_api()._download(ref.content_url, target)
