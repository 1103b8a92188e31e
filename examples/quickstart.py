# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Interactive walkthrough of the Zendesk client.

Reads the account URL, agent email and API token from the prompt (or from
ZENDESK_URL / ZENDESK_USERNAME / ZENDESK_TOKEN), then fetches a ticket twice to
show cache reuse, lists its attachments and runs a small search.
"""

import logging
import os
import sys
from pathlib import Path

# Add src to PYTHONPATH for local runs
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from azure.core.credentials import AzureNamedKeyCredential

from zendesk_api import ApiError, DictCache, ZendeskClient, ZendeskConfig


def prompt(name: str, label: str) -> str:
    value = os.environ.get(name) or input(f"{label}: ").strip()
    if not value:
        print(f"No {label.lower()} entered; exiting.")
        sys.exit(1)
    return value


logging.basicConfig(level=logging.INFO)

base_url = prompt("ZENDESK_URL", "Zendesk URL (e.g. https://example.zendesk.com)")
username = prompt("ZENDESK_USERNAME", "Agent email")
token = prompt("ZENDESK_TOKEN", "API token")
ticket_id = int(prompt("ZENDESK_TICKET_ID", "Ticket id to inspect"))

credential = AzureNamedKeyCredential(username, token)
config = ZendeskConfig(max_retries=20, log_level="DEBUG")

with ZendeskClient(base_url, credential, config, cache=DictCache()) as client:
    try:
        ticket = client.tickets.get(ticket_id)
        print({"call": "tickets.get", "subject": ticket.get("subject")})

        # Served from the cache; no second request
        client.tickets.get(ticket_id)

        attachments = client.tickets.attachments(ticket_id)
        print({"call": "tickets.attachments", "count": len(attachments)})
        for attachment in attachments:
            print(" -", attachment.get("file_name"), attachment.get("size"))

        results = client.search.search(f"type:ticket requester:{username}", size=10)
        print({"call": "search.search", "count": len(results)})
    except ApiError as exc:
        print("Zendesk API error:", exc.to_dict())
        sys.exit(2)
