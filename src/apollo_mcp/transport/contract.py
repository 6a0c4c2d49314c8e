"""Route table mapping each MCP tool to its Apollo HTTP endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

API_PREFIX = "/api/v1"


@dataclass(frozen=True)
class ToolContract:
    mcp_tool: str
    http_method: str
    http_route: str

    def path(self, **ids: str) -> str:
        return API_PREFIX + self.http_route.format(**ids)


TOOL_CONTRACTS: List[ToolContract] = [
    # People
    ToolContract("search_people", "POST", "/mixed_people/search"),
    ToolContract("enrich_person", "POST", "/people/match"),
    ToolContract("bulk_enrich_people", "POST", "/people/bulk_match"),
    # Organizations
    ToolContract("search_organizations", "POST", "/mixed_companies/search"),
    ToolContract("enrich_organization", "GET", "/organizations/enrich"),
    ToolContract("get_organization", "GET", "/organizations/{organization_id}"),
    ToolContract("get_organization_job_postings", "GET", "/organizations/{organization_id}/job_postings"),
    # Contacts
    ToolContract("create_contact", "POST", "/contacts"),
    ToolContract("update_contact", "PATCH", "/contacts/{contact_id}"),
    ToolContract("get_contact", "GET", "/contacts/{contact_id}"),
    ToolContract("search_contacts", "POST", "/contacts/search"),
    ToolContract("bulk_create_contacts", "POST", "/contacts/bulk_create"),
    ToolContract("bulk_update_contacts", "POST", "/contacts/bulk_update"),
    # Accounts
    ToolContract("create_account", "POST", "/accounts"),
    ToolContract("update_account", "PATCH", "/accounts/{account_id}"),
    ToolContract("search_accounts", "POST", "/accounts/search"),
    # Sequences
    ToolContract("search_sequences", "POST", "/emailer_campaigns/search"),
    ToolContract("add_contacts_to_sequence", "POST", "/emailer_campaigns/{emailer_campaign_id}/add_contact_ids"),
    ToolContract("update_sequence_status", "POST", "/emailer_campaigns/remove_or_stop_contact_ids"),
    # Emails
    ToolContract("search_outreach_emails", "GET", "/emailer_messages/search"),
    ToolContract("get_email_activities", "GET", "/emailer_messages/{emailer_message_id}/activities"),
    ToolContract("list_email_accounts", "GET", "/email_accounts"),
    # Fields
    ToolContract("list_fields", "GET", "/fields"),
    ToolContract("create_custom_field", "POST", "/fields"),
    ToolContract("list_custom_fields_deprecated", "GET", "/typed_custom_fields"),
    # Usage
    ToolContract("search_news_articles", "POST", "/news_articles/search"),
    ToolContract("get_api_usage_stats", "POST", "/usage_stats/api_usage_stats"),
]

# Provide quick lookup map
MCP_OPERATIONS = {contract.mcp_tool: contract for contract in TOOL_CONTRACTS}

__all__ = ["API_PREFIX", "ToolContract", "TOOL_CONTRACTS", "MCP_OPERATIONS"]
