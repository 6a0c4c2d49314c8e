"""
Apollo Email Tools

Outreach email lookup, per-message activity and connected sending accounts.
"""

from typing import Any, Dict

from ..schemas import EmailActivitiesParams, NoParams, SearchOutreachEmailsParams
from .base import OperationDefinition, send


async def search_outreach_emails(client, params: SearchOutreachEmailsParams) -> Dict[str, Any]:
    """Search sent outreach emails. Filters travel in the query string."""
    query = {
        "emailer_campaign_id": params.emailer_campaign_id,
        "contact_id": params.contact_id,
        "email_account_id": params.email_account_id,
        "page": str(params.page),
        "per_page": str(params.per_page),
    }
    return await send(client, "search_outreach_emails", query=query)


async def get_email_activities(client, params: EmailActivitiesParams) -> Dict[str, Any]:
    return await send(client, "get_email_activities", emailer_message_id=params.emailer_message_id)


async def list_email_accounts(client, params: NoParams) -> Dict[str, Any]:
    return await send(client, "list_email_accounts")


OPERATIONS = [
    OperationDefinition(
        name="search_outreach_emails",
        description=(
            "Search outreach emails sent through Apollo sequences. FREE. "
            "Returns email messages with status, open/click tracking, and content."
        ),
        params_model=SearchOutreachEmailsParams,
        handler=search_outreach_emails,
    ),
    OperationDefinition(
        name="get_email_activities",
        description="Get activities (opens, clicks, replies) for a specific outreach email. FREE.",
        params_model=EmailActivitiesParams,
        handler=get_email_activities,
    ),
    OperationDefinition(
        name="list_email_accounts",
        description=(
            "List all email accounts connected to your Apollo workspace. FREE. "
            "Use this to find the email_account_id needed for add_contacts_to_sequence. "
            "Requires a master API key."
        ),
        params_model=NoParams,
        handler=list_email_accounts,
    ),
]
