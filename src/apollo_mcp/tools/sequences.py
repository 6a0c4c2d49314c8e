"""
Apollo Sequence Tools

Email sequences (emailer campaigns): search, enroll contacts, remove or stop them.
"""

from typing import Any, Dict

from ..normalizers import strip_undefined
from ..schemas import AddContactsToSequenceParams, SearchSequencesParams, UpdateSequenceStatusParams
from .base import OperationDefinition, send


async def search_sequences(client, params: SearchSequencesParams) -> Dict[str, Any]:
    return await send(client, "search_sequences", strip_undefined(params.model_dump()))


async def add_contacts_to_sequence(client, params: AddContactsToSequenceParams) -> Dict[str, Any]:
    """Enroll contacts; the campaign ID is part of the route."""
    body = strip_undefined(params.model_dump(exclude={"emailer_campaign_id"}))
    return await send(
        client,
        "add_contacts_to_sequence",
        body,
        emailer_campaign_id=params.emailer_campaign_id,
    )


async def update_sequence_status(client, params: UpdateSequenceStatusParams) -> Dict[str, Any]:
    return await send(client, "update_sequence_status", {
        "emailer_campaign_id": params.emailer_campaign_id,
        "contact_ids": params.contact_ids,
        "mode": params.mode,
    })


OPERATIONS = [
    OperationDefinition(
        name="search_sequences",
        description=(
            "Search email sequences (campaigns) in your Apollo account. FREE. "
            "Returns sequence name, status, stats, and IDs."
        ),
        params_model=SearchSequencesParams,
        handler=search_sequences,
    ),
    OperationDefinition(
        name="add_contacts_to_sequence",
        description=(
            "Add contacts to an email sequence. FREE. "
            "Provide the sequence ID and an array of contact IDs. "
            "Contacts will start receiving the sequence emails. "
            "You must also specify the email_account_id to send from."
        ),
        params_model=AddContactsToSequenceParams,
        handler=add_contacts_to_sequence,
    ),
    OperationDefinition(
        name="update_sequence_status",
        description=(
            "Remove or stop contacts in a sequence. FREE. "
            "Use this to pause or remove contacts from an active sequence."
        ),
        params_model=UpdateSequenceStatusParams,
        handler=update_sequence_status,
    ),
]
