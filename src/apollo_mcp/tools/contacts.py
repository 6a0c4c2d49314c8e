"""
Apollo Contact Tools

CRUD and bulk operations on contacts saved in the Apollo CRM. Contact
creation always asks Apollo to deduplicate.
"""

from typing import Any, Dict

from ..normalizers import strip_undefined
from ..schemas import (
    BulkCreateContactsParams,
    BulkUpdateContactsParams,
    ContactIdParams,
    CreateContactParams,
    SearchContactsParams,
    UpdateContactParams,
)
from .base import OperationDefinition, send


async def create_contact(client, params: CreateContactParams) -> Dict[str, Any]:
    """Create a contact with run_dedupe forced on."""
    body = strip_undefined(params.model_dump())
    body["run_dedupe"] = True
    return await send(client, "create_contact", body)


async def update_contact(client, params: UpdateContactParams) -> Dict[str, Any]:
    """Update a contact; the ID goes in the path only."""
    body = strip_undefined(params.model_dump(exclude={"contact_id"}))
    return await send(client, "update_contact", body, contact_id=params.contact_id)


async def get_contact(client, params: ContactIdParams) -> Dict[str, Any]:
    return await send(client, "get_contact", contact_id=params.contact_id)


async def search_contacts(client, params: SearchContactsParams) -> Dict[str, Any]:
    return await send(client, "search_contacts", strip_undefined(params.model_dump()))


async def bulk_create_contacts(client, params: BulkCreateContactsParams) -> Dict[str, Any]:
    contacts = [strip_undefined(contact.model_dump()) for contact in params.contacts]
    return await send(client, "bulk_create_contacts", {"contacts": contacts, "run_dedupe": True})


async def bulk_update_contacts(client, params: BulkUpdateContactsParams) -> Dict[str, Any]:
    contacts = [strip_undefined(contact.model_dump()) for contact in params.contacts]
    return await send(client, "bulk_update_contacts", {"contacts": contacts})


OPERATIONS = [
    OperationDefinition(
        name="create_contact",
        description=(
            "Create a new contact in your Apollo CRM. FREE. "
            "Deduplication is enforced (run_dedupe=true) to prevent duplicates. "
            "Provide at least first_name, last_name, and either email or organization_name."
        ),
        params_model=CreateContactParams,
        handler=create_contact,
    ),
    OperationDefinition(
        name="update_contact",
        description=(
            "Update an existing contact in your Apollo CRM. FREE. "
            "Provide the contact ID and any fields to update."
        ),
        params_model=UpdateContactParams,
        handler=update_contact,
    ),
    OperationDefinition(
        name="get_contact",
        description="Get a single contact by ID from your Apollo CRM. FREE.",
        params_model=ContactIdParams,
        handler=get_contact,
    ),
    OperationDefinition(
        name="search_contacts",
        description=(
            "Search contacts in your Apollo CRM. FREE. "
            "These are contacts you've already saved, not the global Apollo database. "
            "Use search_people for prospecting new contacts."
        ),
        params_model=SearchContactsParams,
        handler=search_contacts,
    ),
    OperationDefinition(
        name="bulk_create_contacts",
        description=(
            "Create multiple contacts at once. FREE. Deduplication is enforced. "
            "Max 100 contacts per request."
        ),
        params_model=BulkCreateContactsParams,
        handler=bulk_create_contacts,
    ),
    OperationDefinition(
        name="bulk_update_contacts",
        description=(
            "Update multiple contacts at once. FREE. Provide contact IDs and fields to update. "
            "Max 100 per request."
        ),
        params_model=BulkUpdateContactsParams,
        handler=bulk_update_contacts,
    ),
]
