"""Input contracts for Apollo MCP tools.

Each tool validates its raw arguments against one of these models before any
request is built. Optional fields default to ``None`` and are stripped from
outgoing payloads; paging fields default and are range checked here.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

EntityType = Literal["contact", "account", "opportunity"]
PhoneType = Literal["work", "mobile", "home", "other"]
FieldType = Literal["text", "number", "date", "datetime", "boolean", "dropdown", "star_rating"]
SequenceMode = Literal["remove", "stop"]

MAX_PAGE_SIZE = 100
MAX_NEWS_PAGE_SIZE = 25
MAX_BULK_CONTACTS = 100
MAX_BULK_ENRICH = 10


class ToolParams(BaseModel):
    """Base for all tool inputs; unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")


def _page():
    return Field(default=1, ge=1, strict=True, description="Page number (starts at 1)")


def _per_page(default: int, maximum: int = MAX_PAGE_SIZE):
    return Field(
        default=default,
        ge=1,
        le=maximum,
        strict=True,
        description=f"Results per page (max {maximum}, default {default})",
    )


def _flag(description: Optional[str] = None):
    return Field(default=False, strict=True, description=description)


# People

class SearchPeopleParams(ToolParams):
    q_keywords: Optional[str] = Field(default=None, description="General keyword search across all fields")
    person_titles: Optional[List[str]] = Field(default=None, description="Job titles to filter by, e.g. ['CEO', 'CTO']")
    person_not_titles: Optional[List[str]] = Field(default=None, description="Job titles to exclude")
    q_organization_domains: Optional[List[str]] = Field(
        default=None, description="Company domains to search within, e.g. ['google.com']. Will be auto-cleaned."
    )
    organization_locations: Optional[List[str]] = Field(
        default=None, description="HQ locations of the company, e.g. ['San Francisco, CA', 'New York']"
    )
    person_locations: Optional[List[str]] = Field(
        default=None, description="Locations of the person, e.g. ['California, United States']"
    )
    person_seniorities: Optional[List[str]] = Field(
        default=None,
        description="Seniority levels: 'founder', 'c_suite', 'vp', 'director', 'manager', 'senior', 'entry'",
    )
    contact_email_status: Optional[List[str]] = Field(
        default=None, description="Email status filter: 'verified', 'guessed', 'unavailable'"
    )
    organization_num_employees_ranges: Optional[List[str]] = Field(
        default=None, description="Employee count ranges, e.g. ['1,10', '11,50', '51,200']"
    )
    organization_ids: Optional[List[str]] = Field(default=None, description="Apollo organization IDs to filter by")
    page: int = _page()
    per_page: int = _per_page(10)


class PersonDetails(ToolParams):
    first_name: Optional[str] = Field(default=None, description="Person's first name")
    last_name: Optional[str] = Field(default=None, description="Person's last name")
    name: Optional[str] = Field(default=None, description="Full name (use if you don't have first/last split)")
    email: Optional[str] = Field(default=None, description="Known email address")
    organization_name: Optional[str] = Field(default=None, description="Company name")
    domain: Optional[str] = Field(
        default=None, description="Company domain, e.g. 'google.com'. Will be auto-cleaned."
    )
    linkedin_url: Optional[str] = Field(
        default=None, description="LinkedIn profile URL, e.g. 'linkedin.com/in/johndoe'"
    )


class EnrichPersonParams(PersonDetails):
    reveal_personal_emails: bool = _flag("If true, also return personal email addresses")
    reveal_phone_number: bool = _flag("If true, also return phone numbers")


class BulkEnrichPeopleParams(ToolParams):
    details: List[PersonDetails] = Field(
        min_length=1,
        max_length=MAX_BULK_ENRICH,
        description=f"Array of person details to enrich (max {MAX_BULK_ENRICH})",
    )
    reveal_personal_emails: bool = _flag()
    reveal_phone_number: bool = _flag()


# Organizations

class SearchOrganizationsParams(ToolParams):
    q_organization_keyword_tags: Optional[List[str]] = Field(
        default=None, description="Industry keyword tags, e.g. ['saas', 'fintech']"
    )
    q_organization_name: Optional[str] = Field(default=None, description="Company name to search for")
    organization_locations: Optional[List[str]] = Field(
        default=None, description="HQ locations, e.g. ['San Francisco, CA']"
    )
    organization_num_employees_ranges: Optional[List[str]] = Field(
        default=None, description="Employee count ranges, e.g. ['1,10', '51,200']"
    )
    organization_revenue_ranges: Optional[List[str]] = Field(
        default=None, description="Revenue ranges in USD, e.g. ['1000000,10000000'] (1M-10M)"
    )
    q_organization_domains: Optional[List[str]] = Field(
        default=None, description="Company domains to search, e.g. ['google.com']. Will be auto-cleaned."
    )
    organization_ids: Optional[List[str]] = Field(default=None, description="Specific Apollo organization IDs")
    page: int = _page()
    per_page: int = _per_page(10)


class EnrichOrganizationParams(ToolParams):
    domain: str = Field(description="Company domain to enrich, e.g. 'google.com'. Will be auto-cleaned.")


class OrganizationIdParams(ToolParams):
    organization_id: str = Field(description="Apollo organization ID")


# Contacts

class PhoneNumber(ToolParams):
    raw_number: str
    type: PhoneType = "work"


class ContactFields(ToolParams):
    email: Optional[str] = Field(default=None, description="Contact's email address")
    title: Optional[str] = Field(default=None, description="Job title")
    organization_name: Optional[str] = Field(default=None, description="Company name")
    website_url: Optional[str] = Field(default=None, description="Company website URL")
    account_id: Optional[str] = Field(default=None, description="Apollo account ID to associate with")
    phone_numbers: Optional[List[PhoneNumber]] = Field(default=None, description="Phone numbers to add")
    label_names: Optional[List[str]] = Field(default=None, description="Labels/tags to apply")
    present_raw_address: Optional[str] = Field(default=None, description="Full address string")
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None


class CreateContactParams(ContactFields):
    first_name: str = Field(description="Contact's first name")
    last_name: str = Field(description="Contact's last name")
    run_dedupe: Optional[bool] = Field(default=None, description="Ignored: deduplication is always enforced")


class UpdateContactParams(ContactFields):
    contact_id: str = Field(description="Apollo contact ID to update")
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class ContactIdParams(ToolParams):
    contact_id: str = Field(description="Apollo contact ID")


class SearchContactsParams(ToolParams):
    q_keywords: Optional[str] = Field(default=None, description="Keyword search")
    contact_stage_ids: Optional[List[str]] = Field(default=None, description="Filter by contact stage IDs")
    sort_by_field: Optional[str] = Field(
        default=None, description="Field to sort by, e.g. 'contact_last_activity_date'"
    )
    sort_ascending: Optional[bool] = Field(default=None, strict=True, description="Sort direction")
    page: int = _page()
    per_page: int = _per_page(25)


class NewContact(ToolParams):
    first_name: str
    last_name: str
    email: Optional[str] = None
    title: Optional[str] = None
    organization_name: Optional[str] = None
    website_url: Optional[str] = None
    account_id: Optional[str] = None
    label_names: Optional[List[str]] = None
    present_raw_address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None


class BulkCreateContactsParams(ToolParams):
    contacts: List[NewContact] = Field(
        min_length=1, max_length=MAX_BULK_CONTACTS, description="Array of contact objects to create"
    )
    run_dedupe: Optional[bool] = Field(default=None, description="Ignored: deduplication is always enforced")


class ContactUpdate(ToolParams):
    id: str = Field(description="Apollo contact ID")
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    title: Optional[str] = None
    organization_name: Optional[str] = None
    website_url: Optional[str] = None
    account_id: Optional[str] = None
    label_names: Optional[List[str]] = None


class BulkUpdateContactsParams(ToolParams):
    contacts: List[ContactUpdate] = Field(
        min_length=1,
        max_length=MAX_BULK_CONTACTS,
        description="Array of contact objects with IDs and updated fields",
    )


# Accounts

class CreateAccountParams(ToolParams):
    name: str = Field(description="Company name")
    domain: Optional[str] = Field(
        default=None, description="Company domain, e.g. 'google.com'. Will be auto-cleaned."
    )
    phone_number: Optional[str] = Field(default=None, description="Company phone number")
    raw_address: Optional[str] = Field(default=None, description="Full company address")
    owner_id: Optional[str] = Field(default=None, description="Apollo user ID of the account owner")


class UpdateAccountParams(ToolParams):
    account_id: str = Field(description="Apollo account ID to update")
    name: Optional[str] = None
    domain: Optional[str] = Field(default=None, description="Company domain. Will be auto-cleaned.")
    phone_number: Optional[str] = None
    raw_address: Optional[str] = None
    owner_id: Optional[str] = None


class SearchAccountsParams(ToolParams):
    q_keywords: Optional[str] = Field(default=None, description="Keyword search")
    sort_by_field: Optional[str] = Field(
        default=None, description="Field to sort by, e.g. 'account_last_activity_date'"
    )
    sort_ascending: Optional[bool] = Field(default=None, strict=True)
    page: int = _page()
    per_page: int = _per_page(25)


# Sequences

class SearchSequencesParams(ToolParams):
    q_name: Optional[str] = Field(default=None, description="Search by sequence name")
    sort_by_field: Optional[str] = Field(default=None, description="Field to sort by, e.g. 'name'")
    sort_ascending: Optional[bool] = Field(default=None, strict=True)
    page: int = _page()
    per_page: int = _per_page(25)


class AddContactsToSequenceParams(ToolParams):
    emailer_campaign_id: str = Field(description="Sequence/campaign ID")
    contact_ids: List[str] = Field(min_length=1, description="Contact IDs to add to the sequence")
    emailer_campaign_step_id: Optional[str] = Field(
        default=None, description="Step ID to start from (defaults to first step)"
    )
    send_email_from_email_account_id: str = Field(
        description="Email account ID to send from. Use list_email_accounts to find this."
    )
    sequence_active_in_other_campaigns: bool = _flag("Allow adding contacts already active in other sequences")


class UpdateSequenceStatusParams(ToolParams):
    emailer_campaign_id: str = Field(description="Sequence/campaign ID")
    contact_ids: List[str] = Field(min_length=1, description="Contact IDs to remove/stop")
    mode: SequenceMode = Field(description="'remove' removes contacts entirely, 'stop' pauses their sequence")


# Emails

class SearchOutreachEmailsParams(ToolParams):
    emailer_campaign_id: Optional[str] = Field(default=None, description="Filter by sequence/campaign ID")
    contact_id: Optional[str] = Field(default=None, description="Filter by contact ID")
    email_account_id: Optional[str] = Field(default=None, description="Filter by sending email account ID")
    page: int = _page()
    per_page: int = _per_page(25)


class EmailActivitiesParams(ToolParams):
    emailer_message_id: str = Field(description="Emailer message ID")


# Fields

class ListFieldsParams(ToolParams):
    entity_type: Optional[EntityType] = Field(default=None, description="Filter fields by entity type")


class CreateCustomFieldParams(ToolParams):
    name: str = Field(description="Display name for the field")
    field_type: FieldType = Field(description="Data type of the field")
    entity_type: EntityType = Field(description="Which entity type this field applies to")
    picklist_values: Optional[List[str]] = Field(default=None, description="Options for dropdown type fields")


# Usage

class SearchNewsArticlesParams(ToolParams):
    q_organization_domains: Optional[List[str]] = Field(
        default=None, description="Company domains to search news for. Will be auto-cleaned."
    )
    organization_ids: Optional[List[str]] = Field(default=None, description="Apollo organization IDs")
    page: int = _page()
    per_page: int = _per_page(10, maximum=MAX_NEWS_PAGE_SIZE)


class NoParams(ToolParams):
    """Tools that take no arguments."""
