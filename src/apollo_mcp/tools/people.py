"""
Apollo People Tools

Prospecting search and person enrichment against Apollo's global database.
"""

from typing import Any, Dict

from ..normalizers import clean_domain, clean_domains, strip_undefined
from ..schemas import BulkEnrichPeopleParams, EnrichPersonParams, SearchPeopleParams
from .base import OperationDefinition, send


async def search_people(client, params: SearchPeopleParams) -> Dict[str, Any]:
    """Search people in Apollo's database (free)."""
    body = params.model_dump()
    body["q_organization_domains"] = clean_domains(params.q_organization_domains)
    return await send(client, "search_people", strip_undefined(body))


async def enrich_person(client, params: EnrichPersonParams) -> Dict[str, Any]:
    """Enrich one person with email, phone and profile data."""
    body = params.model_dump()
    body["domain"] = clean_domain(params.domain) if params.domain else None
    return await send(client, "enrich_person", strip_undefined(body))


async def bulk_enrich_people(client, params: BulkEnrichPeopleParams) -> Dict[str, Any]:
    """Enrich up to ten people in one request."""
    details = []
    for person in params.details:
        item = person.model_dump()
        item["domain"] = clean_domain(person.domain) if person.domain else None
        details.append(strip_undefined(item))

    return await send(client, "bulk_enrich_people", {
        "details": details,
        "reveal_personal_emails": params.reveal_personal_emails,
        "reveal_phone_number": params.reveal_phone_number,
    })


OPERATIONS = [
    OperationDefinition(
        name="search_people",
        description=(
            "Search for people in Apollo's database. This is FREE and does not cost credits. "
            "Use this as the primary discovery tool. Returns name, title, company, and LinkedIn URL. "
            "Does NOT return email/phone - use enrich_person to get contact info (costs 1 credit). "
            "Supports filtering by title, company, location, seniority, and more. Max 10 results per page "
            "by default."
        ),
        params_model=SearchPeopleParams,
        handler=search_people,
    ),
    OperationDefinition(
        name="enrich_person",
        description=(
            "Enrich a single person to get their email, phone, and detailed profile. "
            "COSTS 1 CREDIT per successful match. Provide as many identifying fields as possible "
            "for best match accuracy. At minimum provide name + domain, or LinkedIn URL, or email."
        ),
        params_model=EnrichPersonParams,
        handler=enrich_person,
    ),
    OperationDefinition(
        name="bulk_enrich_people",
        description=(
            "Enrich multiple people in a single request. COSTS 1 CREDIT PER PERSON matched. "
            "Each detail object should contain identifying info (name, domain, email, linkedin_url). "
            "Max 10 people per request."
        ),
        params_model=BulkEnrichPeopleParams,
        handler=bulk_enrich_people,
    ),
]
