"""
Apollo Organization Tools

Company search, enrichment and lookups by organization ID.
"""

from typing import Any, Dict

from ..normalizers import clean_domain, clean_domains, strip_undefined
from ..schemas import EnrichOrganizationParams, OrganizationIdParams, SearchOrganizationsParams
from .base import OperationDefinition, send


async def search_organizations(client, params: SearchOrganizationsParams) -> Dict[str, Any]:
    """Search companies in Apollo's database."""
    body = params.model_dump()
    body["q_organization_domains"] = clean_domains(params.q_organization_domains)
    return await send(client, "search_organizations", strip_undefined(body))


async def enrich_organization(client, params: EnrichOrganizationParams) -> Dict[str, Any]:
    """Enrich one organization by domain."""
    return await send(client, "enrich_organization", query={"domain": clean_domain(params.domain)})


async def get_organization(client, params: OrganizationIdParams) -> Dict[str, Any]:
    return await send(client, "get_organization", organization_id=params.organization_id)


async def get_organization_job_postings(client, params: OrganizationIdParams) -> Dict[str, Any]:
    return await send(client, "get_organization_job_postings", organization_id=params.organization_id)


OPERATIONS = [
    OperationDefinition(
        name="search_organizations",
        description=(
            "Search for organizations/companies in Apollo's database. "
            "COSTS 1 CREDIT PER PAGE of results. Prefer search_people (FREE) when possible. "
            "Use this when you specifically need company-level data like revenue, tech stack, or funding info."
        ),
        params_model=SearchOrganizationsParams,
        handler=search_organizations,
    ),
    OperationDefinition(
        name="enrich_organization",
        description=(
            "Enrich a single organization by domain to get detailed company info. "
            "COSTS 1 CREDIT. Returns company size, industry, funding, tech stack, etc."
        ),
        params_model=EnrichOrganizationParams,
        handler=enrich_organization,
    ),
    OperationDefinition(
        name="get_organization",
        description=(
            "Get details for an organization by its Apollo ID. FREE - no credit cost. "
            "Use this when you already have the organization ID from a previous search."
        ),
        params_model=OrganizationIdParams,
        handler=get_organization,
    ),
    OperationDefinition(
        name="get_organization_job_postings",
        description=(
            "Get current job postings for an organization. COSTS 1 CREDIT. "
            "Useful for understanding hiring priorities and team growth areas."
        ),
        params_model=OrganizationIdParams,
        handler=get_organization_job_postings,
    ),
]
