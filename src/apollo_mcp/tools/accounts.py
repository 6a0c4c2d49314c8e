"""
Apollo Account Tools

Company records (accounts) stored in the Apollo CRM.
"""

from typing import Any, Dict

from ..normalizers import clean_domain, strip_undefined
from ..schemas import CreateAccountParams, SearchAccountsParams, UpdateAccountParams
from .base import OperationDefinition, send


async def create_account(client, params: CreateAccountParams) -> Dict[str, Any]:
    body = params.model_dump()
    body["domain"] = clean_domain(params.domain) if params.domain else None
    return await send(client, "create_account", strip_undefined(body))


async def update_account(client, params: UpdateAccountParams) -> Dict[str, Any]:
    body = params.model_dump(exclude={"account_id"})
    body["domain"] = clean_domain(params.domain) if params.domain else None
    return await send(client, "update_account", strip_undefined(body), account_id=params.account_id)


async def search_accounts(client, params: SearchAccountsParams) -> Dict[str, Any]:
    return await send(client, "search_accounts", strip_undefined(params.model_dump()))


OPERATIONS = [
    OperationDefinition(
        name="create_account",
        description=(
            "Create an account (company record) in your Apollo CRM. FREE. "
            "An account represents a company you're tracking. Provide at least the name and domain."
        ),
        params_model=CreateAccountParams,
        handler=create_account,
    ),
    OperationDefinition(
        name="update_account",
        description="Update an existing account in your Apollo CRM. FREE.",
        params_model=UpdateAccountParams,
        handler=update_account,
    ),
    OperationDefinition(
        name="search_accounts",
        description=(
            "Search accounts in your Apollo CRM. FREE. "
            "These are company records you've already saved."
        ),
        params_model=SearchAccountsParams,
        handler=search_accounts,
    ),
]
