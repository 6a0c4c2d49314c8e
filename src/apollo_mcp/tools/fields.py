"""
Apollo Field Tools

Standard and custom field metadata for contacts, accounts and opportunities.
"""

from typing import Any, Dict

from ..normalizers import strip_undefined
from ..schemas import CreateCustomFieldParams, ListFieldsParams, NoParams
from .base import OperationDefinition, send


async def list_fields(client, params: ListFieldsParams) -> Dict[str, Any]:
    return await send(client, "list_fields", query={"entity_type": params.entity_type})


async def create_custom_field(client, params: CreateCustomFieldParams) -> Dict[str, Any]:
    return await send(client, "create_custom_field", strip_undefined(params.model_dump()))


async def list_custom_fields_deprecated(client, params: NoParams) -> Dict[str, Any]:
    return await send(client, "list_custom_fields_deprecated")


OPERATIONS = [
    OperationDefinition(
        name="list_fields",
        description=(
            "List all available fields for contacts and accounts in Apollo. FREE. "
            "Useful for understanding what data you can search/filter on."
        ),
        params_model=ListFieldsParams,
        handler=list_fields,
    ),
    OperationDefinition(
        name="create_custom_field",
        description=(
            "Create a custom field for contacts or accounts. FREE. "
            "Custom fields let you store additional data on your CRM records."
        ),
        params_model=CreateCustomFieldParams,
        handler=create_custom_field,
    ),
    OperationDefinition(
        name="list_custom_fields_deprecated",
        description=(
            "List custom fields using the legacy typed_custom_fields endpoint. FREE. "
            "Prefer list_fields instead. This endpoint is deprecated but still functional."
        ),
        params_model=NoParams,
        handler=list_custom_fields_deprecated,
    ),
]
