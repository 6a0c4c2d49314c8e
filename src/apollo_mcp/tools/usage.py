"""
Apollo Usage Tools

Company news search and API credit/rate-limit statistics.
"""

from typing import Any, Dict

from ..normalizers import clean_domains, strip_undefined
from ..schemas import NoParams, SearchNewsArticlesParams
from .base import OperationDefinition, send


async def search_news_articles(client, params: SearchNewsArticlesParams) -> Dict[str, Any]:
    body = params.model_dump()
    body["q_organization_domains"] = clean_domains(params.q_organization_domains)
    return await send(client, "search_news_articles", strip_undefined(body))


async def get_api_usage_stats(client, params: NoParams) -> Dict[str, Any]:
    """Credit usage and rate limits. Also a cheap check that the API key works."""
    return await send(client, "get_api_usage_stats", {})


OPERATIONS = [
    OperationDefinition(
        name="search_news_articles",
        description=(
            "Search news articles about companies in Apollo's database. COSTS CREDITS. "
            "Useful for finding recent news about target companies for personalized outreach."
        ),
        params_model=SearchNewsArticlesParams,
        handler=search_news_articles,
    ),
    OperationDefinition(
        name="get_api_usage_stats",
        description=(
            "Get API usage statistics for your Apollo account. FREE. "
            "Shows credit usage, remaining credits, and rate limit info. "
            "Call this first to verify your API key works."
        ),
        params_model=NoParams,
        handler=get_api_usage_stats,
    ),
]
