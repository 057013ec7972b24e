from typing import List, Optional

from pydantic import Field

from ..registry import ToolRegistry
from .common import DateRangeParameters, FilterParameters, PaginationParameters, live

MODULE = "CONTENT_ANALYSIS"


class KeywordContentParameters(PaginationParameters, FilterParameters):
    keyword: str = Field(..., description="Target keyword or phrase")
    keyword_fields: Optional[dict] = Field(
        None, description="Fields to search the keyword in, e.g. {'title': 'seo'}"
    )
    page_type: Optional[List[str]] = Field(
        None, description="ecommerce, news, blogs, message-boards, organization"
    )
    search_mode: Optional[str] = Field(None, description="'as_is' or 'one_per_domain'")


class SummaryParameters(FilterParameters):
    keyword: str = Field(..., description="Target keyword or phrase")
    page_type: Optional[List[str]] = Field(None, description="Page types to include")
    internal_list_limit: Optional[int] = Field(
        None, description="Maximum number of elements in internal arrays"
    )


class PhraseTrendsParameters(DateRangeParameters, FilterParameters):
    keyword: str = Field(..., description="Target keyword or phrase")
    date_group: Optional[str] = Field(None, description="'day', 'week' or 'month'")


class SentimentParameters(FilterParameters):
    keyword: str = Field(..., description="Target keyword or phrase")
    page_type: Optional[List[str]] = Field(None, description="Page types to include")
    internal_list_limit: Optional[int] = Field(
        None, description="Maximum number of elements in internal arrays"
    )


def register_content_analysis_tools(registry: ToolRegistry, client):
    tools = registry.registrar(client, module=MODULE)

    tools.tool(
        "content_analysis_search",
        KeywordContentParameters,
        live("/content_analysis/search/live"),
        "Find citations of a keyword across the web",
    )
    tools.tool(
        "content_analysis_summary",
        SummaryParameters,
        live("/content_analysis/summary/live"),
        "Get an overview of citation data for a keyword",
    )
    tools.tool(
        "content_analysis_sentiment_analysis",
        SentimentParameters,
        live("/content_analysis/sentiment_analysis/live"),
        "Get sentiment and connotation data for citations of a keyword",
    )
    tools.tool(
        "content_analysis_phrase_trends",
        PhraseTrendsParameters,
        live("/content_analysis/phrase_trends/live"),
        "Get citation trends for a keyword over a date range",
    )
    return tools.registered
