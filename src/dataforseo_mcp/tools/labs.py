from typing import List, Optional

from pydantic import Field

from ..registry import ToolRegistry
from .common import FilterParameters, LocationParameters, PaginationParameters, live

MODULE = "LABS"


class LabsParameters(LocationParameters, PaginationParameters, FilterParameters):
    pass


class KeywordIdeasParameters(LabsParameters):
    keywords: List[str] = Field(..., description="Seed keywords (max 200)")
    include_serp_info: Optional[bool] = Field(
        None, description="Include SERP data for each keyword"
    )


class KeywordParameters(LabsParameters):
    keyword: str = Field(..., description="Seed keyword")
    depth: Optional[int] = Field(
        None, description="Search depth for related keywords (0-4)"
    )
    include_serp_info: Optional[bool] = Field(
        None, description="Include SERP data for each keyword"
    )


class TargetParameters(LabsParameters):
    target: str = Field(..., description="Domain, without https:// and www.")


class RankedKeywordsParameters(TargetParameters):
    item_types: Optional[List[str]] = Field(
        None, description="Search result types: organic, paid, featured_snippet, ..."
    )


class BulkKeywordDifficultyParameters(LocationParameters):
    keywords: List[str] = Field(..., description="Keywords to score (max 1000)")


def register_labs_tools(registry: ToolRegistry, client):
    tools = registry.registrar(client, module=MODULE)

    tools.tool(
        "labs_google_keyword_ideas",
        KeywordIdeasParameters,
        live("/dataforseo_labs/google/keyword_ideas/live"),
        "Get keyword ideas in the same category as the seed keywords",
    )
    tools.tool(
        "labs_google_related_keywords",
        KeywordParameters,
        live("/dataforseo_labs/google/related_keywords/live"),
        "Get keywords from Google's 'searches related to' element",
    )
    tools.tool(
        "labs_google_keyword_suggestions",
        KeywordParameters,
        live("/dataforseo_labs/google/keyword_suggestions/live"),
        "Get long-tail suggestions containing the seed keyword",
    )
    tools.tool(
        "labs_google_ranked_keywords",
        RankedKeywordsParameters,
        live("/dataforseo_labs/google/ranked_keywords/live"),
        "Get the keywords a domain or page ranks for",
    )
    tools.tool(
        "labs_google_competitors_domain",
        TargetParameters,
        live("/dataforseo_labs/google/competitors_domain/live"),
        "Get domains competing with the target in organic and paid search",
    )
    tools.tool(
        "labs_google_domain_rank_overview",
        TargetParameters,
        live("/dataforseo_labs/google/domain_rank_overview/live"),
        "Get ranking and traffic overview for a domain",
    )
    tools.tool(
        "labs_google_bulk_keyword_difficulty",
        BulkKeywordDifficultyParameters,
        live("/dataforseo_labs/google/bulk_keyword_difficulty/live"),
        "Get keyword difficulty scores for up to 1000 keywords",
    )
    return tools.registered
