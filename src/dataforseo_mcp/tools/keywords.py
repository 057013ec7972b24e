from typing import List, Optional

from pydantic import Field

from ..registry import ToolRegistry
from .common import (
    DateRangeParameters,
    LocationParameters,
    TaskParameters,
    live,
    task_get,
    task_post,
    tasks_ready,
)

MODULE = "KEYWORDS_DATA"


class SearchVolumeParameters(LocationParameters, DateRangeParameters):
    keywords: List[str] = Field(..., description="Keywords to look up (max 1000)")
    search_partners: Optional[bool] = Field(
        None, description="Include Google search partners"
    )
    sort_by: Optional[str] = Field(
        None, description="relevance, search_volume, competition_index, ..."
    )


class SearchVolumeTaskParameters(SearchVolumeParameters, TaskParameters):
    pass


class KeywordsForSiteParameters(LocationParameters, DateRangeParameters):
    target: str = Field(..., description="Domain or page to get keywords for")
    target_type: Optional[str] = Field(None, description="'site' or 'page'")
    sort_by: Optional[str] = Field(None, description="Sort order of the results")


class KeywordsForKeywordsParameters(LocationParameters, DateRangeParameters):
    keywords: List[str] = Field(..., description="Seed keywords (max 20)")
    target: Optional[str] = Field(
        None, description="Domain used to refine the suggestions"
    )
    sort_by: Optional[str] = Field(None, description="Sort order of the results")


class TrendsExploreParameters(LocationParameters, DateRangeParameters):
    keywords: List[str] = Field(..., description="Keywords to compare (max 5)")
    type: Optional[str] = Field(
        None, description="web, news, youtube, images, froogle"
    )
    category_code: Optional[int] = Field(None, description="Google Trends category")
    time_range: Optional[str] = Field(
        None, description="past_hour, past_day, past_7_days, past_30_days, ..."
    )


def register_keywords_tools(registry: ToolRegistry, client):
    tools = registry.registrar(client, module=MODULE)

    tools.tool(
        "keywords_google_ads_search_volume",
        SearchVolumeParameters,
        live("/keywords_data/google_ads/search_volume/live"),
        "Get Google Ads search volume, CPC and competition for keywords",
    )
    tools.tool(
        "keywords_google_ads_keywords_for_site",
        KeywordsForSiteParameters,
        live("/keywords_data/google_ads/keywords_for_site/live"),
        "Get keywords relevant to a domain or page from Google Ads",
    )
    tools.tool(
        "keywords_google_ads_keywords_for_keywords",
        KeywordsForKeywordsParameters,
        live("/keywords_data/google_ads/keywords_for_keywords/live"),
        "Get keyword suggestions for seed keywords from Google Ads",
    )
    tools.tool(
        "keywords_google_trends_explore",
        TrendsExploreParameters,
        live("/keywords_data/google_trends/explore/live"),
        "Get Google Trends popularity data for keywords",
    )
    tools.task_tool(
        "keywords_google_ads_search_volume_task",
        SearchVolumeTaskParameters,
        task_post("/keywords_data/google_ads/search_volume"),
        tasks_ready("/keywords_data/google_ads/search_volume"),
        task_get("/keywords_data/google_ads/search_volume"),
        "Google Ads search volume task",
    )
    return tools.registered
