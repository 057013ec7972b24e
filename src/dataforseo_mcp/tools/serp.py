from typing import Optional

from pydantic import Field

from ..registry import ToolRegistry
from .common import (
    LocationParameters,
    TaskParameters,
    get_resource,
    live,
    task_get,
    task_post,
    tasks_ready,
)

MODULE = "SERP"


class SerpParameters(LocationParameters):
    keyword: str = Field(..., description="Search query")
    depth: Optional[int] = Field(
        None, description="Number of results to return (default 100, max 700)"
    )
    device: Optional[str] = Field(None, description="'desktop' or 'mobile'")
    os: Optional[str] = Field(
        None, description="Device OS: windows, macos for desktop; android, ios for mobile"
    )
    se_domain: Optional[str] = Field(None, description="Search engine domain")


class GoogleOrganicParameters(SerpParameters):
    calculate_rectangles: Optional[bool] = Field(
        None, description="Calculate pixel rankings for SERP elements"
    )
    people_also_ask_click_depth: Optional[int] = Field(
        None, description="Depth of 'People also ask' expansion (1-4)"
    )


class GoogleMapsParameters(SerpParameters):
    search_this_area: Optional[bool] = Field(
        None, description="Search only within the map area of the location"
    )


class GoogleOrganicTaskParameters(GoogleOrganicParameters, TaskParameters):
    pass


def register_serp_tools(registry: ToolRegistry, client):
    tools = registry.registrar(client, module=MODULE)

    tools.tool(
        "serp_google_organic_live",
        GoogleOrganicParameters,
        live("/serp/google/organic/live/advanced"),
        "Get Google organic search results for a keyword in real time",
    )
    tools.tool(
        "serp_google_maps_live",
        GoogleMapsParameters,
        live("/serp/google/maps/live/advanced"),
        "Get Google Maps results for a keyword in real time",
    )
    tools.tool(
        "serp_google_news_live",
        SerpParameters,
        live("/serp/google/news/live/advanced"),
        "Get Google News results for a keyword in real time",
    )
    tools.tool(
        "serp_bing_organic_live",
        SerpParameters,
        live("/serp/bing/organic/live/advanced"),
        "Get Bing organic search results for a keyword in real time",
    )
    tools.tool(
        "serp_youtube_organic_live",
        SerpParameters,
        live("/serp/youtube/organic/live/advanced"),
        "Get YouTube search results for a keyword in real time",
    )
    tools.tool(
        "serp_google_locations",
        {"type": "object", "properties": {}},
        get_resource("/serp/google/locations"),
        "List locations supported by the Google SERP API",
    )
    tools.tool(
        "serp_google_languages",
        {"type": "object", "properties": {}},
        get_resource("/serp/google/languages"),
        "List languages supported by the Google SERP API",
    )
    tools.task_tool(
        "serp_google_organic_task",
        GoogleOrganicTaskParameters,
        task_post("/serp/google/organic"),
        tasks_ready("/serp/google/organic"),
        task_get("/serp/google/organic", "advanced"),
        "Google organic SERP task",
    )
    return tools.registered
