from typing import List, Optional

from pydantic import Field

from ..registry import ToolRegistry
from .common import (
    FilterParameters,
    LocationParameters,
    PaginationParameters,
    TaskParameters,
    live,
    task_get,
    task_post,
    tasks_ready,
)

MODULE = "BUSINESS_DATA"


class MyBusinessInfoParameters(LocationParameters):
    keyword: str = Field(
        ..., description="Business name, or 'cid:<id>' / 'place_id:<id>'"
    )


class GoogleReviewsParameters(LocationParameters, TaskParameters):
    keyword: Optional[str] = Field(None, description="Business name to get reviews for")
    cid: Optional[str] = Field(None, description="Google business CID")
    place_id: Optional[str] = Field(None, description="Google place id")
    depth: Optional[int] = Field(None, description="Number of reviews to return")
    sort_by: Optional[str] = Field(
        None, description="newest, highest_rating, lowest_rating, relevant"
    )


class TrustpilotReviewsParameters(TaskParameters):
    domain: str = Field(..., description="Domain of the business on Trustpilot")
    depth: Optional[int] = Field(None, description="Number of reviews to return")
    sort_by: Optional[str] = Field(None, description="'recency' or 'relevance'")


class BusinessListingsParameters(PaginationParameters, FilterParameters):
    categories: Optional[List[str]] = Field(None, description="Business categories")
    description: Optional[str] = Field(None, description="Text in the business description")
    title: Optional[str] = Field(None, description="Text in the business name")
    location_coordinate: Optional[str] = Field(
        None, description="'latitude,longitude,radius_km'"
    )
    is_claimed: Optional[bool] = Field(None, description="Only claimed listings")


def register_business_data_tools(registry: ToolRegistry, client):
    tools = registry.registrar(client, module=MODULE)

    tools.tool(
        "business_data_google_my_business_info",
        MyBusinessInfoParameters,
        live("/business_data/google/my_business_info/live"),
        "Get Google Business Profile information for a business",
    )
    tools.task_tool(
        "business_data_google_reviews",
        GoogleReviewsParameters,
        task_post("/business_data/google/reviews"),
        tasks_ready("/business_data/google/reviews"),
        task_get("/business_data/google/reviews"),
        "Google reviews",
    )
    tools.task_tool(
        "business_data_trustpilot_reviews",
        TrustpilotReviewsParameters,
        task_post("/business_data/trustpilot/reviews"),
        tasks_ready("/business_data/trustpilot/reviews"),
        task_get("/business_data/trustpilot/reviews"),
        "Trustpilot reviews",
    )
    tools.tool(
        "business_data_business_listings_search",
        BusinessListingsParameters,
        live("/business_data/business_listings/search/live"),
        "Search Google Maps business listings by category and location",
    )
    return tools.registered
