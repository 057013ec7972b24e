from typing import Optional

from pydantic import Field

from ..registry import ToolRegistry
from .common import (
    LocationParameters,
    TaskParameters,
    get_resource,
    task_get,
    task_post,
    tasks_ready,
)

MODULE = "MERCHANT"


class ProductSearchParameters(LocationParameters, TaskParameters):
    keyword: str = Field(..., description="Product search query")
    depth: Optional[int] = Field(None, description="Number of results to return")
    price_min: Optional[int] = Field(None, description="Minimum product price")
    price_max: Optional[int] = Field(None, description="Maximum product price")
    sort_by: Optional[str] = Field(
        None, description="Sorting, e.g. 'review_score', 'price_low_to_high'"
    )


class AmazonProductSearchParameters(ProductSearchParameters):
    se_domain: Optional[str] = Field(None, description="Amazon domain, e.g. amazon.com")


def register_merchant_tools(registry: ToolRegistry, client):
    tools = registry.registrar(client, module=MODULE)

    tools.task_tool(
        "merchant_google_products",
        ProductSearchParameters,
        task_post("/merchant/google/products"),
        tasks_ready("/merchant/google/products"),
        task_get("/merchant/google/products", "advanced"),
        "Google Shopping product search",
    )
    tools.task_tool(
        "merchant_amazon_products",
        AmazonProductSearchParameters,
        task_post("/merchant/amazon/products"),
        tasks_ready("/merchant/amazon/products"),
        task_get("/merchant/amazon/products", "advanced"),
        "Amazon product search",
    )
    tools.tool(
        "merchant_google_locations",
        {"type": "object", "properties": {}},
        get_resource("/merchant/google/locations"),
        "List locations supported by the Google Shopping API",
    )
    return tools.registered
