from typing import List, Optional

from pydantic import BaseModel, Field

from ..registry import ToolRegistry
from .common import (
    FilterParameters,
    PaginationParameters,
    TaskParameters,
    endpoint,
    live,
    tasks_ready,
)

MODULE = "ONPAGE"


class InstantPagesParameters(BaseModel):
    url: str = Field(..., description="Absolute URL of the page to audit")
    enable_javascript: Optional[bool] = Field(
        None, description="Load the page with JavaScript enabled"
    )
    enable_browser_rendering: Optional[bool] = Field(
        None, description="Emulate browser rendering to measure Core Web Vitals"
    )
    custom_user_agent: Optional[str] = Field(None, description="User agent to crawl with")


class ContentParsingParameters(BaseModel):
    url: str = Field(..., description="Absolute URL of the page to parse")
    enable_javascript: Optional[bool] = Field(
        None, description="Load the page with JavaScript enabled"
    )


class LighthouseParameters(BaseModel):
    url: str = Field(..., description="Absolute URL of the page to audit")
    for_mobile: Optional[bool] = Field(None, description="Emulate a mobile device")
    categories: Optional[List[str]] = Field(
        None, description="seo, performance, best_practices, accessibility"
    )


class CrawlTaskParameters(TaskParameters):
    target: str = Field(..., description="Domain to crawl, without https://")
    max_crawl_pages: int = Field(..., description="Number of pages to crawl")
    start_url: Optional[str] = Field(None, description="First URL to crawl")
    enable_javascript: Optional[bool] = Field(
        None, description="Load pages with JavaScript enabled"
    )
    load_resources: Optional[bool] = Field(
        None, description="Load images, stylesheets and scripts"
    )


class CrawlPagesParameters(PaginationParameters, FilterParameters):
    id: str = Field(..., description="Task id returned by onpage_crawl_post")


async def crawl_post(params, client):
    return await client.post("/on_page/task_post", [params])


async def crawl_summary(task_id, client):
    return await client.get(endpoint("/on_page/summary", task_id))


def register_onpage_tools(registry: ToolRegistry, client):
    tools = registry.registrar(client, module=MODULE)

    tools.tool(
        "onpage_instant_pages",
        InstantPagesParameters,
        live("/on_page/instant_pages"),
        "Audit a single page: meta tags, links, timings and on-page checks",
    )
    tools.tool(
        "onpage_content_parsing",
        ContentParsingParameters,
        live("/on_page/content_parsing/live"),
        "Parse the structured content of a page",
    )
    tools.tool(
        "onpage_lighthouse",
        LighthouseParameters,
        live("/on_page/lighthouse/live/json"),
        "Run a Google Lighthouse audit on a page",
    )
    # OnPage crawls are collected through the summary endpoint
    tools.task_tool(
        "onpage_crawl",
        CrawlTaskParameters,
        crawl_post,
        tasks_ready("/on_page"),
        crawl_summary,
        "OnPage site crawl",
    )
    tools.tool(
        "onpage_pages",
        CrawlPagesParameters,
        live("/on_page/pages"),
        "List crawled pages of a finished OnPage crawl",
    )
    return tools.registered
