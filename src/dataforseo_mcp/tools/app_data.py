from typing import Optional

from pydantic import Field

from ..registry import ToolRegistry
from .common import LocationParameters, TaskParameters, task_get, task_post, tasks_ready

MODULE = "APP_DATA"


class AppSearchParameters(LocationParameters, TaskParameters):
    keyword: str = Field(..., description="App store search query")
    depth: Optional[int] = Field(None, description="Number of results to return")


class AppInfoParameters(LocationParameters, TaskParameters):
    app_id: str = Field(..., description="Application id in the store")


def register_app_data_tools(registry: ToolRegistry, client):
    tools = registry.registrar(client, module=MODULE)

    for store in ("google", "apple"):
        tools.task_tool(
            f"app_data_{store}_app_searches",
            AppSearchParameters,
            task_post(f"/app_data/{store}/app_searches"),
            tasks_ready(f"/app_data/{store}/app_searches"),
            task_get(f"/app_data/{store}/app_searches", "advanced"),
            f"{store.capitalize()} app store search",
        )
        tools.task_tool(
            f"app_data_{store}_app_info",
            AppInfoParameters,
            task_post(f"/app_data/{store}/app_info"),
            tasks_ready(f"/app_data/{store}/app_info"),
            task_get(f"/app_data/{store}/app_info", "advanced"),
            f"{store.capitalize()} app store app details",
        )
    return tools.registered
