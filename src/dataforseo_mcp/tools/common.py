"""Parameter models and handler builders shared by the DataForSEO categories."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from ..clients.dataforseo import ApiMethod


class LocationParameters(BaseModel):
    location_name: Optional[str] = Field(
        None, description="Full location name, e.g. 'United States'"
    )
    location_code: Optional[int] = Field(
        None, description="Location code, e.g. 2840 for the United States"
    )
    language_name: Optional[str] = Field(
        None, description="Full language name, e.g. 'English'"
    )
    language_code: Optional[str] = Field(
        None, description="Language code, e.g. 'en'"
    )


class PaginationParameters(BaseModel):
    limit: Optional[int] = Field(None, description="Maximum number of results")
    offset: Optional[int] = Field(None, description="Offset in the results array")


class DateRangeParameters(BaseModel):
    date_from: Optional[str] = Field(None, description="Start date, yyyy-mm-dd")
    date_to: Optional[str] = Field(None, description="End date, yyyy-mm-dd")


class TaskParameters(BaseModel):
    tag: Optional[str] = Field(None, description="User-defined task identifier")
    priority: Optional[int] = Field(
        None, description="Execution priority: 1 normal, 2 high"
    )
    postback_url: Optional[str] = Field(
        None, description="URL the results are sent to when the task completes"
    )
    postback_data: Optional[str] = Field(
        None, description="Postback data type, e.g. 'advanced'"
    )


# One operand of a result filter: field name, operator or value
FilterValue = Union[str, int, float, bool, None]


class FilterParameters(BaseModel):
    filters: Optional[List[Union[FilterValue, List[FilterValue]]]] = Field(
        None,
        description="Result filters, e.g. ['rank', '>', 100] or "
        "[['rank', '>', 100], 'and', ['type', '=', 'organic']]",
    )
    order_by: Optional[List[str]] = Field(
        None, description="Sorting rules, e.g. ['rank,desc']"
    )


def endpoint(*segments: str) -> str:
    return "/" + "/".join(s.strip("/") for s in segments if s)


def live(path: str):
    """Handler for a live endpoint that takes a single task object"""

    async def handler(params: Dict[str, Any], client):
        return await client.post(path, [params])

    return handler


def get_resource(path: str):
    """Handler for a GET endpoint without arguments"""

    async def handler(_params: Dict[str, Any], client):
        return await client.get(path)

    return handler


def task_post(base_path: str):
    async def handler(params: Dict[str, Any], client):
        return await client.post(endpoint(base_path, ApiMethod.TASK_POST.value), [params])

    return handler


def tasks_ready(base_path: str):
    async def handler(client):
        return await client.get(endpoint(base_path, ApiMethod.TASKS_READY.value))

    return handler


def task_get(base_path: str, variant: Optional[str] = None):
    """Handler fetching ``<base>/task_get[/variant]/<id>``"""

    async def handler(task_id: str, client):
        return await client.get(
            endpoint(base_path, ApiMethod.TASK_GET.value, variant, task_id)
        )

    return handler
