from typing import Optional

from pydantic import BaseModel, Field

from ..registry import ToolRegistry
from .common import endpoint

MODULE = "LOCALFALCON"


class ListParameters(BaseModel):
    query: Optional[str] = Field(None, description="Search text to filter results")
    limit: Optional[int] = Field(None, description="Maximum number of results")
    next_token: Optional[str] = Field(None, description="Pagination token")


class ScanReportsParameters(ListParameters):
    start_date: Optional[str] = Field(None, description="Start date, MM/DD/YYYY")
    end_date: Optional[str] = Field(None, description="End date, MM/DD/YYYY")
    place_id: Optional[str] = Field(None, description="Google place id")
    keyword: Optional[str] = Field(None, description="Scanned keyword")
    grid_size: Optional[str] = Field(None, description="Grid size, e.g. '7'")


class ReportKeyParameters(BaseModel):
    report_key: str = Field(..., description="Key of the report")


class RunScanParameters(BaseModel):
    place_id: str = Field(..., description="Google place id of the business")
    keyword: str = Field(..., description="Keyword to scan")
    lat: float = Field(..., description="Latitude of the grid center")
    lng: float = Field(..., description="Longitude of the grid center")
    grid_size: str = Field(..., description="Grid size: 3, 5, 7, 9, 11, 13 or 15")
    radius: float = Field(..., description="Grid radius")
    measurement: str = Field(..., description="'mi' or 'km'")
    platform: Optional[str] = Field(
        None, description="google, apple, gaio, chatgpt, ..."
    )
    ai_analysis: Optional[bool] = Field(None, description="Include AI analysis")


def list_endpoint(path: str):
    async def handler(params, client):
        return await client.post(path, params)

    return handler


async def get_scan_report(params, client):
    return await client.post(endpoint("/v1/reports", params["report_key"]) + "/", {})


def register_localfalcon_tools(registry: ToolRegistry, client):
    tools = registry.registrar(client, module=MODULE)

    tools.tool(
        "localfalcon_list_locations",
        ListParameters,
        list_endpoint("/v1/locations/"),
        "List business locations saved in the Local Falcon account",
    )
    tools.tool(
        "localfalcon_list_scan_reports",
        ScanReportsParameters,
        list_endpoint("/v1/reports/"),
        "List Local Falcon scan reports",
    )
    tools.tool(
        "localfalcon_get_scan_report",
        ReportKeyParameters,
        get_scan_report,
        "Get a Local Falcon scan report with its grid rankings",
    )
    tools.tool(
        "localfalcon_run_scan",
        RunScanParameters,
        list_endpoint("/v1/run-scan/"),
        "Run a Local Falcon geo-grid ranking scan (consumes credits)",
    )
    tools.tool(
        "localfalcon_list_trend_reports",
        ListParameters,
        list_endpoint("/v1/trend-reports/"),
        "List Local Falcon trend reports",
    )
    return tools.registered
