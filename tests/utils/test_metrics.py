import pytest
from pydantic import BaseModel
from starlette.testclient import TestClient

from dataforseo_mcp.registry import ToolRegistry
from dataforseo_mcp.utils.metrics import create_metrics_app


class Arguments(BaseModel):
    keyword: str


async def ok(params, client):
    return params


@pytest.mark.asyncio
async def test_tool_calls_are_counted():
    registry = ToolRegistry()
    registry.register("metrics_sample", Arguments, ok, client=None)
    await registry.invoke("metrics_sample", {"keyword": "seo"})
    await registry.invoke("metrics_sample", {})

    with TestClient(create_metrics_app()) as http:
        response = http.get("/metrics")

    assert response.status_code == 200
    text = response.text
    assert 'dataforseo_mcp_tool_calls_total{tool="metrics_sample",outcome="success"} 1.0' in text
    assert 'dataforseo_mcp_tool_calls_total{tool="metrics_sample",outcome="error"} 1.0' in text
    assert "dataforseo_mcp_registered_tools" in text
