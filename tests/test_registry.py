import json
from typing import List, Optional

import pytest
from pydantic import BaseModel

from dataforseo_mcp.clients.base import ProviderError
from dataforseo_mcp.registry import (
    DuplicateToolError,
    ToolFilter,
    ToolNotFoundError,
    ToolRegistry,
)


class KeywordArguments(BaseModel):
    keyword: str
    limit: Optional[int] = None
    tags: Optional[List[str]] = None


async def echo(params, client):
    return {"params": params, "client": client}


async def explode(params, client):
    raise RuntimeError("boom")


def payload_of(result):
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    return json.loads(result.content[0].text)


@pytest.mark.asyncio
async def test_result_is_compact_json_text():
    registry = ToolRegistry()

    async def done(params, client):
        return {"done": True}

    registry.register("done", {"type": "object", "properties": {}}, done, client=None)
    result = await registry.invoke("done", {})

    assert result.to_dict() == {
        "content": [{"type": "text", "text": '{"done":true}'}]
    }


@pytest.mark.asyncio
async def test_handler_receives_validated_params_and_bound_client():
    registry = ToolRegistry()
    registry.register("echo", KeywordArguments, echo, client="bound-client")

    result = await registry.invoke("echo", {"keyword": "seo", "limit": "5"})

    assert not result.is_error
    assert payload_of(result) == {
        "params": {"keyword": "seo", "limit": 5},
        "client": "bound-client",
    }


@pytest.mark.asyncio
async def test_handler_exception_becomes_error_block():
    registry = ToolRegistry()
    registry.register("explode", KeywordArguments, explode, client=None)

    result = await registry.invoke("explode", {"keyword": "seo"})

    assert result.is_error
    assert result.to_dict()["isError"] is True
    payload = payload_of(result)
    assert payload["error"] == "boom"
    assert "RuntimeError" in payload["stack"]


@pytest.mark.asyncio
async def test_provider_error_payload_is_kept_as_details():
    registry = ToolRegistry()

    async def failing(params, client):
        raise ProviderError(
            "DataForSEO API error 40100: Unauthorized",
            status_code=40100,
            payload={"status_code": 40100, "status_message": "Unauthorized"},
        )

    registry.register("failing", KeywordArguments, failing, client=None)
    payload = payload_of(await registry.invoke("failing", {"keyword": "seo"}))

    assert payload["error"] == "DataForSEO API error 40100: Unauthorized"
    assert payload["details"] == {"status_code": 40100, "status_message": "Unauthorized"}


@pytest.mark.asyncio
async def test_invalid_arguments_are_reported_not_raised():
    registry = ToolRegistry()
    registry.register("echo", KeywordArguments, echo, client=None)

    result = await registry.invoke("echo", {"limit": 3})

    assert result.is_error
    assert "keyword" in payload_of(result)["error"]


@pytest.mark.asyncio
async def test_invoke_unknown_tool():
    with pytest.raises(ToolNotFoundError):
        await ToolRegistry().invoke("missing", {})


def test_duplicate_registration_is_rejected():
    registry = ToolRegistry()
    registry.register("echo", KeywordArguments, echo, client=None)

    with pytest.raises(DuplicateToolError):
        registry.register("echo", KeywordArguments, echo, client=None)


def test_duplicate_is_detected_even_when_filtered_out():
    registry = ToolRegistry(ToolFilter(enabled_tools=frozenset({"other"})))
    assert registry.register("echo", KeywordArguments, echo, client=None) is False

    with pytest.raises(DuplicateToolError):
        registry.register("echo", KeywordArguments, echo, client=None)


def test_empty_name_is_rejected():
    with pytest.raises(ValueError):
        ToolRegistry().register("", KeywordArguments, echo, client=None)


class TestToolFilter:
    def test_no_filter_allows_everything(self):
        tool_filter = ToolFilter()
        assert tool_filter.allows("serp_google_maps_live", "SERP")
        assert tool_filter.allows("anything", None)

    def test_module_filter(self):
        tool_filter = ToolFilter(enabled_modules=frozenset({"SERP", "BUSINESS_DATA"}))
        assert tool_filter.allows("serp_google_maps_live", "SERP")
        assert tool_filter.allows("x", "business_data")
        assert not tool_filter.allows("labs_google_keyword_ideas", "LABS")
        assert not tool_filter.allows("orphan", None)

    def test_tool_filter_is_case_insensitive(self):
        tool_filter = ToolFilter(enabled_tools=frozenset({"serp_google_maps_live"}))
        assert tool_filter.allows("SERP_GOOGLE_MAPS_LIVE", "SERP")
        assert tool_filter.allows("Serp_Google_Maps_Live", "SERP")
        assert not tool_filter.allows("backlinks_summary", "BACKLINKS")

    def test_tool_filter_overrides_module_filter(self):
        tool_filter = ToolFilter(
            enabled_modules=frozenset({"LABS"}),
            enabled_tools=frozenset({"backlinks_summary"}),
        )
        assert tool_filter.allows("backlinks_summary", "BACKLINKS")
        assert not tool_filter.allows("labs_google_keyword_ideas", "LABS")


def test_filtered_registration_is_a_silent_no_op():
    registry = ToolRegistry(ToolFilter(enabled_modules=frozenset({"SERP"})))

    assert registry.register("serp_tool", KeywordArguments, echo, client=None, module="SERP")
    assert not registry.register(
        "labs_tool", KeywordArguments, echo, client=None, module="LABS"
    )
    assert registry.names() == ["serp_tool"]
    assert "labs_tool" not in registry


class TestTaskTool:
    @pytest.fixture
    def calls(self):
        return []

    @pytest.fixture
    def registry(self, calls):
        registry = ToolRegistry()

        async def post(params, client):
            calls.append(("post", params, client))
            return {"id": "task-1"}

        async def ready(client):
            calls.append(("ready", client))
            return ["task-1"]

        async def get(task_id, client):
            calls.append(("get", task_id, client))
            return {"done": True}

        registry.register_task_tool(
            "x", KeywordArguments, post, ready, get, client="client", module="SERP"
        )
        return registry

    def test_registers_three_tools(self, registry):
        assert registry.names() == ["x_post", "x_ready", "x_get"]
        assert {definition.module for definition in registry} == {"SERP"}

    def test_schemas(self, registry):
        get_schema = registry.get("x_get").json_schema()
        assert get_schema["properties"]["id"]["type"] == "string"
        assert get_schema["required"] == ["id"]

        ready_schema = registry.get("x_ready").json_schema()
        assert ready_schema["properties"] == {}
        assert ready_schema.get("required", []) == []

        post_schema = registry.get("x_post").json_schema()
        assert "keyword" in post_schema["properties"]

    @pytest.mark.asyncio
    async def test_handlers_are_wired(self, registry, calls):
        post = await registry.invoke("x_post", {"keyword": "seo"})
        ready = await registry.invoke("x_ready", {})
        fetched = await registry.invoke("x_get", {"id": "task-1"})

        assert payload_of(post) == {"id": "task-1"}
        assert payload_of(ready) == ["task-1"]
        assert payload_of(fetched) == {"done": True}
        assert calls == [
            ("post", {"keyword": "seo"}, "client"),
            ("ready", "client"),
            ("get", "task-1", "client"),
        ]

    @pytest.mark.asyncio
    async def test_get_requires_id(self, registry):
        result = await registry.invoke("x_get", {})
        assert result.is_error

    def test_each_tool_is_filtered_independently(self):
        registry = ToolRegistry(ToolFilter(enabled_tools=frozenset({"y_get"})))

        async def noop(*args):
            return None

        names = registry.register_task_tool("y", KeywordArguments, noop, noop, noop, client=None)

        assert names == ["y_get"]
        assert registry.names() == ["y_get"]


def test_registrar_binds_client_and_module():
    registry = ToolRegistry()
    tools = registry.registrar("client", module="LABS")

    tools.tool("a", KeywordArguments, echo)
    tools.task_tool("b", KeywordArguments, echo, echo, echo)

    assert tools.registered == ["a", "b_post", "b_ready", "b_get"]
    assert {definition.module for definition in registry} == {"LABS"}
