import logging
from typing import List

from mcp.types import TextContent, Tool
from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions

from .. import SERVICE_NAME, __version__
from ..registry import ToolNotFoundError, ToolRegistry

logger = logging.getLogger("dataforseo-mcp-server")


class ToolCallError(Exception):
    """Raised inside call_tool so the SDK answers with isError set"""


def tool_description(definition) -> str:
    return definition.description or f"DataForSEO API tool: {definition.name}"


def list_tool_dicts(registry: ToolRegistry) -> List[dict]:
    """Tool descriptors for tools/list, with translated input schemas"""
    tools = [
        {
            "name": definition.name,
            "description": tool_description(definition),
            "inputSchema": definition.json_schema(),
        }
        for definition in registry
    ]
    logger.info(f"Returning {len(tools)} tools")
    return tools


def create_server(registry: ToolRegistry) -> Server:
    """Create an MCP server that lists and invokes tools from the registry"""
    server = Server(SERVICE_NAME)
    server.registry = registry

    @server.list_tools()
    async def handle_list_tools() -> list[Tool]:
        """List every enabled tool"""
        return [Tool(**tool) for tool in list_tool_dicts(registry)]

    @server.call_tool()
    async def handle_call_tool(name: str, arguments: dict | None) -> list[TextContent]:
        """Invoke a tool through the registry"""
        logger.info(f"Calling tool: {name}")
        try:
            result = await registry.invoke(name, arguments or {})
        except ToolNotFoundError:
            raise ToolCallError(f"Unknown tool: {name}")
        if result.is_error:
            # the SDK turns the message into a single text block
            raise ToolCallError(result.content[0].text)
        return result.content

    return server


def get_initialization_options(server_instance: Server) -> InitializationOptions:
    """Get the initialization options for the server"""
    return InitializationOptions(
        server_name=SERVICE_NAME,
        server_version=__version__,
        capabilities=server_instance.get_capabilities(
            notification_options=NotificationOptions(),
            experimental_capabilities={},
        ),
    )
