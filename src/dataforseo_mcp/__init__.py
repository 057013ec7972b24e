"""MCP server exposing DataForSEO endpoints as tools."""

__version__ = "1.0.0"

SERVICE_NAME = "dataforseo-mcp-server"
