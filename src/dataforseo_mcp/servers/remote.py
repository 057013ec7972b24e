import sys
import json
import logging
import argparse
import threading
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

import uvicorn
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from .. import SERVICE_NAME, __version__
from ..config import ConfigurationError, Settings, load_settings
from ..registry import ToolRegistry
from ..tools import build_registry
from ..utils import metrics
from .server import list_tool_dicts

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("dataforseo-mcp-http")

PROTOCOL_VERSION = "2024-11-05"
SERVER_DISPLAY_NAME = "DataForSEO MCP Server"

# JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class RpcMethod(str, Enum):
    INITIALIZE = "initialize"
    TOOLS_LIST = "tools/list"
    TOOLS_CALL = "tools/call"


class RpcError(Exception):
    """A JSON-RPC error response, with the HTTP status it is sent with"""

    def __init__(self, code: int, message: str, status_code: int, data: Any = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.data = data


def rpc_result(result: Any, request_id: Any) -> JSONResponse:
    return JSONResponse({"jsonrpc": "2.0", "result": result, "id": request_id})


def rpc_error(error: RpcError, request_id: Any) -> JSONResponse:
    body = {"code": error.code, "message": error.message}
    if error.data is not None:
        body["data"] = error.data
    return JSONResponse(
        {"jsonrpc": "2.0", "error": body, "id": request_id},
        status_code=error.status_code,
    )


async def handle_initialize(registry: ToolRegistry, params: Dict[str, Any]):
    return {
        "protocolVersion": PROTOCOL_VERSION,
        "capabilities": {"tools": {}},
        "serverInfo": {"name": SERVER_DISPLAY_NAME, "version": __version__},
    }


async def handle_tools_list(registry: ToolRegistry, params: Dict[str, Any]):
    return {"tools": list_tool_dicts(registry)}


async def handle_tools_call(registry: ToolRegistry, params: Dict[str, Any]):
    name = params.get("name")
    if not isinstance(name, str) or not name:
        raise RpcError(INVALID_PARAMS, "Missing or invalid tool name", 400)

    arguments = params.get("arguments")
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise RpcError(INVALID_PARAMS, "Tool arguments must be an object", 400)

    definition = registry.get(name)
    if definition is None:
        raise RpcError(METHOD_NOT_FOUND, f"Tool not found: {name}", 404)

    try:
        result = await definition.call(arguments)
    except Exception as e:
        logger.error(f"Tool {name} raised: {e}")
        raise RpcError(INTERNAL_ERROR, str(e) or type(e).__name__, 500)
    return result.to_dict()


RPC_HANDLERS = {
    RpcMethod.INITIALIZE: handle_initialize,
    RpcMethod.TOOLS_LIST: handle_tools_list,
    RpcMethod.TOOLS_CALL: handle_tools_call,
}

missing_handlers = set(RpcMethod) - set(RPC_HANDLERS)
if missing_handlers:
    raise RuntimeError(f"No JSON-RPC handler for: {sorted(missing_handlers)}")


async def dispatch(registry: ToolRegistry, envelope: Any) -> JSONResponse:
    """Validate one JSON-RPC envelope and route it to its handler"""
    request_id = envelope.get("id") if isinstance(envelope, dict) else None

    if not isinstance(envelope, dict) or envelope.get("jsonrpc") != "2.0":
        return rpc_error(RpcError(INVALID_REQUEST, "Invalid Request", 400), request_id)

    method_name = envelope.get("method")
    try:
        method = RpcMethod(method_name)
    except ValueError:
        metrics.rpc_requests_total.labels(method="unknown").inc()
        return rpc_error(
            RpcError(METHOD_NOT_FOUND, f"Method not found: {method_name}", 404),
            request_id,
        )

    metrics.rpc_requests_total.labels(method=method.value).inc()

    params = envelope.get("params")
    if params is None:
        params = {}
    if not isinstance(params, dict):
        return rpc_error(
            RpcError(INVALID_PARAMS, "Params must be an object", 400), request_id
        )

    try:
        result = await RPC_HANDLERS[method](registry, params)
    except RpcError as e:
        return rpc_error(e, request_id)
    return rpc_result(result, request_id)


def create_starlette_app(registry: ToolRegistry):
    """Create the Starlette app serving the JSON-RPC bridge for a registry"""

    async def root_handler(request):
        """Service description"""
        return JSONResponse(
            {
                "name": SERVER_DISPLAY_NAME,
                "version": __version__,
                "description": "MCP server for DataForSEO API - OpenAI compatible",
                "endpoints": {
                    "health": "/health",
                    "mcp": "/mcp (POST) - For OpenAI and other MCP clients",
                    "tools": "/tools (GET)",
                },
            }
        )

    async def health_check(request):
        """Health check endpoint"""
        return JSONResponse(
            {
                "status": "healthy",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "service": SERVICE_NAME,
                "version": __version__,
            }
        )

    async def list_tools(request: Request):
        """Tools list outside of JSON-RPC"""
        try:
            tools = list_tool_dicts(request.app.state.registry)
        except Exception as e:
            logger.error(f"Failed to list tools: {e}")
            return JSONResponse(
                {"error": "Failed to list tools", "message": str(e)}, status_code=500
            )
        return JSONResponse({"jsonrpc": "2.0", "result": {"tools": tools}})

    async def handle_mcp(request: Request):
        """Main MCP endpoint - handles JSON-RPC 2.0"""
        try:
            envelope = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return rpc_error(RpcError(PARSE_ERROR, "Parse error", 400), None)

        try:
            return await dispatch(request.app.state.registry, envelope)
        except Exception as e:
            logger.error(f"MCP error: {e}", exc_info=True)
            request_id = envelope.get("id") if isinstance(envelope, dict) else None
            return rpc_error(
                RpcError(INTERNAL_ERROR, "Internal error", 500, data=str(e)),
                request_id,
            )

    routes = [
        Route("/", endpoint=root_handler),
        Route("/health", endpoint=health_check),
        Route("/tools", endpoint=list_tools),
        Route("/mcp", endpoint=handle_mcp, methods=["POST"]),
    ]

    middleware = [
        Middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["Content-Type", "Authorization"],
        )
    ]

    app = Starlette(routes=routes, middleware=middleware)
    app.state.registry = registry
    return app


def serve(settings: Settings, host: Optional[str] = None, port: Optional[int] = None):
    """Build the registry, then start serving; the registry exists before the first request"""
    host = host or settings.host
    port = port or settings.port

    logger.info("Initializing MCP server...")
    registry = build_registry(settings)
    app = create_starlette_app(registry)
    logger.info("MCP server ready for requests")

    if settings.metrics_port:
        metrics_thread = threading.Thread(
            target=metrics.run_metrics_server,
            args=(host, settings.metrics_port),
            daemon=True,
        )
        metrics_thread.start()
        logger.info(
            f"Starting Metrics server on http://{host}:{settings.metrics_port}/metrics"
        )

    logger.info(f"DataForSEO MCP HTTP Server listening on port {port}")
    logger.info(f"Health: http://localhost:{port}/health")
    logger.info(f"MCP: http://localhost:{port}/mcp")
    uvicorn.run(app, host=host, port=port)


def main():
    """Main entry point for the HTTP bridge"""
    parser = argparse.ArgumentParser(description="DataForSEO MCP HTTP Server")
    parser.add_argument("--host", default=None, help="Host for Starlette server")
    parser.add_argument("--port", type=int, default=None, help="Port for Starlette server")
    args = parser.parse_args()

    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error(f"Failed to initialize MCP server: {e}")
        sys.exit(1)

    serve(settings, args.host, args.port)


if __name__ == "__main__":
    main()
