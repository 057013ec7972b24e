import logging

import uvicorn
from prometheus_client import Counter, Gauge, generate_latest, CONTENT_TYPE_LATEST
from starlette.applications import Starlette
from starlette.responses import Response
from starlette.routing import Route

logger = logging.getLogger("dataforseo-mcp-metrics")

# Prometheus metrics
tool_calls_total = Counter(
    "dataforseo_mcp_tool_calls_total",
    "Number of tool invocations",
    ["tool", "outcome"],
)
rpc_requests_total = Counter(
    "dataforseo_mcp_rpc_requests_total",
    "Number of JSON-RPC requests received by the HTTP bridge",
    ["method"],
)
registered_tools = Gauge(
    "dataforseo_mcp_registered_tools", "Number of tools in the registry"
)


def create_metrics_app():
    """Create a separate Starlette app just for metrics"""

    async def metrics_endpoint(request):
        """Prometheus metrics endpoint"""
        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

    return Starlette(routes=[Route("/metrics", endpoint=metrics_endpoint)])


def run_metrics_server(host, port):
    """Run a separate metrics server on the specified port"""
    metrics_app = create_metrics_app()
    logger.info(f"Starting metrics server on {host}:{port}")
    uvicorn.run(metrics_app, host=host, port=port)
