import sys
import json
import dataclasses
import logging
import argparse

from ..config import ConfigurationError, load_settings

# Configure logging for the main script
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("dataforseo-mcp")

CREDENTIAL_PLACEHOLDERS = {
    "DATAFORSEO_LOGIN": "<your_login>",
    "DATAFORSEO_PASSWORD": "<your_password>",
}


def build_config_snippets():
    """MCP client configuration for the installed script and for a source checkout"""
    installed = {
        "mcpServers": {
            "dataforseo": {
                "command": "dataforseo-mcp",
                "args": ["--transport", "stdio"],
                "env": dict(CREDENTIAL_PLACEHOLDERS),
            }
        }
    }
    module = {
        "mcpServers": {
            "dataforseo": {
                "command": sys.executable,
                "args": ["-m", "dataforseo_mcp.servers.local"],
                "env": dict(CREDENTIAL_PLACEHOLDERS),
            }
        }
    }
    return installed, module


def print_config_snippet(out=None):
    """Print ready-to-paste configuration for Claude Desktop and Cursor"""
    out = out or sys.stdout
    installed, module = build_config_snippets()

    def emit(line=""):
        print(line, file=out)

    emit("=" * 80)
    emit("MCP CLIENT CONFIGURATION FOR DATAFORSEO SERVER")
    emit("=" * 80)
    emit()
    emit("Copy one of the JSON configurations below into your MCP client:")
    emit("  - Claude Desktop: Settings > Developer > claude_desktop_config.json")
    emit("  - Cursor: Settings > MCP > add server")
    emit()
    emit("OPTION 1: Installed package")
    emit("=" * 50)
    emit(json.dumps(installed, indent=2))
    emit()
    emit("OPTION 2: Python module (current interpreter)")
    emit("=" * 50)
    emit(json.dumps(module, indent=2))
    emit()
    emit("Replace <your_login> and <your_password> with your DataForSEO API credentials.")
    emit("Optionally add LOCALFALCON_API_KEY (and LOCALFALCON_API_URL) to enable Local Falcon.")
    emit("Restrict the tool set with ENABLED_MODULES or ENABLED_TOOLS.")
    emit("=" * 80)


def main(argv=None):
    """Parse arguments and launch the DataForSEO MCP server"""
    parser = argparse.ArgumentParser(description="DataForSEO MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="stdio for desktop clients, http for the JSON-RPC bridge",
    )
    parser.add_argument("--host", default=None, help="Host for the HTTP server")
    parser.add_argument("--port", type=int, default=None, help="Port for the HTTP server")
    parser.add_argument(
        "--metrics-port",
        type=int,
        default=None,
        help="Port for the Prometheus metrics server (0 disables it)",
    )
    parser.add_argument(
        "--config-snippet",
        "--config",
        action="store_true",
        help="Print MCP client configuration and exit",
    )

    args = parser.parse_args(argv)

    if args.config_snippet:
        print_config_snippet()
        return 0

    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error(f"Error: {e}")
        return 1

    if args.metrics_port is not None:
        settings = dataclasses.replace(settings, metrics_port=args.metrics_port)

    if args.transport == "http":
        from .remote import serve

        logger.info("Starting DataForSEO MCP HTTP server")
        serve(settings, args.host, args.port)
    else:
        from .local import main as local_main

        local_main(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
