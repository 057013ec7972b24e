import sys
import asyncio
import logging

import mcp.server.stdio

from ..config import ConfigurationError, load_settings
from ..tools import build_registry
from .server import create_server, get_initialization_options

# Configure logging (stderr, stdout carries the protocol)
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("dataforseo-mcp-stdio")


async def run_stdio_server(server, get_initialization_options):
    """Run the server using stdin/stdout streams"""
    logger.info("Starting stdio server")
    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            get_initialization_options(),
        )


async def serve(settings):
    registry = build_registry(settings)
    server_instance = create_server(registry)

    logger.info("DataForSEO MCP Server starting...")
    await run_stdio_server(
        server_instance, lambda: get_initialization_options(server_instance)
    )


def main(settings=None):
    """Main entry point for the stdio server"""
    try:
        settings = settings or load_settings()
    except ConfigurationError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    asyncio.run(serve(settings))


if __name__ == "__main__":
    main()
