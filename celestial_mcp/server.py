# The module binds the dispatcher to the MCP SDK and provides the command-line entry point.
# Date: 2026-10-18
# Version: 1.1.0

import argparse
import asyncio
import sys
from typing import List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from celestial_mcp.core.config import Settings, get_settings
from celestial_mcp.core.dispatcher import Dispatcher, create_dispatcher
from celestial_mcp.core.exceptions import ToolCallError
from celestial_mcp.utils.logger import console


def create_server(dispatcher: Dispatcher, settings: Settings) -> Server:
    """
    Creates the MCP server with the two request handlers it needs:
    tools/list and tools/call.
    """
    server = Server(settings.MCP_SERVER_NAME, version=settings.MCP_SERVER_VERSION)

    @server.list_tools()
    async def handle_list_tools() -> List[types.Tool]:
        return [types.Tool(**definition) for definition in dispatcher.list_tools()]

    @server.call_tool()
    async def handle_call_tool(name: str, arguments: Optional[dict]) -> List[types.TextContent]:
        result = await dispatcher.call(name, arguments)
        if result.is_error:
            # The SDK reports raised exceptions as a result with isError set.
            raise ToolCallError(result.to_text())
        return [types.TextContent(type="text", text=result.to_text())]

    return server


async def serve(settings: Settings):
    """Serves MCP over stdio until the client closes the streams."""
    dispatcher = create_dispatcher(settings)
    server = create_server(dispatcher, settings)
    async with stdio_server() as (read_stream, write_stream):
        console.success(f"MCP server '{settings.MCP_SERVER_NAME}' is listening on stdio.")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="celestial-mcp",
        description="Serve the Celestial Node space-data API as MCP tools.",
    )
    parser.add_argument("--http", action="store_true",
                        help="Serve the REST mirror with uvicorn instead of MCP over stdio.")
    parser.add_argument("--host", default="127.0.0.1", help="Host for --http (default: 127.0.0.1).")
    parser.add_argument("--port", type=int, default=8000, help="Port for --http (default: 8000).")
    parser.add_argument("--log-level", default=None,
                        help="Override LOG_LEVEL from the environment (e.g. DEBUG, WARNING).")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    console.set_level(args.log_level or settings.LOG_LEVEL)

    console.display_data_as_table({
        "api_base": settings.api_base,
        "authenticated": "yes" if settings.has_api_key else "no (anonymous rate limits apply)",
        "transport": f"http://{args.host}:{args.port}" if args.http else "stdio",
        "version": settings.MCP_SERVER_VERSION,
    }, title=settings.MCP_SERVER_NAME)

    try:
        if args.http:
            import uvicorn
            uvicorn.run("celestial_mcp.main:app", host=args.host, port=args.port, log_level="warning")
        else:
            asyncio.run(serve(settings))
    except KeyboardInterrupt:
        console.info("Interrupted, shutting down.")
    except Exception as e:
        console.display_error_panel("Server failed", f"{type(e).__name__}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
