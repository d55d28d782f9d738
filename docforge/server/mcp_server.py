"""Model Context Protocol server speaking over stdio.

Each registered operation is advertised as an MCP tool with its input
schema. Calls are routed through the registry; failures are raised so the
SDK reports them as tool errors.
"""

from __future__ import annotations

import asyncio
from typing import Any, Sequence

import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from .. import __version__
from ..core.result import OperationResult
from ..core.utils import get_logger
from ..tools import registry
from ..tools.common.interfaces import OperationContext

LOGGER = get_logger("docforge.mcp")

SERVER_NAME = "docforge"


class ToolCallError(RuntimeError):
    """Raised when an operation reports a failure to an MCP client."""


def file_operation_response(message: str, paths: Sequence[Any]) -> str:
    """Wrap a successful file-producing result with a download note."""

    listing = "\n".join(f"- {path}" for path in paths)
    return (
        f"{message}\n\n"
        "The generated file(s) can be downloaded from the following location(s):\n"
        f"{listing}"
    )


def tool_definitions() -> list[types.Tool]:
    return [
        types.Tool(
            name=descriptor["name"],
            description=descriptor["description"],
            inputSchema=descriptor["inputSchema"],
        )
        for descriptor in registry.descriptors()
    ]


def render_result(name: str, result: OperationResult, context: OperationContext) -> str:
    """Turn an operation result into the text sent back to the client."""

    if not result.success:
        raise ToolCallError(result.message)
    tool_class = registry.get(name)
    outputs = context.resources.get("result")
    if tool_class is not None and tool_class.produces_files and outputs:
        return file_operation_response(result.message, outputs)
    return result.message


def call_operation(name: str, arguments: dict[str, Any] | None) -> str:
    context = OperationContext()
    result = registry.dispatch(name, arguments, context=context)
    return render_result(name, result, context)


def create_server() -> Server:
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return tool_definitions()

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        LOGGER.info("MCP call: %s", name)
        text = await asyncio.to_thread(call_operation, name, arguments)
        return [types.TextContent(type="text", text=text)]

    return server


async def serve() -> None:
    server = create_server()
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def run() -> None:
    LOGGER.info("Starting docforge MCP server on stdio")
    asyncio.run(serve())


__all__ = [
    "ToolCallError",
    "call_operation",
    "create_server",
    "file_operation_response",
    "render_result",
    "run",
    "serve",
    "tool_definitions",
]
