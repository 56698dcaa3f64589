"""MCP server exposing the ``gpt5_query`` tool."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent

from gpt5_mcp.executor import execute_query
from gpt5_mcp.models import QueryInput

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from gpt5_mcp.config import Config
    from gpt5_mcp.models import ToolResult

SERVER_NAME = "gpt5-mcp"
TOOL_NAME = "gpt5_query"
TOOL_DESCRIPTION = (
    "Query GPT-5 with optional Web Search Preview. "
    "Supports verbosity and reasoning effort."
)


def to_call_tool_result(result: ToolResult) -> CallToolResult:
    """Convert an executor result into the MCP wire type."""
    return CallToolResult(
        content=[TextContent(type="text", text=c.text) for c in result.content],
        isError=result.is_error,
    )


def make_query_handler(
    config: Config, client: Any
) -> Callable[[QueryInput], Awaitable[CallToolResult]]:
    """Bind *config* and *client* into the tool handler.

    Provider failures come back as ``isError`` results, never as exceptions,
    so one failed query cannot take the server down.
    """

    async def gpt5_query(input: QueryInput) -> CallToolResult:  # noqa: A002
        result = await execute_query(client, input, config)
        return to_call_tool_result(result)

    return gpt5_query


def build_server(config: Config, client: Any) -> FastMCP:
    """Create the MCP server with the query tool registered."""
    server = FastMCP(SERVER_NAME)
    server.add_tool(
        make_query_handler(config, client),
        name=TOOL_NAME,
        description=TOOL_DESCRIPTION,
        structured_output=False,
    )
    return server
