"""gpt5-mcp: GPT-5 queries as a Model Context Protocol tool.

Public API:
    - Config / load_config(): process-wide defaults
    - QueryInput: tool input schema
    - build_request(): tool input + config -> ProviderRequest
    - run_query() / execute_query(): one Responses API call
    - build_server(): FastMCP server with the gpt5_query tool
"""

from __future__ import annotations

import logging

from gpt5_mcp.config import Config, load_config
from gpt5_mcp.errors import ConfigurationError, Gpt5McpError
from gpt5_mcp.executor import execute_query, run_query
from gpt5_mcp.models import (
    NO_RESPONSE_TEXT,
    ProviderRequest,
    QueryInput,
    ToolResult,
    WebSearchOptions,
    WebSearchPreviewTool,
)
from gpt5_mcp.request import build_request

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("gpt5-mcp")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("gpt5_mcp").addHandler(logging.NullHandler())

__all__ = [
    "NO_RESPONSE_TEXT",
    "Config",
    "ConfigurationError",
    "Gpt5McpError",
    "ProviderRequest",
    "QueryInput",
    "ToolResult",
    "WebSearchOptions",
    "WebSearchPreviewTool",
    "build_request",
    "execute_query",
    "load_config",
    "run_query",
]
