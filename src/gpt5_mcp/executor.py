"""Query execution: one Responses API call per tool invocation."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
import logging
from typing import TYPE_CHECKING, Any

from gpt5_mcp.errors import auth_hint, describe_error, extract_status_code
from gpt5_mcp.models import NO_RESPONSE_TEXT, ToolResult
from gpt5_mcp.request import build_request

if TYPE_CHECKING:
    from gpt5_mcp.config import Config
    from gpt5_mcp.models import QueryInput

log = logging.getLogger(__name__)


def extract_output_text(response: Any) -> str | None:
    """Return ``output_text`` when the response carries it as a string.

    SDK responses expose it as an attribute; fakes and raw payloads may be
    plain mappings.
    """
    if isinstance(response, Mapping):
        value = response.get("output_text")
    else:
        value = getattr(response, "output_text", None)
    return value if isinstance(value, str) else None


async def run_query(client: Any, query: QueryInput, config: Config) -> str:
    """Send one query and return the response text or the fallback string.

    Provider errors propagate; see ``execute_query`` for the absorbing variant.
    """
    request = build_request(query, config)
    response = await client.responses.create(**request.to_payload())
    text = extract_output_text(response)
    return text or NO_RESPONSE_TEXT


async def execute_query(client: Any, query: QueryInput, config: Config) -> ToolResult:
    """Run a query and report any provider failure as an error result."""
    try:
        text = await run_query(client, query, config)
    except asyncio.CancelledError:
        raise
    except Exception as e:
        status_code = extract_status_code(e)
        status_note = f" (status={status_code})" if status_code is not None else ""
        log.error("Error calling OpenAI API%s: %s", status_note, e, exc_info=True)
        hint = auth_hint(status_code)
        if hint:
            log.warning(hint)
        return ToolResult.from_text(f"Error: {describe_error(e)}", is_error=True)
    return ToolResult.from_text(text)
