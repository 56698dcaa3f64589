"""Request normalization: tool input + config defaults -> ProviderRequest."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING

from gpt5_mcp.models import ProviderRequest, WebSearchPreviewTool

if TYPE_CHECKING:
    from gpt5_mcp.config import Config
    from gpt5_mcp.models import (
        QueryInput,
        ReasoningEffort,
        RequestedEffort,
        ToolChoice,
        ToolDescriptor,
        Verbosity,
    )

log = logging.getLogger(__name__)


def normalize_effort(effort: RequestedEffort | None) -> ReasoningEffort | None:
    """Map the caller-facing ``low`` tier onto the provider's ``minimal``."""
    if not effort:
        return None
    if effort == "low":
        return "minimal"
    return effort


def enforce_web_search_compat(
    effort: ReasoningEffort | None, *, web_enabled: bool
) -> ReasoningEffort | None:
    """Upgrade ``minimal`` effort when web search is on.

    The Responses API rejects web_search tools combined with
    ``reasoning.effort="minimal"``.
    """
    if effort == "minimal" and web_enabled:
        return "medium"
    return effort


@dataclass
class RequestBuilder:
    """Mutable accumulator; each optional field is set only when it resolves."""

    model: str
    input: str
    tool_choice: ToolChoice = "auto"
    parallel_tool_calls: bool = True
    instructions: str | None = None
    tools: list[ToolDescriptor] = field(default_factory=list)
    reasoning_effort: ReasoningEffort | None = None
    verbosity: Verbosity | None = None
    max_output_tokens: int | None = None

    def build(self) -> ProviderRequest:
        return ProviderRequest(
            model=self.model,
            input=self.input,
            tool_choice=self.tool_choice,
            parallel_tool_calls=self.parallel_tool_calls,
            instructions=self.instructions,
            tools=tuple(self.tools) if self.tools else None,
            reasoning_effort=self.reasoning_effort,
            verbosity=self.verbosity,
            max_output_tokens=self.max_output_tokens,
        )


def build_request(query: QueryInput, config: Config) -> ProviderRequest:
    """Build the Responses API request for one tool invocation.

    Per-call values win over config defaults; fields that resolve to nothing
    are left out. Pure and deterministic.

    Args:
        query: Validated tool input.
        config: Process-wide defaults.

    Returns:
        Immutable ProviderRequest ready for ``to_payload()``.
    """
    builder = RequestBuilder(
        model=query.model if query.model is not None else config.model,
        input=query.query,
    )

    # Aliasing must happen before the compatibility check sees the value.
    effort = normalize_effort(query.reasoning_effort or config.reasoning_effort)

    web_search = query.web_search
    web_enabled = (
        web_search.enabled
        if web_search is not None and web_search.enabled is not None
        else config.web_search_default_enabled
    )
    effort = enforce_web_search_compat(effort, web_enabled=web_enabled)

    if web_enabled:
        context_size = (
            web_search.search_context_size if web_search is not None else None
        ) or config.web_search_context_size
        builder.tools.append(WebSearchPreviewTool(search_context_size=context_size))

    if query.tool_choice is not None:
        builder.tool_choice = query.tool_choice
    if query.parallel_tool_calls is not None:
        builder.parallel_tool_calls = query.parallel_tool_calls
    if query.system:
        builder.instructions = query.system
    if effort is not None:
        builder.reasoning_effort = effort
    verbosity = query.verbosity or config.default_verbosity
    if verbosity is not None:
        builder.verbosity = verbosity
    if query.max_output_tokens is not None and query.max_output_tokens > 0:
        builder.max_output_tokens = query.max_output_tokens

    request = builder.build()
    log.debug(
        "Built request: model=%s effort=%s web_search=%s",
        request.model,
        request.reasoning_effort,
        web_enabled,
    )
    return request
