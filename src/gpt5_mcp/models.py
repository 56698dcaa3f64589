"""Domain models: tool input schema, provider request, and tool result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, Field

RequestedEffort = Literal["low", "minimal", "medium", "high"]
#: Effort tiers the Responses API accepts; ``low`` is aliased away before sending.
ReasoningEffort = Literal["minimal", "medium", "high"]
Verbosity = Literal["low", "medium", "high"]
SearchContextSize = Literal["low", "medium", "high"]
ToolChoice = Literal["auto", "none"]

NO_RESPONSE_TEXT = "No response text available."

# --- Tool input schema (Pydantic wall) ---


class WebSearchOptions(BaseModel):
    """Per-call web search overrides."""

    enabled: bool | None = Field(
        default=None, description="Enable the web_search_preview tool"
    )
    search_context_size: SearchContextSize | None = Field(
        default=None, description="How much search context to retrieve"
    )


class QueryInput(BaseModel):
    """Arguments accepted by the ``gpt5_query`` tool."""

    query: str = Field(min_length=1, description="User question or instruction")
    model: str | None = Field(default=None, description="Model name, e.g. gpt-5")
    system: str | None = Field(
        default=None, description="Optional system prompt/instructions for the model"
    )
    reasoning_effort: RequestedEffort | None = None
    verbosity: Verbosity | None = None
    tool_choice: ToolChoice | None = None
    parallel_tool_calls: bool | None = None
    max_output_tokens: int | None = Field(default=None, gt=0)
    web_search: WebSearchOptions | None = None


# --- Provider request ---


@dataclass(frozen=True)
class WebSearchPreviewTool:
    """Provider-side live web search."""

    search_context_size: SearchContextSize | None = None
    type: Literal["web_search_preview"] = "web_search_preview"

    def to_dict(self) -> dict[str, Any]:
        tool: dict[str, Any] = {"type": self.type}
        if self.search_context_size is not None:
            tool["search_context_size"] = self.search_context_size
        return tool


# Closed set of tool descriptor kinds; extend by adding variants to the union.
ToolDescriptor = WebSearchPreviewTool


@dataclass(frozen=True)
class ProviderRequest:
    """A normalized payload for one Responses API call.

    Optional fields are ``None`` when they did not resolve; ``to_payload``
    leaves them out entirely rather than sending null placeholders.
    """

    model: str
    input: str
    tool_choice: ToolChoice = "auto"
    parallel_tool_calls: bool = True
    instructions: str | None = None
    tools: tuple[ToolDescriptor, ...] | None = None
    reasoning_effort: ReasoningEffort | None = None
    verbosity: Verbosity | None = None
    max_output_tokens: int | None = None

    @property
    def web_search_enabled(self) -> bool:
        return any(isinstance(t, WebSearchPreviewTool) for t in self.tools or ())

    def to_payload(self) -> dict[str, Any]:
        """Return the keyword arguments for ``client.responses.create``."""
        payload: dict[str, Any] = {
            "model": self.model,
            "input": self.input,
            "tool_choice": self.tool_choice,
            "parallel_tool_calls": self.parallel_tool_calls,
        }
        if self.instructions:
            payload["instructions"] = self.instructions
        if self.tools:
            payload["tools"] = [t.to_dict() for t in self.tools]
        if self.reasoning_effort is not None:
            payload["reasoning"] = {"effort": self.reasoning_effort}
        if self.verbosity is not None:
            payload["text"] = {"verbosity": self.verbosity}
        if self.max_output_tokens:
            payload["max_output_tokens"] = self.max_output_tokens
        return payload


# --- Tool result ---


@dataclass(frozen=True)
class TextContent:
    """A single text item in a tool result."""

    text: str
    type: Literal["text"] = "text"


@dataclass(frozen=True)
class ToolResult:
    """What the tool hands back to the protocol layer."""

    content: tuple[TextContent, ...]
    is_error: bool = False

    @classmethod
    def from_text(cls, text: str, *, is_error: bool = False) -> ToolResult:
        return cls(content=(TextContent(text=text),), is_error=is_error)

    @property
    def text(self) -> str:
        return "".join(c.text for c in self.content)
