"""Pytest configuration and fixtures.

Provides environment isolation, a fake OpenAI client, and automatic API
test skipping. Isolation fixtures are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass, field
import logging
import os
from typing import Any

import pytest

from gpt5_mcp.config import ENV_VARS, Config

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class FakeResponses:
    """Stands in for ``client.responses``; records every ``create`` call."""

    response: Any = field(default_factory=lambda: {"output_text": "OK"})
    error: BaseException | None = None
    calls: list[dict[str, Any]] = field(default_factory=list)

    async def create(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


@dataclass
class FakeOpenAI:
    """OpenAI client test double exposing only ``responses.create``."""

    responses: FakeResponses = field(default_factory=FakeResponses)

    @classmethod
    def returning(cls, response: Any) -> FakeOpenAI:
        return cls(responses=FakeResponses(response=response))

    @classmethod
    def raising(cls, error: BaseException) -> FakeOpenAI:
        return cls(responses=FakeResponses(error=error))

    @property
    def calls(self) -> list[dict[str, Any]]:
        return self.responses.calls


@pytest.fixture
def fake_openai() -> FakeOpenAI:
    """A client that answers every query with ``output_text="OK"``."""
    return FakeOpenAI()


@pytest.fixture
def config() -> Config:
    """Defaults matching a typical deployment: medium effort, no web search."""
    return Config(
        api_key="sk-test",
        model="gpt-5",
        max_retries=3,
        timeout_ms=60_000,
        reasoning_effort="medium",
        default_verbosity="medium",
        web_search_default_enabled=False,
        web_search_context_size="medium",
    )


@pytest.fixture
def bare_config() -> Config:
    """Config with every optional default unset."""
    return Config(
        api_key="sk-test",
        reasoning_effort=None,
        default_verbosity=None,
        web_search_context_size=None,
    )


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "gpt5_mcp.config.load_dotenv", lambda *_args, **_kwargs: False
        )


@pytest.fixture(autouse=True)
def isolate_provider_env(request, monkeypatch):
    """Ensure a clean configuration environment for each test.

    Clears OPENAI_* and the other config variables to prevent test pollution.
    Opt-out: @pytest.mark.allow_env_pollution or @pytest.mark.api
    """
    if request.node.get_closest_marker("allow_env_pollution") or (
        "api" in request.node.keywords
    ):
        return

    for key in list(os.environ.keys()):
        if key.startswith("OPENAI_"):
            monkeypatch.delenv(key, raising=False)
    for env_var in ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.delenv("GPT5_MCP_LOG_LEVEL", raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)


# =============================================================================
# Pytest Hooks
# =============================================================================

API_TESTS_REASON = "API tests require ENABLE_API_TESTS=1"


def _api_tests_enabled() -> bool:
    return bool(os.getenv("ENABLE_API_TESTS"))


def pytest_collection_modifyitems(items):
    """Automatically skip API tests when not explicitly enabled."""
    if _api_tests_enabled():
        return
    skip_api = pytest.mark.skip(reason=API_TESTS_REASON)
    for item in items:
        if "api" in item.keywords:
            item.add_marker(skip_api)


# Cheapest model in the GPT-5 family for live API tests.
_OPENAI_TEST_MODEL = "gpt-5-nano"


@pytest.fixture
def openai_api_key():
    """Return OPENAI_API_KEY or skip the test if unavailable."""
    key = os.getenv("OPENAI_API_KEY")
    if not key:
        pytest.skip("OPENAI_API_KEY not set")
    return key


@pytest.fixture
def openai_test_model():
    """Return the model to use for OpenAI API tests."""
    return _OPENAI_TEST_MODEL
