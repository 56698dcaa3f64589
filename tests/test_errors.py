from __future__ import annotations

import pytest

from gpt5_mcp.errors import (
    ConfigurationError,
    Gpt5McpError,
    auth_hint,
    describe_error,
    extract_status_code,
)

pytestmark = pytest.mark.unit


def test_configuration_error_carries_hint() -> None:
    err = ConfigurationError("bad", hint="fix it")

    assert isinstance(err, Gpt5McpError)
    assert str(err) == "bad"
    assert err.message == "bad"
    assert err.hint == "fix it"


def test_describe_error_prefers_message_attribute() -> None:
    class _SdkError(Exception):
        def __init__(self) -> None:
            super().__init__("Error code: 429 - {'error': ...}")
            self.message = "rate limited"

    assert describe_error(_SdkError()) == "rate limited"


def test_describe_error_falls_back_to_str_then_unknown() -> None:
    assert describe_error(ValueError("nope")) == "nope"
    assert describe_error(ValueError()) == "Unknown error"


def test_extract_status_code_walks_cause_chain() -> None:
    class _Resp:
        status_code = 503

    class _HttpError(Exception):
        response = _Resp()

    try:
        try:
            raise _HttpError("upstream")
        except _HttpError as inner:
            raise RuntimeError("wrapped") from inner
    except RuntimeError as outer:
        assert extract_status_code(outer) == 503

    assert extract_status_code(RuntimeError("plain")) is None


def test_auth_hint_only_for_auth_statuses() -> None:
    assert auth_hint(401) is not None
    assert auth_hint(403) is not None
    assert auth_hint(429) is None
    assert auth_hint(None) is None
