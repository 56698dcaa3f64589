"""Configuration: frozen process-wide defaults resolved once at startup.

Values come from environment variables (optionally seeded from a ``.env``
file). ``Settings`` is the validation wall; ``Config`` is the immutable
payload handed to the request normalizer and the client factory.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator

from gpt5_mcp.errors import ConfigurationError
from gpt5_mcp.models import RequestedEffort, SearchContextSize, Verbosity

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_MODEL = "gpt-5"
DEFAULT_MAX_RETRIES = 3
DEFAULT_TIMEOUT_MS = 60_000

# Config field -> environment variable
ENV_VARS: dict[str, str] = {
    "api_key": "OPENAI_API_KEY",
    "model": "OPENAI_MODEL",
    "max_retries": "OPENAI_MAX_RETRIES",
    "timeout_ms": "OPENAI_TIMEOUT_MS",
    "reasoning_effort": "REASONING_EFFORT",
    "default_verbosity": "DEFAULT_VERBOSITY",
    "web_search_default_enabled": "WEB_SEARCH_DEFAULT_ENABLED",
    "web_search_context_size": "WEB_SEARCH_CONTEXT_SIZE",
}


class Settings(BaseModel):
    """Schema for environment-sourced configuration.

    Pydantic's lax mode handles string coercion for ints and booleans
    (``"1"``, ``"true"``, ``"yes"``, ``"on"``).
    """

    api_key: SecretStr | None = None
    model: str = Field(default=DEFAULT_MODEL, min_length=1)
    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=0)
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
    reasoning_effort: RequestedEffort | None = "medium"
    default_verbosity: Verbosity | None = "medium"
    web_search_default_enabled: bool = False
    web_search_context_size: SearchContextSize | None = "medium"

    @field_validator("model", mode="before")
    @classmethod
    def normalize_model(cls, v: Any) -> Any:
        """Trim surrounding whitespace on model identifiers."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("api_key", mode="before")
    @classmethod
    def normalize_api_key(cls, v: Any) -> Any:
        """Trim whitespace and map empty keys to None."""
        if isinstance(v, SecretStr):
            v = v.get_secret_value()
        if isinstance(v, str):
            s = v.strip()
            return SecretStr(s) if s else None
        return v

    @field_validator(
        "reasoning_effort",
        "default_verbosity",
        "web_search_context_size",
        mode="before",
    )
    @classmethod
    def normalize_choice(cls, v: Any) -> Any:
        """Accept any casing for enum-like values."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


@dataclass(frozen=True)
class Config:
    """Immutable defaults for every ``gpt5_query`` invocation.

    Example:
        config = Config(model="gpt-5", web_search_default_enabled=True)
    """

    api_key: str | None = None
    model: str = DEFAULT_MODEL
    max_retries: int = DEFAULT_MAX_RETRIES
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    reasoning_effort: RequestedEffort | None = "medium"
    default_verbosity: Verbosity | None = "medium"
    web_search_default_enabled: bool = False
    web_search_context_size: SearchContextSize | None = "medium"

    def __post_init__(self) -> None:
        """Validate numeric fields."""
        if not self.model:
            raise ConfigurationError(
                "model must be a non-empty string",
                hint=f"Set {ENV_VARS['model']}, e.g. {DEFAULT_MODEL!r}.",
            )
        if self.max_retries < 0:
            raise ConfigurationError(
                f"max_retries must be ≥ 0, got {self.max_retries}",
                hint="This is passed straight to the OpenAI client.",
            )
        if self.timeout_ms <= 0:
            raise ConfigurationError(
                f"timeout_ms must be > 0, got {self.timeout_ms}",
                hint="The request timeout is given in milliseconds.",
            )

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key)

    @property
    def timeout_s(self) -> float:
        """Request timeout in seconds, as the OpenAI client expects it."""
        return self.timeout_ms / 1000

    def __str__(self) -> str:
        """Return a representation with the API key redacted."""
        fields = []
        for name in self.__dataclass_fields__:
            value = getattr(self, name)
            if name == "api_key" and value:
                fields.append(f"{name}='[REDACTED]'")
            else:
                fields.append(f"{name}={value!r}")
        return f"Config({', '.join(fields)})"

    __repr__ = __str__


def load_env(env: Mapping[str, str]) -> dict[str, str]:
    """Collect configuration values from *env*, skipping unset and blank ones."""
    raw: dict[str, str] = {}
    for field_name, env_var in ENV_VARS.items():
        value = env.get(env_var)
        if value is None or not value.strip():
            continue
        raw[field_name] = value
    return raw


def load_config(env: Mapping[str, str] | None = None) -> Config:
    """Resolve configuration from the environment.

    Args:
        env: Mapping to read instead of ``os.environ``. When omitted, a
            ``.env`` file in the working directory is loaded first.

    Returns:
        Frozen Config. A missing API key is allowed here; callers decide
        whether to warn.

    Raises:
        ConfigurationError: If any value fails validation.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    raw = load_env(env)
    try:
        settings = Settings.model_validate(raw)
    except ValidationError as e:
        first = e.errors()[0]
        loc = first.get("loc") or ("",)
        env_var = ENV_VARS.get(str(loc[0]), str(loc[0]))
        raise ConfigurationError(
            f"Invalid value for {env_var}: {first.get('msg', 'invalid')}",
            hint=f"Check {env_var} in your environment or .env file.",
        ) from e

    api_key = settings.api_key.get_secret_value() if settings.api_key else None
    return Config(
        api_key=api_key,
        model=settings.model,
        max_retries=settings.max_retries,
        timeout_ms=settings.timeout_ms,
        reasoning_effort=settings.reasoning_effort,
        default_verbosity=settings.default_verbosity,
        web_search_default_enabled=settings.web_search_default_enabled,
        web_search_context_size=settings.web_search_context_size,
    )
