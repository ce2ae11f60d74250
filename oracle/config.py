"""Configuration resolution, performed once when an oracle is built."""

from __future__ import annotations

import os

from pydantic import ValidationError

from models.config import OracleConfig
from oracle.errors import ConfigurationError

API_KEY_ENV = "OPENAI_API_KEY"


def resolve_config(api_key: str | None = None, **options) -> OracleConfig:
    """Resolve the API key and build an ``OracleConfig``.

    The key comes from ``api_key`` first, then from ``OPENAI_API_KEY``; an
    empty string counts as missing. Options passed as ``None`` keep their
    defaults, except ``timeout`` where ``None`` disables the timeout.

    Raises:
        ConfigurationError: If no key is resolvable or an option is invalid.
    """
    key = api_key or os.getenv(API_KEY_ENV)
    if not key:
        raise ConfigurationError(
            "OpenAI API key is required. Provide it via api_key or the "
            f"{API_KEY_ENV} environment variable."
        )

    values = {k: v for k, v in options.items() if v is not None or k == "timeout"}
    try:
        return OracleConfig(api_key=key, **values)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid oracle configuration: {exc}") from exc
