"""OracleConfig Pydantic model (frozen, extra=forbid)."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MAX_TOKENS = 500
DEFAULT_TIMEOUT = 600.0


class OracleConfig(BaseModel):
    """Immutable settings owned by a single ParityOracle instance.

    ``max_retries=0`` and ``max_concurrency=None`` keep the plain behaviour:
    one attempt per request and an unbounded batch fan-out.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_key: str = Field(min_length=1, repr=False)
    model: str = Field(default=DEFAULT_MODEL, min_length=1)
    temperature: float = DEFAULT_TEMPERATURE
    vibe: bool = True
    base_url: str = DEFAULT_BASE_URL
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, gt=0)
    timeout: Optional[float] = Field(default=DEFAULT_TIMEOUT, gt=0)
    max_retries: int = Field(default=0, ge=0)
    max_concurrency: Optional[int] = Field(default=None, gt=0)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")
