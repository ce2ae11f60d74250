"""Error classes raised by the parity oracle.

Malformed JSON from the model has no class here: it is recovered locally
through the modulo fallback. Network errors from httpx are not wrapped.
"""

from __future__ import annotations


class ParityOracleError(Exception):
    """Base class for all oracle errors."""


class ConfigurationError(ParityOracleError):
    """No API key could be resolved, or an option is invalid."""


class InvalidInputError(ParityOracleError, ValueError):
    """The number to classify is not an integer."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Input must be an integer, got {value!r}")
        self.value = value


class EmptyResponseError(ParityOracleError):
    """The completion succeeded but carried no text content."""


class InvalidResponseStructureError(ParityOracleError):
    """The model returned valid JSON with the wrong shape."""

    def __init__(self, content: str, errors: list[str] | None = None) -> None:
        super().__init__("Invalid response structure from AI")
        self.content = content
        self.errors = errors or []
