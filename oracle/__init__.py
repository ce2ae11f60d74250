"""Parity oracle: LLM-backed even/odd classification with a modulo fallback."""

from oracle.errors import (
    ConfigurationError,
    EmptyResponseError,
    InvalidInputError,
    InvalidResponseStructureError,
    ParityOracleError,
)
from oracle.log import configure_logging
from oracle.parity import ParityOracle, is_even

__all__ = [
    "ParityOracle",
    "is_even",
    "configure_logging",
    "ParityOracleError",
    "ConfigurationError",
    "InvalidInputError",
    "EmptyResponseError",
    "InvalidResponseStructureError",
]
