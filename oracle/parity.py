"""Parity oracle: asks a chat-completion model whether an integer is even.

Orchestrates input validation, prompt building, the LLM call, response
decoding and the modulo fallback into ``ParityOracle.classify``.
"""

from __future__ import annotations

import asyncio
import logging
import math
import numbers
from decimal import Decimal
from typing import Any, Iterable

import httpx

from llm.client import LLMClient, extract_content
from llm.parser import StructureInvalid, SyntaxInvalid, decode_verdict
from models.config import DEFAULT_TIMEOUT, OracleConfig
from models.result import ParityResult
from oracle.config import resolve_config
from oracle.errors import (
    EmptyResponseError,
    InvalidInputError,
    InvalidResponseStructureError,
)
from oracle.prompts import build_messages

logger = logging.getLogger("oracle")


def validate_number(value: Any) -> int:
    """Return ``value`` as an int, or raise ``InvalidInputError``.

    Integral floats, fractions and decimals such as ``4.0``,
    ``Fraction(4, 1)`` or ``Decimal("4")`` are accepted; bools, strings,
    NaN, infinities and fractional values are not.
    """
    if isinstance(value, bool):
        raise InvalidInputError(value)
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Rational) and value.denominator == 1:
        return int(value)
    if isinstance(value, Decimal) and value.is_finite() and value == value.to_integral_value():
        return int(value)
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    raise InvalidInputError(value)


def fallback_result(number: int, *, vibe: bool = True) -> ParityResult:
    """Compute parity locally, used when the model's answer is not JSON."""
    remainder = number % 2
    is_even = remainder == 0
    return ParityResult(
        number=number,
        is_even=is_even,
        confidence=1.0,
        reasoning=f"Mathematical calculation: {number} % 2 = {remainder}",
        vibe=(
            "The AI was feeling mysterious, but math says this number is "
            f"{'even' if is_even else 'odd'} ⚡"
            if vibe
            else None
        ),
    )


def _clamp(value: float) -> float:
    # compare before converting: a huge JSON int does not fit in a float
    if value <= 0:
        return 0.0
    if value >= 1:
        return 1.0
    return float(value)


class ParityOracle:
    """Client that delegates parity checks to a chat-completion model.

    The API key is resolved at construction, from ``api_key`` or the
    ``OPENAI_API_KEY`` environment variable; ``ConfigurationError`` is
    raised right away if neither is set. No request is made until
    ``classify`` is awaited.

    The model's ``isEven`` answer is returned as given. Only output that
    fails to parse as JSON is replaced by the local modulo result.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        model: str | None = None,
        temperature: float | None = None,
        vibe: bool | None = None,
        base_url: str | None = None,
        timeout: float | None = DEFAULT_TIMEOUT,
        max_retries: int | None = None,
        max_concurrency: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        config = resolve_config(
            api_key,
            model=model,
            temperature=temperature,
            vibe=vibe,
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            max_concurrency=max_concurrency,
        )
        self._setup(config, transport)

    @classmethod
    def from_config(
        cls,
        config: OracleConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "ParityOracle":
        """Build an oracle from an already resolved ``OracleConfig``."""
        oracle = cls.__new__(cls)
        oracle._setup(config, transport)
        return oracle

    def _setup(
        self, config: OracleConfig, transport: httpx.AsyncBaseTransport | None
    ) -> None:
        self._config = config
        self._client = LLMClient(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
            max_retries=config.max_retries,
            transport=transport,
        )

    @property
    def config(self) -> OracleConfig:
        return self._config

    def __repr__(self) -> str:
        return f"ParityOracle(model={self._config.model!r}, vibe={self._config.vibe})"

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    async def classify(self, number: Any) -> ParityResult:
        """Ask the model whether ``number`` is even.

        Returns:
            A ``ParityResult`` with confidence clamped to [0, 1]. When the
            model's text is not JSON, the modulo fallback with confidence 1.0.

        Raises:
            InvalidInputError: ``number`` is not an integer (no request made).
            EmptyResponseError: The completion had no text content.
            InvalidResponseStructureError: Valid JSON with the wrong shape.
            httpx.HTTPError: Any transport or HTTP status failure, unchanged.
        """
        number = validate_number(number)
        cfg = self._config

        resp = await self._client.chat_completions(
            messages=build_messages(number, vibe=cfg.vibe),
            model=cfg.model,
            temperature=cfg.temperature,
            max_tokens=cfg.max_tokens,
        )

        usage = resp.get("usage") if isinstance(resp, dict) else None
        usage = usage if isinstance(usage, dict) else {}
        logger.info(
            "llm_call",
            extra={
                "number": number,
                "model": cfg.model,
                "prompt_tokens": usage.get("prompt_tokens", 0),
                "completion_tokens": usage.get("completion_tokens", 0),
            },
        )

        content = extract_content(resp)
        if content is None:
            raise EmptyResponseError("No response from OpenAI")

        decoded = decode_verdict(content, require_vibe=cfg.vibe)
        if isinstance(decoded, SyntaxInvalid):
            logger.warning(
                "invalid JSON from LLM, using fallback",
                extra={"number": number},
            )
            return fallback_result(number, vibe=cfg.vibe)
        if isinstance(decoded, StructureInvalid):
            logger.warning(
                "LLM response structure invalid",
                extra={"number": number, "errors": decoded.errors},
            )
            raise InvalidResponseStructureError(decoded.content, decoded.errors)

        verdict = decoded.verdict
        return ParityResult(
            number=number,
            is_even=verdict.is_even,
            confidence=_clamp(verdict.confidence),
            reasoning=verdict.reasoning,
            vibe=verdict.vibe,
        )

    async def classify_many(self, values: Iterable[Any]) -> list[ParityResult]:
        """Classify every number concurrently, results in input order.

        All inputs are validated before any request is sent. The batch is
        all-or-nothing: the first failure is raised and the calls still in
        flight are cancelled. Without ``max_concurrency`` every call starts
        at once.
        """
        checked = [validate_number(v) for v in values]
        if not checked:
            return []

        limit = self._config.max_concurrency
        semaphore = asyncio.Semaphore(limit) if limit is not None else None

        async def _run(n: int) -> ParityResult:
            if semaphore is None:
                return await self.classify(n)
            async with semaphore:
                return await self.classify(n)

        tasks = [asyncio.ensure_future(_run(n)) for n in checked]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            raise


async def is_even(number: Any, api_key: str | None = None, **options) -> ParityResult:
    """Classify a single number with a short-lived ``ParityOracle``.

    Takes the same options as ``ParityOracle``.
    """
    oracle = ParityOracle(api_key, **options)
    return await oracle.classify(number)
