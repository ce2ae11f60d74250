"""Decoding of LLM response text into a typed parity verdict.

The decoder never raises on bad model output. It returns one of three
cases and leaves the policy to the caller:

  * ``Ok``               -- JSON object with the right shape.
  * ``SyntaxInvalid``    -- not JSON at all (recoverable by the caller).
  * ``StructureInvalid`` -- JSON, but not the shape we asked for.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Union

from pydantic import ValidationError

from models.decision import ModelVerdict


@dataclass(frozen=True)
class Ok:
    verdict: ModelVerdict


@dataclass(frozen=True)
class SyntaxInvalid:
    content: str
    error: str


@dataclass(frozen=True)
class StructureInvalid:
    content: str
    errors: list[str] = field(default_factory=list)


Decoded = Union[Ok, SyntaxInvalid, StructureInvalid]


def _reject_constant(name: str) -> float:
    # NaN / Infinity are accepted by json.loads but are not JSON.
    raise ValueError(f"invalid JSON constant {name}")


def _format_errors(exc: ValidationError) -> list[str]:
    return [
        f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
        for err in exc.errors()
    ]


def decode_verdict(content: str, *, require_vibe: bool = False) -> Decoded:
    """Decode the model's text answer.

    The content must be a bare JSON document. Code fences or prose around
    the object make it ``SyntaxInvalid``; no extraction is attempted.

    Args:
        content: Text of the first completion choice.
        require_vibe: Treat a missing or null ``vibe`` as a shape error.

    Returns:
        ``Ok``, ``SyntaxInvalid`` or ``StructureInvalid``.
    """
    try:
        obj = json.loads(content, parse_constant=_reject_constant)
    except ValueError as exc:
        # json.JSONDecodeError is a ValueError subclass
        return SyntaxInvalid(content=content, error=str(exc))

    if not isinstance(obj, dict):
        return StructureInvalid(
            content=content,
            errors=[f"<root>: expected a JSON object, got {type(obj).__name__}"],
        )

    try:
        verdict = ModelVerdict.model_validate(obj)
    except ValidationError as exc:
        return StructureInvalid(content=content, errors=_format_errors(exc))

    if require_vibe and verdict.vibe is None:
        return StructureInvalid(content=content, errors=["vibe: Field required"])

    return Ok(verdict=verdict)
