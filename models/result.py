"""ParityResult Pydantic model returned by every classify call."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ParityResult(BaseModel):
    """Outcome of one parity classification.

    ``number`` is always the integer the caller asked about. ``vibe`` is
    ``None`` when the oracle runs without the decorative field.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    number: int
    is_even: bool
    confidence: float = Field(ge=0.0, le=1.0)
    reasoning: str
    vibe: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase wire shape, e.g. ``{"number": 4, "isEven": true, ...}``."""
        return self.model_dump(by_alias=True, exclude_none=True)
