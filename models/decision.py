"""Pydantic model for the LLM's parity verdict.

Used by ``llm.parser.decode_verdict`` after the content has parsed as JSON.
Types are strict: ``"true"`` is not a bool and ``true`` is not a number, so a
payload with the wrong shape is rejected instead of coerced.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr


class ModelVerdict(BaseModel):
    """Allowed shape for the model's JSON answer.

    isEven: the model's parity claim, trusted as-is.
    confidence: any JSON number; clamped later, not here.
    reasoning: free text.
    vibe: decorative text, only required when the oracle asks for it.

    A ``number`` echoed back by the model is ignored with the other extras.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    is_even: StrictBool = Field(alias="isEven")
    confidence: Union[StrictInt, StrictFloat]
    reasoning: StrictStr
    vibe: Optional[StrictStr] = None
