"""System and user prompt construction for the parity oracle."""

from __future__ import annotations


# ---------------------------------------------------------------------------
# System prompt
# ---------------------------------------------------------------------------

SYSTEM_PROMPT = "You are a helpful assistant that responds only with valid JSON objects."


# ---------------------------------------------------------------------------
# User prompt
# ---------------------------------------------------------------------------

_USER_PROMPT = """\
You are a mystical number whisperer with deep mathematical intuition.

Your task is to determine if the number {number} is even or odd using your AI vibes and mathematical wisdom.

Please respond with a JSON object containing:
{fields}

{guidance}

Example format:
{example}"""

_FIELDS = [
    "- isEven: boolean (true if even, false if odd)",
    "- confidence: number between 0 and 1 (how confident you are)",
    "- reasoning: string (your mathematical reasoning)",
]
_VIBE_FIELD = "- vibe: string (describe the mystical vibe/energy you get from this number)"

_EXAMPLE = """\
{{
  "isEven": true,
  "confidence": 0.95,
  "reasoning": "The number divides evenly by 2 with no remainder"{vibe_line}
}}"""
_VIBE_EXAMPLE = ',\n  "vibe": "This number radiates balanced, harmonious energy ✨"'


def build_system_prompt() -> str:
    """Return the system prompt string."""
    return SYSTEM_PROMPT


def build_user_prompt(number: int, *, vibe: bool = True) -> str:
    """Build the user message asking the model to classify ``number``.

    Lists the required JSON fields (``vibe`` only when enabled) and ends
    with an example payload to steer the formatting.
    """
    fields = list(_FIELDS)
    if vibe:
        fields.append(_VIBE_FIELD)
        guidance = (
            "Be creative with your reasoning and vibe description, "
            "but ensure the mathematical answer is correct."
        )
    else:
        guidance = "Be creative with your reasoning, but ensure the mathematical answer is correct."

    example = _EXAMPLE.format(vibe_line=_VIBE_EXAMPLE if vibe else "")
    return _USER_PROMPT.format(
        number=number,
        fields="\n".join(fields),
        guidance=guidance,
        example=example,
    )


def build_messages(number: int, *, vibe: bool = True) -> list[dict]:
    """Return the ``[system, user]`` message list for one classification."""
    return [
        {"role": "system", "content": build_system_prompt()},
        {"role": "user", "content": build_user_prompt(number, vibe=vibe)},
    ]
