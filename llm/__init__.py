"""Chat-completions client and verdict decoder."""

from llm.client import LLMClient, extract_content
from llm.parser import Ok, StructureInvalid, SyntaxInvalid, decode_verdict

__all__ = [
    "LLMClient",
    "extract_content",
    "decode_verdict",
    "Ok",
    "SyntaxInvalid",
    "StructureInvalid",
]
