"""
Prompts Module - prompt templates for completion calls.
"""

from homeai.ai.prompts.intent_prompts import (
    INTENT_EXTRACTION_PROMPT,
    INTENT_STOP_SEQUENCES,
    build_intent_prompt,
)

__all__ = [
    "INTENT_EXTRACTION_PROMPT",
    "INTENT_STOP_SEQUENCES",
    "build_intent_prompt",
]
