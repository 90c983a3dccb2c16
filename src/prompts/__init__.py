"""LLM prompts sharing the scorer's rubric."""
from prompts.builder import PROMPT_KINDS, PromptBuilder
from prompts.generator import (
    clean_ai_response,
    generate_critique_prompt,
    generate_rewrite_prompt,
    generate_scoring_prompt,
)

__all__ = [
    "PROMPT_KINDS",
    "PromptBuilder",
    "generate_scoring_prompt",
    "generate_critique_prompt",
    "generate_rewrite_prompt",
    "clean_ai_response",
]
